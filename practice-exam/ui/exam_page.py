import streamlit as st

from config import get_exam_title
from services.exam_controller import ExamController
from ui.question_inputs import render_question_input
from ui.shared_ui import FOOTER_TEXT, render_badges, render_prompt


def render_exam_page(controller: ExamController):
    """Render the current question with its input widgets and the navigation row."""
    question = controller.current_question()
    total = controller.question_count

    # Filled after the inputs so the counter includes this run's edits
    header = st.container()

    st.divider()
    render_badges(
        question.category,
        question.type_label,
        f"Question {controller.current_index + 1} of {total}",
    )
    render_prompt(question.prompt)
    render_question_input(question, controller.current_answer(), controller)

    st.divider()
    col1, col2 = st.columns(2)
    with col1:
        if st.button("Previous", key="nav_prev", disabled=controller.is_first(), use_container_width=True):
            controller.previous()
            st.rerun()
    with col2:
        if controller.is_last():
            if st.button("Submit Exam", key="nav_submit", type="primary", use_container_width=True):
                controller.submit()
                st.rerun()
        else:
            if st.button("Next", key="nav_next", type="primary", use_container_width=True):
                controller.next()
                st.rerun()

    st.caption(FOOTER_TEXT)

    with header:
        title_col, count_col = st.columns([3, 1])
        with title_col:
            st.title(get_exam_title())
        with count_col:
            st.markdown(f"**{controller.answered_count()} / {total} answered**")
        st.progress(controller.progress())
