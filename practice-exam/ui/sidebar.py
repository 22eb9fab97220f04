import streamlit as st

from config import get_exam_title
from services.answer_service import is_answered
from services.exam_controller import ExamController


def create_sidebar(controller: ExamController):
    # Status only; moving between questions stays on the Previous/Next buttons
    st.sidebar.markdown(f"### {get_exam_title()}")
    st.sidebar.markdown('---')
    total = controller.question_count
    st.sidebar.write(f"Answered: {controller.answered_count()} / {total}")
    if controller.session.submitted:
        st.sidebar.success("Submitted")
    else:
        st.sidebar.progress(controller.progress(), text=f"Question {controller.current_index + 1} of {total}")

    lines = []
    for i, (question, answer) in enumerate(zip(controller.questions, controller.session.answers)):
        marker = "✅" if is_answered(answer) else "⬜"
        current = " ◀" if i == controller.current_index and not controller.session.submitted else ""
        lines.append(f"{marker} {i + 1}. {question.type_label}{current}")
    with st.sidebar.expander("Question status", expanded=False):
        st.markdown("  \n".join(lines))
    st.sidebar.markdown('---')
    st.sidebar.caption("Answers are kept for this browser session only.")
