from typing import Callable, Dict

import streamlit as st

from config import get_exam_title
from logger import logger
from models.question import QuestionType
from services.exam_controller import ExamController
from services.review_service import (
    NO_ENTITIES,
    UNKNOWN_TYPE,
    QuestionReview,
    build_reviews,
    create_review_markdown,
)
from ui.shared_ui import render_badges, render_bullets, render_prompt

log = logger.getChild("results")


def _render_options_review(review: QuestionReview):
    for opt in review.options:
        if opt.is_correct and opt.is_user_choice:
            st.success(f"{opt.text} (Correct Answer, Your Answer)")
        elif opt.is_correct:
            st.info(f"{opt.text} (Correct Answer)")
        elif opt.is_user_choice:
            st.error(f"{opt.text} (Your Answer)")
        else:
            st.write(opt.text)


def _render_subtasks_review(review: QuestionReview):
    for subtask in review.subtasks:
        st.markdown(f"{subtask.id}. {subtask.instruction}")
        st.markdown(f"Your answer: **{subtask.user_text}**")
        if subtask.expected is not None:
            st.markdown(f"Expected: **{subtask.expected}**")


def _render_sub_questions_review(review: QuestionReview):
    for sub_question in review.sub_questions:
        st.markdown(f"**{sub_question.prompt}**")
        st.write(sub_question.user_text)
        render_bullets("Key points to cover:", sub_question.expected_key_points)


def _render_entities_review(review: QuestionReview):
    st.markdown("**Your entities:**")
    if review.user_entities:
        for entity in review.user_entities:
            st.markdown(f"- {entity.surface} `{entity.label}`")
    else:
        st.write(NO_ENTITIES)
    st.markdown("**Expected entities:**")
    for entity in review.expected_entities:
        st.markdown(f"- {entity.surface} `{entity.label}`")


def _render_text_review(review: QuestionReview):
    st.code(review.user_text, language=None)


REVIEW_RENDERERS: Dict[QuestionType, Callable[[QuestionReview], None]] = {
    QuestionType.MULTIPLE_CHOICE: _render_options_review,
    QuestionType.INSTRUCTION_FOLLOWING: _render_subtasks_review,
    QuestionType.READING_COMPREHENSION: _render_sub_questions_review,
    QuestionType.NER_TAGGING: _render_entities_review,
    QuestionType.EVALUATION: _render_text_review,
    QuestionType.WRITING: _render_text_review,
    QuestionType.CODING: _render_text_review,
    QuestionType.SHORT_ANSWER: _render_text_review,
}


def render_question_review(question_type, review: QuestionReview):
    render_badges(review.category, review.type_label)
    render_prompt(f"Question {review.number}: {review.prompt}")

    renderer = REVIEW_RENDERERS.get(question_type)
    if renderer is None or review.unknown_type:
        st.warning(UNKNOWN_TYPE)
        return
    st.markdown("**Your Answer:**")
    renderer(review)

    if review.explanation:
        st.markdown("**Explanation:**")
        st.write(review.explanation)
    render_bullets("Expected key findings:", review.expected_key_findings)
    render_bullets("Better answer hints:", review.better_answer_hints)
    render_bullets("Expected coverage:", review.expected_coverage)
    if review.expected_answers:
        st.markdown("**Expected answer(s):**")
        for expected in review.expected_answers:
            st.code(expected, language=None)


def render_results_page(controller: ExamController):
    """Render the post-submit review of every question."""
    st.title("Exam Results")
    st.success("Exam Complete - Review Your Answers Below")

    answers = controller.session.answers
    col1, col2 = st.columns(2)
    with col1:
        if st.button("Retake Exam", key="retake_exam", type="primary", use_container_width=True):
            controller.restart()
            st.rerun()
    with col2:
        st.download_button(
            "Download review",
            data=create_review_markdown(controller.questions, answers, title=get_exam_title()),
            file_name="exam_review.md",
            mime="text/markdown",
            key="download_review",
            use_container_width=True,
        )

    st.markdown("---")
    reviews = build_reviews(controller.questions, answers)
    for question, review in zip(controller.questions, reviews):
        with st.container(border=True):
            render_question_review(getattr(question, "type", None), review)
    log.debug(f"Rendered review of {len(reviews)} questions")
