"""
Streamlit input renderers, one per question type.

Every renderer reads the stored answer, draws its widgets pre-filled from it,
and writes the widget values back through the controller when they differ.
Widget keys carry the attempt number and widget epoch so a restart or an
entity removal starts from fresh widgets instead of stale browser state.
"""
import json
from typing import Callable, Dict

import streamlit as st

from logger import logger
from models.question import (
    Answer,
    CodingQuestion,
    EvaluationQuestion,
    InstructionFollowingQuestion,
    MultipleChoiceQuestion,
    NerTaggingQuestion,
    Question,
    QuestionType,
    ReadingComprehensionQuestion,
    ShortAnswerQuestion,
    WritingQuestion,
)
from services.answer_service import (
    add_entity,
    entity_list,
    positional_answers,
    remove_entity,
    update_entity,
    word_count,
)
from services.exam_controller import ExamController
from ui.shared_ui import render_bullets

log = logger.getChild("inputs")

UNKNOWN_TYPE_TEXT = "Unknown question type"
SELECT_LABEL = "Select label"


def widget_key(controller: ExamController, question: Question, suffix: str) -> str:
    session = controller.session
    return f"a{session.attempt}-e{session.widget_epoch}-q{question.id}-{suffix}"


def _store_if_changed(controller: ExamController, stored: Answer, value: Answer):
    if value != stored:
        controller.set_answer(value)


def render_multiple_choice_input(question: MultipleChoiceQuestion, answer: Answer, controller: ExamController):
    valid = isinstance(answer, int) and not isinstance(answer, bool) and 0 <= answer < len(question.options)
    selected = st.radio(
        label="Select your answer:",
        options=range(len(question.options)),
        format_func=lambda i: question.options[i],
        index=answer if valid else None,
        key=widget_key(controller, question, "choice"),
    )
    if selected is not None:
        _store_if_changed(controller, answer, selected)


def render_instruction_following_input(question: InstructionFollowingQuestion, answer: Answer, controller: ExamController):
    render_bullets("Constraints:", question.constraints)
    stored = positional_answers(answer, len(question.subtasks))
    values = [
        st.text_input(
            f"{subtask.id}. {subtask.instruction}",
            value=stored[i],
            placeholder="Your answer",
            key=widget_key(controller, question, f"subtask-{i}"),
        )
        for i, subtask in enumerate(question.subtasks)
    ]
    if values != stored:
        controller.set_answer(values)


def render_reading_comprehension_input(question: ReadingComprehensionQuestion, answer: Answer, controller: ExamController):
    st.markdown("**Passage:**")
    st.info(question.passage)
    stored = positional_answers(answer, len(question.questions))
    values = [
        st.text_area(
            f"{i + 1}. {sub_question.prompt}",
            value=stored[i],
            height=100,
            placeholder="Your answer (1-3 sentences)",
            key=widget_key(controller, question, f"sub-{i}"),
        )
        for i, sub_question in enumerate(question.questions)
    ]
    if values != stored:
        controller.set_answer(values)


def render_ner_tagging_input(question: NerTaggingQuestion, answer: Answer, controller: ExamController):
    st.markdown("**Text to annotate:**")
    st.info(question.text)
    st.markdown("**Available labels:** " + " ".join(f"`{label}`" for label in question.label_set))
    st.markdown("Add entities (surface text and label):")

    label_options = [""] + list(question.label_set)
    stored = entity_list(answer)
    updated = list(stored)
    removed = None
    for i, entity in enumerate(stored):
        col1, col2, col3 = st.columns([3, 2, 1])
        with col1:
            surface = st.text_input(
                f"Entity {i + 1} text",
                value=entity.surface,
                placeholder="Entity text",
                label_visibility="collapsed",
                key=widget_key(controller, question, f"surface-{i}"),
            )
        with col2:
            label = st.selectbox(
                f"Entity {i + 1} label",
                options=label_options,
                index=label_options.index(entity.label) if entity.label in label_options else 0,
                format_func=lambda value: value or SELECT_LABEL,
                label_visibility="collapsed",
                key=widget_key(controller, question, f"label-{i}"),
            )
        with col3:
            if st.button("Remove", key=widget_key(controller, question, f"remove-{i}")):
                removed = i
        updated = update_entity(updated, i, surface=surface, label=label)

    if removed is not None:
        controller.set_answer(remove_entity(updated, removed))
        # Row widgets are keyed by position, so every remaining row must be redrawn
        controller.invalidate_widgets()
        st.rerun()
    if st.button("Add Entity", key=widget_key(controller, question, "add")):
        controller.set_answer(add_entity(updated))
        st.rerun()
    if updated != stored:
        controller.set_answer(updated)


def render_evaluation_input(question: EvaluationQuestion, answer: Answer, controller: ExamController):
    st.markdown("**User Prompt:**")
    st.info(question.case.user_prompt)
    st.markdown("**Model Response:**")
    st.warning(question.case.model_response)
    _render_text_answer(
        question, answer, controller,
        label="Your Evaluation (2-3 sentences):",
        placeholder="Evaluate for accuracy, helpfulness, and safety...",
        height=120,
    )


def render_writing_input(question: WritingQuestion, answer: Answer, controller: ExamController):
    limit_text = f"Word limit: {question.word_limit.max} words max"
    if question.word_limit.min:
        limit_text += f" (minimum {question.word_limit.min})"
    st.caption(limit_text)
    text = _render_text_answer(
        question, answer, controller,
        label="Your response",
        placeholder="Write your response here...",
        height=220,
    )
    st.caption(f"Current: {word_count(text)} words")


def render_coding_input(question: CodingQuestion, answer: Answer, controller: ExamController):
    details = f"**Language:** {question.language}"
    if question.function_name:
        details += f" &nbsp; **Function:** `{question.function_name}`"
    st.markdown(details)
    if question.starter_code:
        st.markdown("**Starter Code:**")
        st.code(question.starter_code, language=question.language)
    if question.tests:
        st.markdown("**Test Cases:**")
        for test in question.tests:
            line = f"Input: {json.dumps(list(test.input))} : Output: {json.dumps(test.expected_output)}"
            if test.description:
                line += f"  ({test.description})"
            st.text(line)
    _render_text_answer(
        question, answer, controller,
        label="Your code",
        placeholder="Write your code here...",
        height=260,
    )


def render_short_answer_input(question: ShortAnswerQuestion, answer: Answer, controller: ExamController):
    _render_text_answer(
        question, answer, controller,
        label="Your answer",
        placeholder="Enter your answer...",
        height=120,
    )


def _render_text_answer(question: Question, answer: Answer, controller: ExamController,
                        label: str, placeholder: str, height: int) -> str:
    stored = answer if isinstance(answer, str) else ""
    text = st.text_area(
        label,
        value=stored,
        height=height,
        placeholder=placeholder,
        key=widget_key(controller, question, "text"),
    )
    if text != stored:
        controller.set_answer(text)
    return text


INPUT_RENDERERS: Dict[QuestionType, Callable[[Question, Answer, ExamController], None]] = {
    QuestionType.MULTIPLE_CHOICE: render_multiple_choice_input,
    QuestionType.INSTRUCTION_FOLLOWING: render_instruction_following_input,
    QuestionType.READING_COMPREHENSION: render_reading_comprehension_input,
    QuestionType.NER_TAGGING: render_ner_tagging_input,
    QuestionType.EVALUATION: render_evaluation_input,
    QuestionType.WRITING: render_writing_input,
    QuestionType.CODING: render_coding_input,
    QuestionType.SHORT_ANSWER: render_short_answer_input,
}


def render_question_input(question: Question, answer: Answer, controller: ExamController):
    renderer = INPUT_RENDERERS.get(getattr(question, "type", None))
    if renderer is None:
        log.warning(f"No input renderer for question {question.id}")
        st.warning(UNKNOWN_TYPE_TEXT)
        return
    renderer(question, answer, controller)
