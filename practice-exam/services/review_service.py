from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Sequence, Tuple
import json

from logger import logger
from models.question import (
    Answer,
    CodingQuestion,
    Entity,
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
from services.answer_service import entity_list, positional_answers

log = logger.getChild("review")

BLANK = "(blank)"
NO_ANSWER = "(no answer)"
NO_ENTITIES = "(no entities tagged)"
UNKNOWN_TYPE = "Unknown question type"


@dataclass(frozen=True)
class OptionReview:
    text: str
    is_correct: bool
    is_user_choice: bool


@dataclass(frozen=True)
class SubtaskReview:
    id: str
    instruction: str
    user_text: str
    expected: Optional[str] = None  # None when the subtask defines no expected text


@dataclass(frozen=True)
class SubQuestionReview:
    id: str
    prompt: str
    user_text: str
    expected_key_points: Tuple[str, ...] = ()


@dataclass
class QuestionReview:
    """Everything the results page shows for one question. Sections unused by a type stay empty."""
    number: int
    category: str
    type_label: str
    prompt: str
    explanation: Optional[str] = None
    user_text: Optional[str] = None
    options: List[OptionReview] = field(default_factory=list)
    subtasks: List[SubtaskReview] = field(default_factory=list)
    sub_questions: List[SubQuestionReview] = field(default_factory=list)
    user_entities: List[Entity] = field(default_factory=list)
    expected_entities: List[Entity] = field(default_factory=list)
    expected_key_findings: Tuple[str, ...] = ()
    better_answer_hints: Tuple[str, ...] = ()
    expected_coverage: Tuple[str, ...] = ()
    expected_answers: Tuple[str, ...] = ()
    unknown_type: bool = False


def _text_or(answer: Answer, placeholder: str) -> str:
    return answer if isinstance(answer, str) and answer else placeholder


def _review_multiple_choice(q: MultipleChoiceQuestion, answer: Answer, review: QuestionReview) -> None:
    correct = set(q.correct_indices)
    review.options = [
        OptionReview(text=opt, is_correct=i in correct, is_user_choice=answer == i and not isinstance(answer, bool))
        for i, opt in enumerate(q.options)
    ]


def _review_instruction_following(q: InstructionFollowingQuestion, answer: Answer, review: QuestionReview) -> None:
    texts = positional_answers(answer, len(q.subtasks))
    review.subtasks = [
        SubtaskReview(
            id=subtask.id,
            instruction=subtask.instruction,
            user_text=texts[i] or BLANK,
            expected=None if subtask.expected is None else (subtask.expected or BLANK),
        )
        for i, subtask in enumerate(q.subtasks)
    ]


def _review_reading_comprehension(q: ReadingComprehensionQuestion, answer: Answer, review: QuestionReview) -> None:
    texts = positional_answers(answer, len(q.questions))
    review.sub_questions = [
        SubQuestionReview(
            id=sq.id,
            prompt=sq.prompt,
            user_text=texts[i] or NO_ANSWER,
            expected_key_points=tuple(sq.expected_key_points or ()),
        )
        for i, sq in enumerate(q.questions)
    ]


def _review_ner_tagging(q: NerTaggingQuestion, answer: Answer, review: QuestionReview) -> None:
    review.user_entities = entity_list(answer)
    review.expected_entities = list(q.expected_entities)


def _review_evaluation(q: EvaluationQuestion, answer: Answer, review: QuestionReview) -> None:
    review.user_text = _text_or(answer, NO_ANSWER)
    review.expected_key_findings = tuple(q.expected_key_findings)
    review.better_answer_hints = tuple(q.better_answer_hints or ())


def _review_writing(q: WritingQuestion, answer: Answer, review: QuestionReview) -> None:
    review.user_text = _text_or(answer, NO_ANSWER)
    review.expected_coverage = tuple(q.expected_coverage or ())


def _review_coding(q: CodingQuestion, answer: Answer, review: QuestionReview) -> None:
    review.user_text = _text_or(answer, NO_ANSWER)


def _review_short_answer(q: ShortAnswerQuestion, answer: Answer, review: QuestionReview) -> None:
    review.user_text = _text_or(answer, NO_ANSWER)
    review.expected_answers = q.expected_answers


REVIEW_BUILDERS: Dict[QuestionType, Callable[[Question, Answer, QuestionReview], None]] = {
    QuestionType.MULTIPLE_CHOICE: _review_multiple_choice,
    QuestionType.INSTRUCTION_FOLLOWING: _review_instruction_following,
    QuestionType.READING_COMPREHENSION: _review_reading_comprehension,
    QuestionType.NER_TAGGING: _review_ner_tagging,
    QuestionType.EVALUATION: _review_evaluation,
    QuestionType.WRITING: _review_writing,
    QuestionType.CODING: _review_coding,
    QuestionType.SHORT_ANSWER: _review_short_answer,
}


def build_review(question: Question, answer: Answer, number: Optional[int] = None) -> QuestionReview:
    """
    Put the stored answer next to the expected content for one question.

    No verdicts are computed here; the record only carries what the results page
    shows. `number` is the 1-based position and defaults to the question id.
    """
    question_type = getattr(question, "type", None)
    review = QuestionReview(
        number=question.id if number is None else number,
        category=question.category,
        type_label=question_type.label if isinstance(question_type, QuestionType) else str(question_type),
        prompt=question.prompt,
        explanation=question.explanation,
    )
    builder = REVIEW_BUILDERS.get(question_type)
    if builder is None:
        log.warning(f"No review builder for question {question.id} of type {question_type!r}")
        review.unknown_type = True
        return review
    builder(question, answer, review)
    return review


def build_reviews(questions: Sequence[Question], answers: Sequence[Answer]) -> List[QuestionReview]:
    return [build_review(q, answers[i] if i < len(answers) else None, number=i + 1) for i, q in enumerate(questions)]


def _bullets(items) -> str:
    return "".join(f"- {item}\n" for item in items)


def create_review_markdown(questions: Sequence[Question], answers: Sequence[Answer], title: str = "Exam Review") -> str:
    """Create a markdown document of the whole review, one section per question."""
    text = f"# {title}\n\n"
    for review in build_reviews(questions, answers):
        text += f"## Question {review.number}: {review.prompt}\n\n"
        text += f"*{review.category}* | *{review.type_label}*\n\n"
        if review.unknown_type:
            text += f"{UNKNOWN_TYPE}\n\n"
            continue

        text += "**Your Answer:**\n\n"
        if review.options:
            for opt in review.options:
                marks = []
                if opt.is_correct:
                    marks.append("Correct Answer")
                if opt.is_user_choice:
                    marks.append("Your Answer")
                suffix = f" ({', '.join(marks)})" if marks else ""
                text += f"- {opt.text}{suffix}\n"
            text += "\n"
        for subtask in review.subtasks:
            text += f"- {subtask.id}. {subtask.instruction}\n  - Your answer: {subtask.user_text}\n"
            if subtask.expected is not None:
                text += f"  - Expected: {subtask.expected}\n"
        if review.subtasks:
            text += "\n"
        for sq in review.sub_questions:
            text += f"- {sq.prompt}\n  - {sq.user_text}\n"
            for kp in sq.expected_key_points:
                text += f"  - Key point: {kp}\n"
        if review.sub_questions:
            text += "\n"
        if review.expected_entities:
            if review.user_entities:
                text += _bullets(f"{e.surface} - {e.label}" for e in review.user_entities)
            else:
                text += f"{NO_ENTITIES}\n"
            text += "\n**Expected entities:**\n\n"
            text += _bullets(f"{e.surface} - {e.label}" for e in review.expected_entities)
            text += "\n"
        if review.user_text is not None:
            text += f"```\n{review.user_text}\n```\n\n"

        if review.explanation:
            text += f"**Explanation:** {review.explanation}\n\n"
        for heading, items in (
            ("Expected key findings", review.expected_key_findings),
            ("Better answer hints", review.better_answer_hints),
            ("Expected coverage", review.expected_coverage),
            ("Expected answer(s)", [json.dumps(a) for a in review.expected_answers]),
        ):
            if items:
                text += f"**{heading}:**\n\n{_bullets(items)}\n"
    return text
