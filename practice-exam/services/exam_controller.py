"""
Exam session controller.

Owns the state transitions of one ExamSession: navigation, answer capture,
submit and restart. Transitions that do not apply in the current state are
no-ops that return False; valid ones return True.
"""
from typing import Callable, Optional, Sequence

from config import strict_answers_enabled
from logger import logger
from models.errors import AnswerShapeError
from models.exam_session import ExamSession, ExamState
from models.question import Answer, Question
from services.answer_service import is_answered, validate_answer_shape
from services.question_bank import get_questions

log = logger.getChild("controller")


class ExamController:
    """
    Drives an ExamSession over an ordered question sequence.

    The session is passed in rather than created here so the Streamlit page can
    keep it in st.session_state across reruns.
    """

    def __init__(
        self,
        session: Optional[ExamSession] = None,
        questions: Optional[Sequence[Question]] = None,
        strict: Optional[Callable[[], bool]] = None,
    ):
        self.questions = tuple(questions) if questions is not None else get_questions()
        self.session = session if session is not None else ExamSession(question_count=len(self.questions))
        self._strict = strict if strict is not None else strict_answers_enabled

    # State ---------------------------------------------------------------

    @property
    def state(self) -> ExamState:
        return self.session.state

    @property
    def question_count(self) -> int:
        return len(self.questions)

    @property
    def current_index(self) -> int:
        return self.session.current_index

    def current_question(self) -> Question:
        return self.questions[self.session.current_index]

    def current_answer(self) -> Answer:
        return self.session.answers[self.session.current_index]

    def is_first(self) -> bool:
        return self.session.current_index == 0

    def is_last(self) -> bool:
        return self.session.current_index == self.question_count - 1

    def _in_progress(self, action: str) -> bool:
        if self.session.submitted:
            log.warning(f"Ignored {action}: exam already submitted")
            return False
        return True

    # Navigation ----------------------------------------------------------

    def next(self) -> bool:
        if not self._in_progress("next"):
            return False
        if self.is_last():
            log.debug("Ignored next: already at the last question")
            return False
        self.session.current_index += 1
        log.debug(f"Moved to question {self.session.current_index + 1}")
        return True

    def previous(self) -> bool:
        if not self._in_progress("previous"):
            return False
        if self.is_first():
            log.debug("Ignored previous: already at the first question")
            return False
        self.session.current_index -= 1
        log.debug(f"Moved to question {self.session.current_index + 1}")
        return True

    # Answers -------------------------------------------------------------

    def set_answer(self, value: Answer) -> bool:
        """
        Store `value` for the current question, replacing whatever was there.

        Never moves the position and never touches other slots. With strict
        answers enabled a value of the wrong shape raises AnswerShapeError.
        """
        if not self._in_progress("set_answer"):
            return False
        question = self.current_question()
        if self._strict() and not validate_answer_shape(question, value):
            raise AnswerShapeError(
                f"Answer of type {type(value).__name__} does not fit {question.type.value} question {question.id}"
            )
        self.session.answers[self.session.current_index] = value
        log.debug(f"Stored answer for question {question.id}")
        return True

    def invalidate_widgets(self) -> None:
        """Force input widgets to re-read stored answers on the next render."""
        self.session.widget_epoch += 1

    # Lifecycle -----------------------------------------------------------

    def submit(self) -> bool:
        if not self._in_progress("submit"):
            return False
        self.session.submitted = True
        log.info(f"Exam submitted with {self.answered_count()}/{self.question_count} answered")
        return True

    def restart(self) -> bool:
        if not self.session.submitted:
            log.warning("Ignored restart: exam is still in progress")
            return False
        self.session.current_index = 0
        self.session.answers = [None] * self.question_count
        self.session.question_count = self.question_count
        self.session.submitted = False
        self.session.attempt += 1
        self.session.widget_epoch = 0
        log.info(f"Exam restarted, attempt {self.session.attempt}")
        return True

    # Metrics -------------------------------------------------------------

    def progress(self) -> float:
        return (self.session.current_index + 1) / self.question_count

    def answered_count(self) -> int:
        return sum(1 for answer in self.session.answers if is_answered(answer))
