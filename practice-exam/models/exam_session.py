from dataclasses import dataclass, field
from enum import Enum
from typing import List

from models.question import Answer


class ExamState(Enum):
    """The two states an exam session can be in."""
    IN_PROGRESS = "in_progress"
    SUBMITTED = "submitted"


@dataclass
class ExamSession:
    """
    Mutable state of one exam attempt.

    answers is positional: answers[i] belongs to the i-th question of the bank,
    None meaning "not answered yet".
    """
    question_count: int
    current_index: int = 0
    answers: List[Answer] = field(default_factory=list)
    submitted: bool = False
    attempt: int = 1
    widget_epoch: int = 0  # bumped when rendered widgets must drop their cached values

    def __post_init__(self):
        if not self.answers:
            self.answers = [None] * self.question_count

    @property
    def state(self) -> ExamState:
        return ExamState.SUBMITTED if self.submitted else ExamState.IN_PROGRESS
