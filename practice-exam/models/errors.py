class ExamError(Exception):
    """Base exception for practice exam errors."""
    pass


class QuestionBankError(ExamError):
    """Raised when the static question bank breaks its id/position contract."""
    pass


class AnswerShapeError(ExamError):
    """Raised in strict mode when an answer does not fit the current question's type."""
    pass
