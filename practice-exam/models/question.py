from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Optional, Tuple, Union


class QuestionType(str, Enum):
    """Closed set of question variants. Every dispatch table is keyed by these members."""
    MULTIPLE_CHOICE = "multiple_choice"
    INSTRUCTION_FOLLOWING = "instruction_following"
    READING_COMPREHENSION = "reading_comprehension"
    NER_TAGGING = "ner_tagging"
    EVALUATION = "evaluation"
    WRITING = "writing"
    CODING = "coding"
    SHORT_ANSWER = "short_answer"

    @property
    def label(self) -> str:
        return self.value.replace("_", " ")


@dataclass(frozen=True)
class RubricCriterion:
    name: str
    points: int
    description: str


@dataclass(frozen=True)
class Rubric:
    # Carried as data only; nothing scores against it
    criteria: Tuple[RubricCriterion, ...]
    passing_score: int


@dataclass(frozen=True)
class Entity:
    """A tagged span: the surface text and its label. Used for expected and user-entered entities."""
    surface: str = ""
    label: str = ""


@dataclass(frozen=True)
class Subtask:
    id: str
    instruction: str
    expected: Optional[str] = None
    points: Optional[int] = None


@dataclass(frozen=True)
class SubQuestion:
    id: str
    prompt: str
    expected_key_points: Optional[Tuple[str, ...]] = None
    points: Optional[int] = None


@dataclass(frozen=True)
class EvaluationCase:
    user_prompt: str
    model_response: str


@dataclass(frozen=True)
class WordLimit:
    max: int
    min: Optional[int] = None


@dataclass(frozen=True)
class CodingTest:
    id: str
    input: Tuple[Any, ...]
    expected_output: Any
    description: Optional[str] = None


@dataclass(frozen=True, kw_only=True)
class BaseQuestion:
    """Fields shared by every variant. `type` is fixed per subclass."""
    type: ClassVar[QuestionType]

    id: int
    category: str
    prompt: str
    explanation: Optional[str] = None
    max_points: Optional[int] = None
    time_limit_sec: Optional[int] = None  # present in data, never enforced

    @property
    def type_label(self) -> str:
        return self.type.label


@dataclass(frozen=True, kw_only=True)
class MultipleChoiceQuestion(BaseQuestion):
    type: ClassVar[QuestionType] = QuestionType.MULTIPLE_CHOICE
    options: Tuple[str, ...]
    correct: Union[int, Tuple[int, ...]]

    @property
    def correct_indices(self) -> Tuple[int, ...]:
        if isinstance(self.correct, int):
            return (self.correct,)
        return tuple(self.correct)


@dataclass(frozen=True, kw_only=True)
class InstructionFollowingQuestion(BaseQuestion):
    type: ClassVar[QuestionType] = QuestionType.INSTRUCTION_FOLLOWING
    subtasks: Tuple[Subtask, ...]
    constraints: Optional[Tuple[str, ...]] = None
    rubric: Optional[Rubric] = None


@dataclass(frozen=True, kw_only=True)
class ReadingComprehensionQuestion(BaseQuestion):
    type: ClassVar[QuestionType] = QuestionType.READING_COMPREHENSION
    passage: str
    questions: Tuple[SubQuestion, ...]
    rubric: Optional[Rubric] = None


@dataclass(frozen=True, kw_only=True)
class NerTaggingQuestion(BaseQuestion):
    type: ClassVar[QuestionType] = QuestionType.NER_TAGGING
    text: str
    label_set: Tuple[str, ...]
    expected_entities: Tuple[Entity, ...]


@dataclass(frozen=True, kw_only=True)
class EvaluationQuestion(BaseQuestion):
    type: ClassVar[QuestionType] = QuestionType.EVALUATION
    case: EvaluationCase
    expected_key_findings: Tuple[str, ...]
    better_answer_hints: Optional[Tuple[str, ...]] = None
    rubric: Optional[Rubric] = None


@dataclass(frozen=True, kw_only=True)
class WritingQuestion(BaseQuestion):
    type: ClassVar[QuestionType] = QuestionType.WRITING
    word_limit: WordLimit
    expected_coverage: Optional[Tuple[str, ...]] = None
    rubric: Optional[Rubric] = None


@dataclass(frozen=True, kw_only=True)
class CodingQuestion(BaseQuestion):
    type: ClassVar[QuestionType] = QuestionType.CODING
    language: str  # python, javascript, typescript, java, c++
    tests: Tuple[CodingTest, ...] = field(default_factory=tuple)
    starter_code: Optional[str] = None
    function_name: Optional[str] = None


@dataclass(frozen=True, kw_only=True)
class ShortAnswerQuestion(BaseQuestion):
    type: ClassVar[QuestionType] = QuestionType.SHORT_ANSWER
    expected_answer: Union[str, Tuple[str, ...]]

    @property
    def expected_answers(self) -> Tuple[str, ...]:
        if isinstance(self.expected_answer, str):
            return (self.expected_answer,)
        return tuple(self.expected_answer)


Question = Union[
    MultipleChoiceQuestion,
    InstructionFollowingQuestion,
    ReadingComprehensionQuestion,
    NerTaggingQuestion,
    EvaluationQuestion,
    WritingQuestion,
    CodingQuestion,
    ShortAnswerQuestion,
]

# What a single answer slot can hold. None is the "not answered yet" marker.
Answer = Union[None, int, str, list]
