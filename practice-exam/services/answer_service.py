from typing import Callable, Dict, List

from models.question import Answer, Entity, MultipleChoiceQuestion, Question, QuestionType


def is_answered(answer: Answer) -> bool:
    """
    Presence rule used for the answered counter and the sidebar.

    None is the only "absent" marker for scalars, so option index 0 counts.
    Strings need non-blank content. Lists of strings need at least one non-blank
    element; entity lists count as soon as a row exists.
    """
    if answer is None:
        return False
    if isinstance(answer, str):
        return bool(answer.strip())
    if isinstance(answer, list):
        if not answer:
            return False
        if all(isinstance(item, str) for item in answer):
            return any(item.strip() for item in answer)
        return True
    return True


def positional_answers(answer: Answer, length: int) -> List[str]:
    """Return the stored answer as a list of exactly `length` strings, padding with ''."""
    values = list(answer) if isinstance(answer, list) else []
    values = [v if isinstance(v, str) else "" for v in values[:length]]
    return values + [""] * (length - len(values))


def word_count(text: str) -> int:
    # str.split() with no argument already drops empty tokens
    return len(text.split()) if text else 0


# Entity list edits. Each returns a new list so the stored answer is replaced wholesale.
def entity_list(answer: Answer) -> List[Entity]:
    if not isinstance(answer, list):
        return []
    return [e for e in answer if isinstance(e, Entity)]


def add_entity(answer: Answer) -> List[Entity]:
    return entity_list(answer) + [Entity()]


def remove_entity(answer: Answer, position: int) -> List[Entity]:
    entities = entity_list(answer)
    if 0 <= position < len(entities):
        del entities[position]
    return entities


def update_entity(answer: Answer, position: int, surface: str = None, label: str = None) -> List[Entity]:
    entities = entity_list(answer)
    if 0 <= position < len(entities):
        current = entities[position]
        entities[position] = Entity(
            surface=current.surface if surface is None else surface,
            label=current.label if label is None else label,
        )
    return entities


def _is_option_index(question: MultipleChoiceQuestion, value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and 0 <= value < len(question.options)


def _is_text_list(question: Question, value) -> bool:
    return isinstance(value, list) and all(isinstance(v, str) for v in value)


def _is_entity_list(question: Question, value) -> bool:
    return isinstance(value, list) and all(isinstance(v, Entity) for v in value)


def _is_text(question: Question, value) -> bool:
    return isinstance(value, str)


SHAPE_VALIDATORS: Dict[QuestionType, Callable[[Question, Answer], bool]] = {
    QuestionType.MULTIPLE_CHOICE: _is_option_index,
    QuestionType.INSTRUCTION_FOLLOWING: _is_text_list,
    QuestionType.READING_COMPREHENSION: _is_text_list,
    QuestionType.NER_TAGGING: _is_entity_list,
    QuestionType.EVALUATION: _is_text,
    QuestionType.WRITING: _is_text,
    QuestionType.CODING: _is_text,
    QuestionType.SHORT_ANSWER: _is_text,
}


def validate_answer_shape(question: Question, value: Answer) -> bool:
    """True when `value` fits the answer shape of the question's type. None always fits."""
    if value is None:
        return True
    validator = SHAPE_VALIDATORS.get(getattr(question, "type", None))
    if validator is None:
        return False
    return validator(question, value)
