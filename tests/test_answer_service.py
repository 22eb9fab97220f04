"""
Unit tests for answer presence, positional lists, entity edits and shape checks.
"""
import unittest

from models.question import Entity, QuestionType
from services.answer_service import (
    SHAPE_VALIDATORS,
    add_entity,
    entity_list,
    is_answered,
    positional_answers,
    remove_entity,
    update_entity,
    validate_answer_shape,
    word_count,
)
from services.question_bank import get_question


class TestIsAnswered(unittest.TestCase):

    def test_absent_marker(self):
        self.assertFalse(is_answered(None))

    def test_option_zero_is_present(self):
        self.assertTrue(is_answered(0))

    def test_strings(self):
        self.assertFalse(is_answered(""))
        self.assertFalse(is_answered(" \n\t"))
        self.assertTrue(is_answered(" x "))

    def test_string_lists(self):
        self.assertFalse(is_answered([]))
        self.assertFalse(is_answered(["", "  "]))
        self.assertTrue(is_answered(["", "no"]))

    def test_entity_lists_count_even_when_empty_fields(self):
        self.assertTrue(is_answered([Entity()]))


class TestPositionalAnswers(unittest.TestCase):

    def test_absent_answer_gives_blanks(self):
        self.assertEqual(positional_answers(None, 3), ["", "", ""])

    def test_pads_and_truncates(self):
        self.assertEqual(positional_answers(["a"], 3), ["a", "", ""])
        self.assertEqual(positional_answers(["a", "b", "c"], 2), ["a", "b"])

    def test_non_list_answer_ignored(self):
        self.assertEqual(positional_answers("text", 2), ["", ""])


class TestWordCount(unittest.TestCase):

    def test_counts_whitespace_runs_once(self):
        self.assertEqual(word_count("  penguin   learns\n\nto  skydive "), 4)

    def test_empty(self):
        self.assertEqual(word_count(""), 0)
        self.assertEqual(word_count("   "), 0)


class TestEntityEdits(unittest.TestCase):

    def test_add_appends_empty_row(self):
        self.assertEqual(add_entity(None), [Entity("", "")])

    def test_edits_do_not_mutate_input(self):
        rows = [Entity("Samira", "PERSON")]
        add_entity(rows)
        update_entity(rows, 0, surface="OpenAI")
        remove_entity(rows, 0)
        self.assertEqual(rows, [Entity("Samira", "PERSON")])

    def test_update_single_field(self):
        rows = update_entity([Entity("Samira", "")], 0, label="PERSON")
        self.assertEqual(rows, [Entity("Samira", "PERSON")])

    def test_out_of_range_is_ignored(self):
        rows = [Entity("a", "DATE")]
        self.assertEqual(remove_entity(rows, 3), rows)
        self.assertEqual(update_entity(rows, -1, surface="b"), rows)

    def test_entity_list_filters_other_shapes(self):
        self.assertEqual(entity_list("text"), [])


class TestShapeValidation(unittest.TestCase):

    def test_every_type_has_a_validator(self):
        self.assertEqual(set(SHAPE_VALIDATORS), set(QuestionType))

    def test_none_always_valid(self):
        for index in (0, 30, 32, 36):
            self.assertTrue(validate_answer_shape(get_question(index), None))

    def test_multiple_choice(self):
        q = get_question(0)
        self.assertTrue(validate_answer_shape(q, 3))
        self.assertFalse(validate_answer_shape(q, 4))
        self.assertFalse(validate_answer_shape(q, True))
        self.assertFalse(validate_answer_shape(q, "AI"))

    def test_positional_lists(self):
        self.assertTrue(validate_answer_shape(get_question(30), ["no", "NO"]))
        self.assertFalse(validate_answer_shape(get_question(31), "text"))

    def test_entities(self):
        q = get_question(32)
        self.assertTrue(validate_answer_shape(q, [Entity("Samira", "PERSON")]))
        self.assertFalse(validate_answer_shape(q, ["Samira"]))

    def test_text_types(self):
        self.assertTrue(validate_answer_shape(get_question(36), "AI"))
        self.assertFalse(validate_answer_shape(get_question(35), 1))


if __name__ == '__main__':
    unittest.main()
