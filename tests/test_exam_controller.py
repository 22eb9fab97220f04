"""
Unit tests for ExamController state transitions and metrics.
"""
import unittest
from unittest.mock import patch

from models.errors import AnswerShapeError
from models.exam_session import ExamSession, ExamState
from models.question import Entity
from services.answer_service import add_entity, remove_entity, update_entity
from services.exam_controller import ExamController
from services.question_bank import get_question, question_count
from services.review_service import build_review


def make_controller(strict=False):
    return ExamController(strict=lambda: strict)


def go_to(controller, index):
    while controller.current_index < index:
        controller.next()


class TestInitialState(unittest.TestCase):

    def test_fresh_session(self):
        controller = make_controller()
        self.assertEqual(controller.state, ExamState.IN_PROGRESS)
        self.assertEqual(controller.current_index, 0)
        self.assertEqual(controller.session.answers, [None] * 47)
        self.assertEqual(controller.answered_count(), 0)

    def test_wraps_existing_session(self):
        session = ExamSession(question_count=question_count(), current_index=5)
        controller = ExamController(session, strict=lambda: False)
        self.assertIs(controller.session, session)
        self.assertEqual(controller.current_question().id, 6)


class TestNavigation(unittest.TestCase):

    def setUp(self):
        self.controller = make_controller()

    def test_next_then_previous_is_identity(self):
        go_to(self.controller, 10)
        self.assertTrue(self.controller.next())
        self.assertTrue(self.controller.previous())
        self.assertEqual(self.controller.current_index, 10)

    def test_previous_at_first_is_noop(self):
        self.assertFalse(self.controller.previous())
        self.assertEqual(self.controller.current_index, 0)

    def test_next_at_last_is_noop(self):
        go_to(self.controller, 46)
        self.assertTrue(self.controller.is_last())
        self.assertFalse(self.controller.next())
        self.assertEqual(self.controller.current_index, 46)

    def test_progress_bounds(self):
        self.assertAlmostEqual(self.controller.progress(), 1 / 47)
        go_to(self.controller, 46)
        self.assertEqual(self.controller.progress(), 1.0)

    def test_navigation_keeps_answers(self):
        self.controller.set_answer(2)
        self.controller.next()
        self.controller.previous()
        self.assertEqual(self.controller.current_answer(), 2)


class TestSetAnswer(unittest.TestCase):

    def setUp(self):
        self.controller = make_controller()

    def test_overwrites_only_current_slot(self):
        go_to(self.controller, 3)
        self.controller.set_answer(1)
        self.controller.set_answer(3)
        answers = self.controller.session.answers
        self.assertEqual(answers[3], 3)
        self.assertEqual(sum(1 for a in answers if a is not None), 1)
        self.assertEqual(self.controller.current_index, 3)

    def test_option_zero_counts_as_answered(self):
        self.controller.set_answer(0)
        self.assertEqual(self.controller.answered_count(), 1)

    def test_blank_text_is_not_answered(self):
        go_to(self.controller, 36)
        self.controller.set_answer("   ")
        self.assertEqual(self.controller.answered_count(), 0)
        self.controller.set_answer("AI")
        self.assertEqual(self.controller.answered_count(), 1)

    def test_any_shape_stored_when_not_strict(self):
        self.controller.set_answer("not an index")
        self.assertEqual(self.controller.current_answer(), "not an index")

    def test_strict_mode_rejects_wrong_shape(self):
        controller = make_controller(strict=True)
        with self.assertRaises(AnswerShapeError):
            controller.set_answer("not an index")
        self.assertIsNone(controller.current_answer())
        self.assertTrue(controller.set_answer(1))

    def test_strict_mode_from_environment(self):
        with patch.dict("os.environ", {"EXAM_STRICT_ANSWERS": "yes"}):
            controller = ExamController()
            with self.assertRaises(AnswerShapeError):
                controller.set_answer(["a"])


class TestSubmitAndRestart(unittest.TestCase):

    def setUp(self):
        self.controller = make_controller()

    def test_submit_with_no_answers(self):
        self.assertTrue(self.controller.submit())
        self.assertEqual(self.controller.state, ExamState.SUBMITTED)

    def test_submitted_session_is_frozen(self):
        self.controller.set_answer(1)
        self.controller.submit()
        self.assertFalse(self.controller.set_answer(2))
        self.assertFalse(self.controller.next())
        self.assertFalse(self.controller.previous())
        self.assertFalse(self.controller.submit())
        self.assertEqual(self.controller.session.answers[0], 1)
        self.assertEqual(self.controller.current_index, 0)

    def test_restart_only_after_submit(self):
        self.controller.set_answer(1)
        self.assertFalse(self.controller.restart())
        self.assertEqual(self.controller.session.answers[0], 1)

    def test_restart_resets_everything(self):
        go_to(self.controller, 20)
        self.controller.set_answer(1)
        self.controller.submit()
        self.assertTrue(self.controller.restart())
        session = self.controller.session
        self.assertEqual(self.controller.state, ExamState.IN_PROGRESS)
        self.assertEqual(session.current_index, 0)
        self.assertEqual(session.answers, [None] * question_count())
        self.assertEqual(session.attempt, 2)
        self.assertTrue(self.controller.set_answer(0))

    def test_restart_sizes_answers_to_question_count(self):
        self.controller.session.answers = [None] * 37
        self.controller.submit()
        self.controller.restart()
        self.assertEqual(len(self.controller.session.answers), question_count())


class TestEndToEnd(unittest.TestCase):

    def test_answer_navigate_submit_review(self):
        controller = make_controller()
        controller.set_answer(0)
        controller.next()
        controller.set_answer("AI")
        go_to(controller, 46)
        controller.submit()

        self.assertEqual(controller.state, ExamState.SUBMITTED)
        self.assertEqual(controller.session.answers[0], 0)
        self.assertEqual(controller.session.answers[1], "AI")

        review = build_review(get_question(0), controller.session.answers[0])
        self.assertTrue(review.options[0].is_user_choice)
        self.assertFalse(review.options[0].is_correct)
        self.assertTrue(review.options[1].is_correct)
        self.assertFalse(review.options[1].is_user_choice)

    def test_entity_rows_survive_removal_of_another_row(self):
        controller = make_controller()
        go_to(controller, 32)
        controller.set_answer(add_entity(controller.current_answer()))
        controller.set_answer(add_entity(controller.current_answer()))
        controller.set_answer(update_entity(controller.current_answer(), 0, surface="Samira"))
        controller.set_answer(update_entity(controller.current_answer(), 0, label="PERSON"))
        controller.set_answer(remove_entity(controller.current_answer(), 1))

        self.assertEqual(controller.current_answer(), [Entity("Samira", "PERSON")])

    def test_removing_first_row_keeps_second(self):
        controller = make_controller()
        go_to(controller, 32)
        controller.set_answer([Entity("June 2022", "DATE"), Entity("OpenAI", "ORGANIZATION")])
        controller.set_answer(remove_entity(controller.current_answer(), 0))
        self.assertEqual(controller.current_answer(), [Entity("OpenAI", "ORGANIZATION")])


if __name__ == '__main__':
    unittest.main()
