"""
Smoke tests that drive the Streamlit app through its pages.
"""
import unittest
from pathlib import Path

from streamlit.testing.v1 import AppTest

from models.exam_session import ExamSession
from models.question import Entity

APP_PATH = str(Path(__file__).resolve().parent.parent / "practice-exam" / "main.py")


def new_app():
    return AppTest.from_file(APP_PATH, default_timeout=30)


class TestExamPage(unittest.TestCase):

    def setUp(self):
        self.at = new_app()
        self.at.run()

    def session(self):
        return self.at.session_state["exam_session"]

    def test_first_render(self):
        self.assertFalse(self.at.exception)
        self.assertEqual(self.session().current_index, 0)
        self.assertTrue(self.at.button(key="nav_prev").disabled)
        self.assertIn("Question 1 of 47", "".join(md.value for md in self.at.markdown))

    def test_sidebar_status(self):
        self.assertIn("Answered: 0 / 47", "".join(md.value for md in self.at.sidebar.markdown))
        self.assertEqual(self.at.sidebar.caption[0].value, "Answers are kept for this browser session only.")

    def test_next_and_previous(self):
        self.at.button(key="nav_next").click().run()
        self.assertEqual(self.session().current_index, 1)
        self.at.button(key="nav_prev").click().run()
        self.assertEqual(self.session().current_index, 0)

    def test_choice_is_stored(self):
        self.at.radio(key="a1-e0-q1-choice").set_value(1).run()
        self.assertEqual(self.session().answers[0], 1)
        self.assertIn("1 / 47 answered", "".join(md.value for md in self.at.markdown))


class TestLastQuestionAndResults(unittest.TestCase):

    def setUp(self):
        self.at = new_app()
        self.at.session_state["exam_session"] = ExamSession(question_count=47, current_index=46)
        self.at.run()

    def test_submit_then_retake(self):
        self.assertFalse(self.at.exception)
        self.at.button(key="nav_submit").click().run()
        self.assertTrue(self.at.session_state["exam_session"].submitted)
        self.assertEqual(self.at.title[0].value, "Exam Results")

        self.at.button(key="retake_exam").click().run()
        session = self.at.session_state["exam_session"]
        self.assertFalse(session.submitted)
        self.assertEqual(session.attempt, 2)
        self.assertEqual(session.answers, [None] * 47)


class TestEntityRows(unittest.TestCase):

    def setUp(self):
        self.at = new_app()
        answers = [None] * 47
        answers[32] = [Entity("Samira", "PERSON"), Entity("", "")]
        self.at.session_state["exam_session"] = ExamSession(question_count=47, current_index=32, answers=answers)
        self.at.run()

    def test_remove_other_row(self):
        self.assertFalse(self.at.exception)
        self.at.button(key="a1-e0-q33-remove-1").click().run()
        session = self.at.session_state["exam_session"]
        self.assertEqual(session.answers[32], [Entity("Samira", "PERSON")])
        self.assertEqual(session.widget_epoch, 1)
        self.assertEqual(self.at.text_input(key="a1-e1-q33-surface-0").value, "Samira")

    def test_add_row(self):
        self.at.button(key="a1-e0-q33-add").click().run()
        self.assertEqual(len(self.at.session_state["exam_session"].answers[32]), 3)


if __name__ == '__main__':
    unittest.main()
