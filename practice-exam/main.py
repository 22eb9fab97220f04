import streamlit as st

from config import sidebar_enabled
from logger import logger
from models.exam_session import ExamSession
from services.exam_controller import ExamController
from services.question_bank import question_count

# UI Modules
from ui.shared_ui import setup_page_config
from ui.sidebar import create_sidebar
from ui.exam_page import render_exam_page
from ui.review_pages import render_results_page


def main():
    """Main application entry point."""
    setup_page_config()

    # One exam session per browser session; the controller is rebuilt on every rerun around it
    if "exam_session" not in st.session_state:
        st.session_state.exam_session = ExamSession(question_count=question_count())
        logger.info("Started a new exam session")
    controller = ExamController(st.session_state.exam_session)

    if controller.session.submitted:
        render_results_page(controller)
    else:
        render_exam_page(controller)

    # Drawn last so the status reflects edits made in this run
    if sidebar_enabled():
        create_sidebar(controller)


if __name__ == "__main__":
    main()
