import streamlit as st

from config import get_exam_title

FOOTER_TEXT = (
    "Navigate through questions and submit when ready. You can review your answers with detailed "
    "explanations after submission. Test your code in your own environment after finishing the exam to "
    "ensure your understanding. DO NOT USE AI OR EXTERNAL TOOLS WHILE TAKING THE EXAM. You are encouraged "
    "to use AI to teach you/brush up on topics after taking the exam once on your own. Good luck!"
)


def setup_page_config():
    """Set up the page configuration."""
    st.set_page_config(
        page_title=get_exam_title(),
        page_icon="📝",
        layout="centered",
        initial_sidebar_state="expanded"
    )


def render_badges(category: str, type_label: str, position: str = ""):
    badges = f"`{category}` `{type_label}`"
    if position:
        badges += f" &nbsp; {position}"
    st.markdown(badges)


def render_prompt(prompt: str):
    # Prompts with embedded code keep their line breaks in a code block
    heading, _, rest = prompt.partition("\n")
    st.subheader(heading)
    if rest.strip():
        st.code(rest.strip("\n"), language=None)


def render_bullets(title: str, items):
    if not items:
        return
    st.markdown(f"**{title}**")
    st.markdown("\n".join(f"- {item}" for item in items))
