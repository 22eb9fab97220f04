import os
from dotenv import load_dotenv

# Load environment variables before reading any setting
load_dotenv()

DEFAULT_EXAM_TITLE = "Data Annotation Practice Exam"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _env_flag(name: str, default: bool) -> bool:
    """Read a boolean flag from the environment, falling back to default on junk values."""
    raw = os.environ.get(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    return default


def get_exam_title() -> str:
    return os.environ.get("EXAM_TITLE", "").strip() or DEFAULT_EXAM_TITLE


def get_log_level() -> str:
    return os.environ.get("EXAM_LOG_LEVEL", "INFO").strip().upper() or "INFO"


def strict_answers_enabled() -> bool:
    """Whether set_answer should reject answers whose shape does not match the question type."""
    return _env_flag("EXAM_STRICT_ANSWERS", False)


def sidebar_enabled() -> bool:
    return _env_flag("EXAM_SHOW_SIDEBAR", True)
