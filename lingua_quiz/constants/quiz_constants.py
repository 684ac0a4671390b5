"""Quiz-related constants shared across UI and core layers."""

from pathlib import Path

DEFAULT_TIME_LIMIT_SECONDS: int = 600
DEFAULT_PASS_THRESHOLD_PERCENT: int = 70
DEFAULT_QUIZ_TITLE: str = "Untitled quiz"
TICK_INTERVAL_MS: int = 1000
TIME_WARNING_WINDOW_SECONDS: int = 60
DEFAULT_QUIZ_PATH: Path = Path(__file__).resolve().parent.parent / "data" / "spanish_basics.txt"
LOG_LEVEL_ENV_VAR: str = "LINGUA_QUIZ_LOG_LEVEL"
