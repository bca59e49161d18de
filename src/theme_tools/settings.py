import os

_DEFAULT_LOG_LEVEL = "WARNING"


def get_log_level() -> str:
    return os.getenv("THEME_TOOLS_LOG_LEVEL", _DEFAULT_LOG_LEVEL).upper()
