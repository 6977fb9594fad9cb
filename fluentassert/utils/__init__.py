from fluentassert.utils.formatting import diff_lines, format_value
from fluentassert.utils.logger import logger

__all__ = [
    "logger",
    "format_value",
    "diff_lines",
]
