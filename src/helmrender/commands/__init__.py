"""
Render Helm charts with Helm 2 or Helm 3 using the same command line.
"""

from enum import Enum
import sys
from loguru import logger
from typer import Option
from helmrender.utils import new_typer


app = new_typer(help=__doc__)


from . import template  # noqa: F401,E402
from . import version  # noqa: F401,E402


class LogLevel(str, Enum):
    TRACE = "trace"
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


@app.callback()
def _callback(
    log_level: LogLevel = Option(LogLevel.INFO, "--log-level", "-l", help="The log level to use."),
) -> None:
    logger.remove()
    logger.add(sys.stderr, level=log_level.name)
