from pathlib import Path
from typing import Optional

from loguru import logger

from helmrender.errors import HelmRenderError
from helmrender.options import Options
from helmrender.utils import options_file_option
from helmrender.version import detect_helm_version
from . import app


@app.command()
def version(options_file: Optional[Path] = options_file_option()) -> None:
    """
    Print the major version of the installed Helm client.
    """

    options = Options.load(options_file) if options_file else Options()
    try:
        print(detect_helm_version(options).value)
    except HelmRenderError as exc:
        logger.error("{}", exc)
        exit(1)
