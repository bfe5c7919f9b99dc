from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
import shlex
import textwrap
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from helmrender.version import HelmVersion


class HelmRenderError(Exception):
    """
    Base class for all errors raised by `helmrender`.
    """


@dataclass
class PathResolutionError(HelmRenderError):
    path: str | Path
    reason: str

    def __str__(self) -> str:
        return f"Could not resolve path {str(self.path)!r}: {self.reason}"


@dataclass
class ChartNotFoundError(HelmRenderError):
    path: str | Path

    def __str__(self) -> str:
        return f"Helm chart not found at '{self.path}'"


@dataclass
class TemplateFileNotFoundError(HelmRenderError):
    path: str
    """ The template file as given by the caller, relative to the chart directory. """

    chart_dir: Path
    """ The absolute chart directory that the template file was looked up in. """

    def __str__(self) -> str:
        return f"Template file '{self.path}' not found in chart '{self.chart_dir}'"


@dataclass
class ValuesFileNotFoundError(HelmRenderError):
    path: str | Path

    def __str__(self) -> str:
        return f"Values file '{self.path}' not found"


@dataclass
class SetFileNotFoundError(HelmRenderError):
    path: str | Path

    def __str__(self) -> str:
        return f"File '{self.path}' passed via --set-file not found"


@dataclass
class UnsupportedHelmVersionError(HelmRenderError):
    version: Any

    def __str__(self) -> str:
        return f"Unsupported Helm version: {self.version!r}"


@dataclass
class HelmNotInstalledError(HelmRenderError):
    binary: str

    def __str__(self) -> str:
        return f"Helm executable '{self.binary}' could not be found"


@dataclass
class HelmCommandError(HelmRenderError):
    returncode: int
    command: list[str]
    output: str = ""

    def __str__(self) -> str:
        command = " ".join(map(shlex.quote, self.command))
        message = f"Helm command failed with status code {self.returncode}: $ {command}"
        if self.output:
            message += "\n" + textwrap.indent(self.output, "    ")
        return message


@dataclass
class UnknownHelmVersionError(HelmRenderError):
    output: str
    version: HelmVersion = field(init=False)

    def __post_init__(self) -> None:
        from helmrender.version import HelmVersion

        self.version = HelmVersion.UNKNOWN

    def __str__(self) -> str:
        return f"An unknown Helm version was detected from output: {self.output!r}"


@dataclass
class YamlConversionError(HelmRenderError):
    message: str

    def __str__(self) -> str:
        return f"Could not convert YAML to JSON: {self.message}"


@dataclass
class DecodeError(HelmRenderError):
    destination: Any
    message: str

    def __str__(self) -> str:
        name = getattr(self.destination, "__name__", repr(self.destination))
        return f"Could not decode data into {name}: {self.message}"
