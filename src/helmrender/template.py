"""
Render Helm charts with `helm template`. Helm 2 and Helm 3 expect different command lines for the same operation, so
the arguments are built by a function per major version.
"""

from collections.abc import Callable, Sequence
from pathlib import Path

from loguru import logger

from helmrender.errors import (
    ChartNotFoundError,
    PathResolutionError,
    TemplateFileNotFoundError,
    UnsupportedHelmVersionError,
)
from helmrender.options import Options
from helmrender.runner import run_helm_command_and_get_output
from helmrender.values import get_values_args
from helmrender.version import HelmVersion

ArgsBuilder = Callable[[str, Options, Sequence[str], str], list[str]]


def resolve_chart_dir(chart_dir: str | Path) -> Path:
    """
    Return the absolute form of *chart_dir* without checking that it exists.

    Raises:
        PathResolutionError: If *chart_dir* is not a usable path.
    """

    raw = str(chart_dir)
    if not raw:
        raise PathResolutionError(raw, "path is empty")
    if "\0" in raw:
        raise PathResolutionError(raw, "path contains a null byte")
    return Path(raw).absolute()


def _validate_template_file(abs_chart_dir: Path, template_file: str) -> None:
    # Only the existence is checked, `helm template` expects the path relative to the chart.
    if not (abs_chart_dir / template_file).is_file():
        raise TemplateFileNotFoundError(template_file, abs_chart_dir)


def build_helm2_args(release_name: str, options: Options, template_files: Sequence[str], chart_dir: str) -> list[str]:
    """
    Build the arguments for `helm template` as understood by Helm 2. Template files are selected with `-x`.

    Raises:
        TemplateFileNotFoundError: If one of the *template_files* does not exist in the chart.
        ValuesFileNotFoundError: If a values file configured in the *options* does not exist.
        SetFileNotFoundError: If a file configured in `options.set_files` does not exist.
    """

    abs_chart_dir = Path(chart_dir).absolute()
    args = ["--name", release_name, chart_dir]
    if options.namespace:
        args.extend(["--namespace", options.namespace])
    args = get_values_args(options, args)

    for template_file in template_files:
        if not template_file:
            continue
        _validate_template_file(abs_chart_dir, template_file)
        args.extend(["-x", template_file])

    # Helm 2 callers have always passed the chart a second time at the end.
    args.append(chart_dir)
    return args


def build_helm3_args(release_name: str, options: Options, template_files: Sequence[str], chart_dir: str) -> list[str]:
    """
    Build the arguments for `helm template` as understood by Helm 3, which follows the syntax
    `helm template [NAME] [CHART] [flags]`. Template files are selected with `-s`.

    Raises the same errors as #build_helm2_args().
    """

    abs_chart_dir = Path(chart_dir).absolute()
    args = [release_name, chart_dir]

    for template_file in template_files:
        if not template_file:
            continue
        _validate_template_file(abs_chart_dir, template_file)
        args.extend(["-s", template_file])

    if options.namespace:
        args.extend(["--namespace", options.namespace])
    return get_values_args(options, args)


ARGS_BUILDERS: dict[HelmVersion, ArgsBuilder] = {
    HelmVersion.V2: build_helm2_args,
    HelmVersion.V3: build_helm3_args,
}


def build_template_args(
    version: HelmVersion,
    release_name: str,
    options: Options,
    template_files: Sequence[str],
    chart_dir: str,
) -> list[str]:
    """
    Build the `helm template` arguments for the given Helm *version*.

    Raises:
        UnsupportedHelmVersionError: If there are no known arguments for the *version*.
    """

    try:
        builder = ARGS_BUILDERS[version]
    except (KeyError, TypeError):
        raise UnsupportedHelmVersionError(version) from None
    return builder(release_name, options, template_files, chart_dir)


def render_template(
    options: Options | None,
    chart_dir: str | Path,
    release_name: str,
    template_files: Sequence[str],
    version: HelmVersion,
) -> str:
    """
    Run `helm template` to render the chart in *chart_dir* and return the output of the command. If *template_files*
    is not empty, only those templates are rendered.

    Args:
        options: The options to render the chart with. If `None`, the defaults are used.
        chart_dir: The directory of the chart to render.
        release_name: The name of the release.
        template_files: Paths of templates relative to the chart directory to render exclusively.
        version: The major version of the installed Helm, see #detect_helm_version().
    Raises:
        PathResolutionError: If *chart_dir* is not a usable path.
        ChartNotFoundError: If *chart_dir* does not exist. Helm is not invoked in that case.
        UnsupportedHelmVersionError: If *version* is neither Helm 2 nor Helm 3.
        TemplateFileNotFoundError: If one of the *template_files* does not exist in the chart.
        HelmCommandError: If Helm fails to render the chart.
    """

    if options is None:
        options = Options()

    abs_chart_dir = resolve_chart_dir(chart_dir)
    if not abs_chart_dir.exists():
        raise ChartNotFoundError(chart_dir)

    args = build_template_args(version, release_name, options, template_files, str(chart_dir))
    logger.debug("Rendering chart '{}' as release '{}' with Helm {}", abs_chart_dir, release_name, version.value)
    return run_helm_command_and_get_output(options, "template", *args)
