from pathlib import Path
from typing import Optional

from loguru import logger
from typer import Argument, BadParameter, Option

from helmrender.errors import HelmRenderError
from helmrender.options import KubectlOptions, Options
from helmrender.template import render_template
from helmrender.utils import options_file_option
from helmrender.version import HelmVersion, detect_helm_version
from . import app


def parse_key_value_pairs(values: list[str], option_name: str) -> dict[str, str]:
    """
    Parse a list of `key=value` strings into a dictionary.
    """

    result = {}
    for value in values:
        if "=" not in value:
            raise BadParameter(f"{value!r} is not a valid key=value pair", param_hint=option_name)
        key, val = value.split("=", 1)
        result[key.strip()] = val.strip()
    return result


@app.command()
def template(
    chart_dir: Path = Argument(..., help="The directory of the chart to render."),
    release_name: str = Option("release-name", "--release-name", "-n", help="The name of the release."),
    namespace: Optional[str] = Option(None, help="The namespace to render the release into."),
    set_values: list[str] = Option([], "--set", help="Set a value on the command line (key=value)."),
    values_files: list[Path] = Option([], "--values", "-f", help="A values file to pass to Helm."),
    show_only: list[str] = Option(
        [], "--show-only", "-s", help="Only render the given template, relative to the chart directory."
    ),
    helm_version: Optional[HelmVersion] = Option(
        None, help="The major version of Helm to generate arguments for. Detected if not set."
    ),
    options_file: Optional[Path] = options_file_option(),
) -> None:
    """
    Render a chart with `helm template` and print the output.
    """

    options = Options.load(options_file) if options_file else Options()
    options.set_values.update(parse_key_value_pairs(set_values, "--set"))
    options.values_files.extend(map(str, values_files))
    if namespace:
        if options.kubectl_options is None:
            options.kubectl_options = KubectlOptions()
        options.kubectl_options.namespace = namespace

    try:
        if helm_version is None:
            helm_version = detect_helm_version(options)
        print(render_template(options, chart_dir, release_name, show_only, helm_version))
    except HelmRenderError as exc:
        logger.error("{}", exc)
        exit(1)
