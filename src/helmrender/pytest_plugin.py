"""
Pytest fixtures for tests that render Helm charts. The plugin is registered through the `pytest11` entry point.

Errors raised by `helmrender` fail the current test instead of erroring it, and a missing Helm installation skips it.
"""

from collections.abc import Callable, Sequence
from pathlib import Path
import shutil

import pytest

from helmrender.errors import HelmRenderError
from helmrender.options import Options
from helmrender.template import render_template
from helmrender.version import HelmVersion, detect_helm_version

RenderFunc = Callable[..., str]


@pytest.fixture(scope="session")
def helm_version() -> HelmVersion:
    """
    The major version of the Helm installation on the `PATH`.
    """

    if shutil.which("helm") is None:
        pytest.skip("helm not installed")
    try:
        return detect_helm_version()
    except HelmRenderError as exc:
        pytest.fail(str(exc), pytrace=False)


@pytest.fixture
def render_helm_template(helm_version: HelmVersion) -> RenderFunc:
    """
    A function to render a chart with the detected Helm version that fails the test if rendering fails.
    """

    def render(
        chart_dir: str | Path,
        release_name: str,
        template_files: Sequence[str] = (),
        options: Options | None = None,
    ) -> str:
        try:
            return render_template(options, chart_dir, release_name, template_files, helm_version)
        except HelmRenderError as exc:
            pytest.fail(str(exc), pytrace=False)

    return render
