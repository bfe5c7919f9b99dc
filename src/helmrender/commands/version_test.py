from pathlib import Path
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from helmrender.commands import app
from helmrender.errors import HelmNotInstalledError
from helmrender.version import HelmVersion


def test__version__prints_detected_version() -> None:
    with patch("helmrender.commands.version.detect_helm_version", return_value=HelmVersion.V3):
        result = CliRunner().invoke(app, ["version"])

    assert result.exit_code == 0, result.output
    assert result.output.strip() == "v3"


def test__version__uses_options_from_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    options_file = tmp_path / "helm-options.yaml"
    options_file.write_text("helm_binary: /usr/local/bin/helm2\n")
    monkeypatch.setenv("HELMRENDER_OPTIONS", str(options_file))

    with patch("helmrender.commands.version.detect_helm_version", return_value=HelmVersion.V2) as detect:
        result = CliRunner().invoke(app, ["version"])

    assert result.exit_code == 0, result.output
    assert detect.call_args.args[0].helm_binary == "/usr/local/bin/helm2"


def test__version__missing_helm_exits_with_error() -> None:
    with patch("helmrender.commands.version.detect_helm_version", side_effect=HelmNotInstalledError("helm")):
        result = CliRunner().invoke(app, ["version"])
    assert result.exit_code == 1
