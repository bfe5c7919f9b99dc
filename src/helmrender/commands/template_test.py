from pathlib import Path
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from helmrender.commands import app
from helmrender.version import HelmVersion


def test__template__passes_options_to_render_template(tmp_path: Path) -> None:
    with patch("helmrender.commands.template.render_template", return_value="kind: ConfigMap") as render:
        result = CliRunner().invoke(
            app,
            [
                "template",
                str(tmp_path),
                "--release-name",
                "rel1",
                "--namespace",
                "ns1",
                "--set",
                "replicas=2",
                "-s",
                "templates/a.yaml",
                "--helm-version",
                "v3",
            ],
        )

    assert result.exit_code == 0, result.output
    assert "kind: ConfigMap" in result.output
    options, chart_dir, release_name, template_files, version = render.call_args.args
    assert options.namespace == "ns1"
    assert options.set_values == {"replicas": "2"}
    assert chart_dir == tmp_path
    assert release_name == "rel1"
    assert list(template_files) == ["templates/a.yaml"]
    assert version == HelmVersion.V3


def test__template__detects_version_if_not_given(tmp_path: Path) -> None:
    with patch("helmrender.commands.template.detect_helm_version", return_value=HelmVersion.V2) as detect, patch(
        "helmrender.commands.template.render_template", return_value=""
    ) as render:
        result = CliRunner().invoke(app, ["template", str(tmp_path)])

    assert result.exit_code == 0, result.output
    detect.assert_called_once()
    assert render.call_args.args[4] == HelmVersion.V2


def test__template__missing_chart_exits_with_error(tmp_path: Path) -> None:
    result = CliRunner().invoke(app, ["template", str(tmp_path / "missing"), "--helm-version", "v3"])
    assert result.exit_code == 1


def test__template__invalid_set_value(tmp_path: Path) -> None:
    result = CliRunner().invoke(app, ["template", str(tmp_path), "--set", "novalue", "--helm-version", "v3"])
    assert result.exit_code == 2


def test__template__loads_options_file_from_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    options_file = tmp_path / "helm-options.yaml"
    options_file.write_text("set_values:\n  a: '1'\n")
    monkeypatch.setenv("HELMRENDER_OPTIONS", str(options_file))

    with patch("helmrender.commands.template.render_template", return_value="") as render:
        result = CliRunner().invoke(app, ["template", str(tmp_path), "--helm-version", "v3"])

    assert result.exit_code == 0, result.output
    assert render.call_args.args[0].set_values == {"a": "1"}
