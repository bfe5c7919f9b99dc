from pathlib import Path

import pytest

from helmrender.errors import SetFileNotFoundError, ValuesFileNotFoundError
from helmrender.options import Options
from helmrender.values import format_set_values_as_args, get_values_args


def test__format_set_values_as_args__sorts_by_key() -> None:
    assert format_set_values_as_args({"b": "2", "a": "1"}, "--set") == ["--set", "a=1", "--set", "b=2"]


def test__get_values_args__without_values_returns_copy_of_args() -> None:
    args = ["rel1", "/charts/foo"]
    result = get_values_args(Options(), args)
    assert result == args
    assert result is not args


def test__get_values_args__order_of_flags(tmp_path: Path) -> None:
    values_file = tmp_path / "values.yaml"
    values_file.write_text("replicas: 2\n")
    cert = tmp_path / "cert.pem"
    cert.write_text("---")

    options = Options(
        set_values={"image.tag": "1.0"},
        set_str_values={"port": "8080"},
        set_json_values={"labels": '{"a": "b"}'},
        values_files=[str(values_file)],
        set_files={"tls.cert": str(cert)},
    )

    assert get_values_args(options, ["base"]) == [
        "base",
        "--set",
        "image.tag=1.0",
        "--set-string",
        "port=8080",
        "--set-json",
        'labels={"a": "b"}',
        "-f",
        str(values_file),
        "--set-file",
        f"tls.cert={cert}",
    ]


def test__get_values_args__relative_values_file_is_made_absolute(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.chdir(tmp_path)
    (tmp_path / "values.yaml").write_text("{}")
    assert get_values_args(Options(values_files=["values.yaml"])) == ["-f", str(Path.cwd() / "values.yaml")]


def test__get_values_args__missing_values_file(tmp_path: Path) -> None:
    missing = str(tmp_path / "missing.yaml")
    with pytest.raises(ValuesFileNotFoundError) as excinfo:
        get_values_args(Options(values_files=[missing]))
    assert excinfo.value.path == missing


def test__get_values_args__missing_set_file(tmp_path: Path) -> None:
    missing = str(tmp_path / "missing.pem")
    with pytest.raises(SetFileNotFoundError) as excinfo:
        get_values_args(Options(set_files={"tls.cert": missing}))
    assert excinfo.value.path == missing
