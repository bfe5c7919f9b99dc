from collections.abc import Mapping, Sequence
from pathlib import Path

from helmrender.errors import SetFileNotFoundError, ValuesFileNotFoundError
from helmrender.options import Options


def format_set_values_as_args(values: Mapping[str, str], flag: str) -> list[str]:
    """
    Format a mapping as `flag key=value` pairs, sorted by key so that the command line is stable.
    """

    args = []
    for key in sorted(values):
        args.extend([flag, f"{key}={values[key]}"])
    return args


def format_values_files_as_args(values_files: Sequence[str]) -> list[str]:
    args = []
    for values_file in values_files:
        path = Path(values_file).absolute()
        if not path.is_file():
            raise ValuesFileNotFoundError(values_file)
        args.extend(["-f", str(path)])
    return args


def format_set_files_as_args(set_files: Mapping[str, str]) -> list[str]:
    args = []
    for key in sorted(set_files):
        path = Path(set_files[key]).absolute()
        if not path.is_file():
            raise SetFileNotFoundError(set_files[key])
        args.extend(["--set-file", f"{key}={path}"])
    return args


def get_values_args(options: Options, args: Sequence[str] = ()) -> list[str]:
    """
    Return a copy of *args* extended by the arguments that pass the values configured in *options* to Helm.

    Raises:
        ValuesFileNotFoundError: If one of the `values_files` does not exist.
        SetFileNotFoundError: If one of the `set_files` does not exist.
    """

    result = list(args)
    result.extend(format_set_values_as_args(options.set_values, "--set"))
    result.extend(format_set_values_as_args(options.set_str_values, "--set-string"))
    result.extend(format_set_values_as_args(options.set_json_values, "--set-json"))
    result.extend(format_values_files_as_args(options.values_files))
    result.extend(format_set_files_as_args(options.set_files))
    return result
