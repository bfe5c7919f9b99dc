from typing import Any

from typer import Option, Typer


def new_typer(**kwargs: Any) -> Typer:
    return Typer(no_args_is_help=True, pretty_exceptions_enable=False, **kwargs)


def options_file_option() -> Any:
    """
    The `--options` parameter shared by all commands that invoke Helm.
    """

    return Option(
        None,
        "--options",
        envvar="HELMRENDER_OPTIONS",
        help="A YAML file with the options to invoke Helm with.",
    )
