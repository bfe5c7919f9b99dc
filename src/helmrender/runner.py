import os
import shlex
import subprocess

from loguru import logger

from helmrender.errors import HelmCommandError, HelmNotInstalledError
from helmrender.options import Options


def get_common_args(options: Options) -> list[str]:
    """
    Return the arguments that are passed to every Helm subcommand, e.g. to select the cluster to talk to.
    """

    args = []
    if options.home_path:
        args.extend(["--home", options.home_path])
    if options.kubectl_options is not None:
        if options.kubectl_options.context:
            args.extend(["--kube-context", options.kubectl_options.context])
        if options.kubectl_options.config_path:
            args.extend(["--kubeconfig", options.kubectl_options.config_path])
    return args


def get_env(options: Options) -> dict[str, str]:
    env = dict(os.environ)
    if options.kubectl_options is not None:
        env.update(options.kubectl_options.env)
    env.update(options.env_vars)
    return env


def prepare_helm_command(options: Options, subcommand: str, *args: str) -> list[str]:
    return [
        options.helm_binary,
        subcommand,
        *get_common_args(options),
        *args,
        *options.extra_args.get(subcommand, []),
    ]


def run_helm_command_and_get_output(options: Options | None, subcommand: str, *args: str) -> str:
    """
    Run `helm <subcommand> <args>` and return the combined stdout and stderr of the process.

    Args:
        options: The options to run Helm with. If `None`, the defaults are used.
        subcommand: The Helm subcommand, e.g. `template` or `version`.
        args: The arguments to pass after the subcommand.
    Returns:
        The output of the command with trailing whitespace removed.
    Raises:
        HelmNotInstalledError: If the Helm executable cannot be found.
        HelmCommandError: If the command exits with a non-zero status code.
    """

    if options is None:
        options = Options()

    command = prepare_helm_command(options, subcommand, *args)
    logger.debug("Running Helm: $ {}", " ".join(map(shlex.quote, command)))

    try:
        result = subprocess.run(
            command,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            env=get_env(options),
        )
    except FileNotFoundError as exc:
        raise HelmNotInstalledError(options.helm_binary) from exc

    output = result.stdout.rstrip()
    if result.returncode != 0:
        raise HelmCommandError(result.returncode, command, output)
    return output
