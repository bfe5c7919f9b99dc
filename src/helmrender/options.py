from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from loguru import logger


@dataclass
class KubectlOptions:
    """
    Describes how Helm connects to a Kubernetes cluster.
    """

    context: str | None = None
    """ The kubeconfig context to use. Passed to Helm as `--kube-context`. """

    config_path: str | None = None
    """ Path to the kubeconfig file. Passed to Helm as `--kubeconfig`. """

    namespace: str | None = None
    """ The namespace to render or install the release into. """

    env: dict[str, str] = field(default_factory=dict)
    """ Additional environment variables for the Helm process. """


@dataclass
class Options:
    """
    Options that describe how to invoke Helm and which values to pass to the chart.
    """

    kubectl_options: KubectlOptions | None = None

    set_values: dict[str, str] = field(default_factory=dict)
    """ Values passed with `--set key=value`. """

    set_str_values: dict[str, str] = field(default_factory=dict)
    """ Values passed with `--set-string key=value`. """

    set_json_values: dict[str, str] = field(default_factory=dict)
    """ Values passed with `--set-json key=value`, where the value is a JSON string. """

    values_files: list[str] = field(default_factory=list)
    """ Values files passed with `-f`. """

    set_files: dict[str, str] = field(default_factory=dict)
    """ Files whose content is passed as a value with `--set-file key=path`. """

    home_path: str | None = None
    """ The Helm home directory. Only understood by Helm 2. """

    env_vars: dict[str, str] = field(default_factory=dict)
    """ Additional environment variables for the Helm process. These take precedence over the kubectl options. """

    extra_args: dict[str, list[str]] = field(default_factory=dict)
    """ Additional arguments to append to the command line, keyed by Helm subcommand (e.g. `template`). """

    helm_binary: str = "helm"

    @property
    def namespace(self) -> str | None:
        if self.kubectl_options is None:
            return None
        return self.kubectl_options.namespace or None

    @staticmethod
    def load(file: Path, /) -> "Options":
        """
        Load options from a YAML file. Relative paths in `values_files` and `set_files` are resolved relative to the
        directory of the file.
        """

        from databind.json import load as deser
        from yaml import safe_load

        logger.debug("Loading Helm options from '{}'", file)
        options = deser(safe_load(file.read_text()) or {}, Options, filename=str(file))

        options.values_files = [str(file.parent / path) for path in options.values_files]
        options.set_files = {key: str(file.parent / path) for key, path in options.set_files.items()}
        return options
