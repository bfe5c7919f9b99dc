from enum import Enum

from loguru import logger

from helmrender.errors import UnknownHelmVersionError
from helmrender.options import Options
from helmrender.runner import run_helm_command_and_get_output


class HelmVersion(Enum):
    """
    The major versions of Helm that differ in how `helm template` must be called.
    """

    V2 = "v2"
    V3 = "v3"
    UNKNOWN = "unknown"


def classify_helm_version(output: str) -> HelmVersion:
    """
    Classify the output of `helm version` into a major version.

    Raises:
        UnknownHelmVersionError: If the output matches no known major version.
    """

    if "v3." in output:
        return HelmVersion.V3
    if "v2." in output:
        return HelmVersion.V2
    raise UnknownHelmVersionError(output)


def detect_helm_version(options: Options | None = None) -> HelmVersion:
    """
    Run `helm version -c` and return the major version of the installed Helm client. The client-only flag is
    understood by both Helm 2 and Helm 3 and does not contact the cluster.

    The result is not cached, every call invokes Helm again.
    """

    output = run_helm_command_and_get_output(options, "version", "-c")
    version = classify_helm_version(output)
    logger.debug("Detected Helm {}", version.value)
    return version
