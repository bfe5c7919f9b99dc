"""
Helmrender drives `helm template` for both Helm 2 and Helm 3 and decodes the rendered manifests into structured
objects, mostly for use in tests of Helm charts.
"""

from helmrender.convert import split_manifests, unmarshal_k8s_yaml, unmarshal_k8s_yaml_all
from helmrender.errors import (
    ChartNotFoundError,
    DecodeError,
    HelmCommandError,
    HelmNotInstalledError,
    HelmRenderError,
    PathResolutionError,
    SetFileNotFoundError,
    TemplateFileNotFoundError,
    UnknownHelmVersionError,
    UnsupportedHelmVersionError,
    ValuesFileNotFoundError,
    YamlConversionError,
)
from helmrender.options import KubectlOptions, Options
from helmrender.runner import run_helm_command_and_get_output
from helmrender.template import build_helm2_args, build_helm3_args, render_template
from helmrender.values import get_values_args
from helmrender.version import HelmVersion, detect_helm_version

__version__ = "0.1.0"

__all__ = [
    "ChartNotFoundError",
    "DecodeError",
    "HelmCommandError",
    "HelmNotInstalledError",
    "HelmRenderError",
    "HelmVersion",
    "KubectlOptions",
    "Options",
    "PathResolutionError",
    "SetFileNotFoundError",
    "TemplateFileNotFoundError",
    "UnknownHelmVersionError",
    "UnsupportedHelmVersionError",
    "ValuesFileNotFoundError",
    "YamlConversionError",
    "build_helm2_args",
    "build_helm3_args",
    "detect_helm_version",
    "get_values_args",
    "render_template",
    "run_helm_command_and_get_output",
    "split_manifests",
    "unmarshal_k8s_yaml",
    "unmarshal_k8s_yaml_all",
]
