"""
Convert the output of `helm template` into structured objects.
"""

import json
from typing import Any, TypeVar

import databind.json
import yaml
from databind.core import ConversionError
from databind.core.settings import ExtraKeys

from helmrender.errors import DecodeError, YamlConversionError

T = TypeVar("T")


def _stringify_keys(data: Any) -> Any:
    if isinstance(data, dict):
        return {
            key if key is None or isinstance(key, (str, int, float, bool)) else str(key): _stringify_keys(value)
            for key, value in data.items()
        }
    if isinstance(data, list):
        return [_stringify_keys(item) for item in data]
    return data


def _to_json_data(data: Any) -> Any:
    try:
        return json.loads(json.dumps(_stringify_keys(data), default=str))
    except (TypeError, ValueError, RecursionError) as exc:
        raise YamlConversionError(str(exc)) from exc


def yaml_to_json_data(yaml_data: str) -> Any:
    """
    Parse a single YAML document into JSON compatible data. Keys that are not strings are converted to strings and
    values that JSON can not represent (such as timestamps) are converted to their string form.
    """

    try:
        data = yaml.safe_load(yaml_data)
    except yaml.YAMLError as exc:
        raise YamlConversionError(str(exc)) from exc
    return _to_json_data(data)


def split_manifests(yaml_data: str) -> list[dict[str, Any]]:
    """
    Parse every non-empty document in the output of `helm template`.
    """

    try:
        documents = list(filter(None, yaml.safe_load_all(yaml_data)))
    except yaml.YAMLError as exc:
        raise YamlConversionError(str(exc)) from exc
    return _to_json_data(documents)


def _decode(data: Any, destination: type[T]) -> T:
    try:
        return databind.json.load(data, destination, settings=[ExtraKeys()])
    except ConversionError as exc:
        raise DecodeError(destination, str(exc)) from exc


def unmarshal_k8s_yaml(yaml_data: str, destination: type[T]) -> T:
    """
    Decode the rendered YAML of a single Kubernetes resource into an instance of *destination*, usually a dataclass
    that describes the resource. Keys in the YAML that *destination* does not know are ignored.

    Example:

    ```py
    output = render_template(options, chart_dir, "test", ["templates/configmap.yaml"], version)
    configmap = unmarshal_k8s_yaml(output, ConfigMap)
    ```

    Raises:
        YamlConversionError: If *yaml_data* is not valid YAML.
        DecodeError: If the data does not fit *destination*.
    """

    return _decode(yaml_to_json_data(yaml_data), destination)


def unmarshal_k8s_yaml_all(yaml_data: str, destination: type[T]) -> list[T]:
    """
    Like #unmarshal_k8s_yaml(), but for output that contains multiple resources of the same shape.
    """

    return [_decode(manifest, destination) for manifest in split_manifests(yaml_data)]
