"""End-to-end integration tests."""

import json

from yamljson_core import (
    SerializationSchema,
    VBool,
    VInt,
    VString,
    YamlToJsonConverter,
    dumps,
    normalize,
    to_python,
)
from yamljson_core.paths import get_path, set_path

CONFIG = """\
# operator configuration
---
apiVersion: v1
kind: ConfigMap
metadata:
  name: operator-config   # rendered into the cluster
data:
  retries: 3
  timeout: 2.5
  verbose: off
  version: "010"
  hosts: [a.example, b.example]
  banner: >
    Welcome to
    the cluster.
---
kind: Secret
stringData:
  Username: admin
  Password: "p#ss: word"
"""


def test_config_stream_end_to_end():
    converter = YamlToJsonConverter()
    config, secret = converter.convert_all(CONFIG)

    assert config["kind"] == VString("ConfigMap")
    assert get_path(config, "metadata.name") == VString("operator-config")
    assert get_path(config, "data.retries") == VInt(3)
    assert get_path(config, "data.verbose") == VBool(False)
    assert get_path(config, "data.version") == VString("010")
    assert to_python(get_path(config, "data.hosts")) == ["a.example", "b.example"]
    assert get_path(config, "data.banner") == VString("Welcome to the cluster.\n")

    assert get_path(secret, "stringData.Password") == VString("p#ss: word")


def test_edit_and_serialize():
    config, secret = YamlToJsonConverter().convert_all(CONFIG)
    set_path(config, "metadata.namespace", "system")
    out = json.loads(dumps(config))
    assert out["metadata"] == {"name": "operator-config", "namespace": "system"}
    assert out["data"]["timeout"] == 2.5

    masked = json.loads(dumps(secret, SerializationSchema.with_sensitive()))
    assert masked["stringData"] == {"Username": "***", "Password": "***"}


def test_plain_data_round_trip():
    config, _ = YamlToJsonConverter().convert_all(CONFIG)
    assert normalize(to_python(config)) == config
