"""
Build LocalizeMap objects from JSON/YAML documents.

Document shape:

    name: _localData        # optional, defaults to _globalVars
    data:                   # optional, defaults to {}
      motd: Hello world
      nonce:
        login: abc123

Useful when the localized data lives in a config file next to the
templates instead of in code.
"""
from __future__ import annotations

import json
from typing import Any, Dict

import yaml

from localize.container import DEFAULT_VAR_NAME, LocalizeMap
from localize.errors import LoadError
from localize.values import to_plain, to_value


def map_from_dict(d: Any) -> LocalizeMap:
    if d is None:
        d = {}
    if not isinstance(d, dict):
        raise LoadError(f"Expected a mapping document, got {type(d).__name__}")
    unknown = set(d) - {"name", "data"}
    if unknown:
        raise LoadError(f"Unknown document keys: {', '.join(sorted(map(str, unknown)))}")
    data = d.get("data")
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise LoadError(f"'data' must be a mapping, got {type(data).__name__}")
    localized = LocalizeMap(d.get("name", DEFAULT_VAR_NAME))
    for key, value in data.items():
        if not isinstance(key, str):
            raise LoadError(f"'data' keys must be strings, got {key!r}")
        localized.add(key, value)
    return localized


def map_to_dict(m: LocalizeMap) -> Dict[str, Any]:
    # Records and Value nodes are written out as plain dicts and lists
    data = {key: to_plain(to_value(value)) for key, value in m.data.items()}
    return {"name": m.var_name, "data": data}


def map_from_json(s: str) -> LocalizeMap:
    return map_from_dict(json.loads(s))


def map_to_json(m: LocalizeMap) -> str:
    return json.dumps(map_to_dict(m), sort_keys=True)


def map_from_yaml(s: str) -> LocalizeMap:
    return map_from_dict(yaml.safe_load(s))


def map_to_yaml(m: LocalizeMap) -> str:
    return yaml.safe_dump(map_to_dict(m))


__all__ = [
    "map_from_dict",
    "map_to_dict",
    "map_from_json",
    "map_to_json",
    "map_from_yaml",
    "map_to_yaml",
]
