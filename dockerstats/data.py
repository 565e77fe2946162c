"""The record docker reports for one container."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Mapping

from .error import JsonParseError

_FIELDS = {
    "block_io": "BlockIO",
    "cpu_perc": "CPUPerc",
    "id": "ID",
    "mem_perc": "MemPerc",
    "mem_usage": "MemUsage",
    "name": "Name",
    "net_io": "NetIO",
}


@dataclass(frozen=True)
class DockerStats:
    """One line of ``docker stats --format json`` output."""

    block_io: str
    cpu_perc: str
    id: str
    mem_perc: str
    mem_usage: str
    name: str
    net_io: str

    @classmethod
    def from_dict(cls, mapping: Mapping[str, Any]) -> "DockerStats":
        """Build a record from docker's keys; unknown keys are ignored."""
        values = {}
        for attr, key in _FIELDS.items():
            if key not in mapping:
                raise JsonParseError(f"missing field `{key}`")
            value = mapping[key]
            if not isinstance(value, str):
                raise JsonParseError(f"field `{key}` is not a string")
            values[attr] = value
        return cls(**values)

    @classmethod
    def from_json(cls, text: str) -> "DockerStats":
        """Decode one JSON object into a record."""
        try:
            decoded = json.loads(text)
        except json.JSONDecodeError as exc:
            raise JsonParseError(str(exc)) from exc
        if not isinstance(decoded, dict):
            raise JsonParseError("expected a JSON object")
        return cls.from_dict(decoded)