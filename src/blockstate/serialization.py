"""
Serialization helpers for block state values.

A variant is always written as its canonical name and read back with
parse(). Block state properties (e.g. {"facing": north, "half": top}) go
through an intermediate dict of plain strings, then JSON or YAML.

The schema (which key uses which family) belongs to the caller.
"""
from __future__ import annotations

import json
from typing import Any, Dict, Mapping, Type

import yaml

from blockstate.family import StateEnum


class SerializationError(Exception):
    """Raised when structured data does not have the expected shape."""
    pass


def variant_to_value(variant: StateEnum) -> str:
    return variant.canonical_name


def variant_from_value(family: Type[StateEnum], value: Any) -> StateEnum:
    return family.parse(value)


def properties_to_dict(properties: Mapping[str, StateEnum]) -> Dict[str, str]:
    return {key: variant_to_value(variant) for key, variant in properties.items()}


def properties_from_dict(
    d: Mapping[str, Any], schema: Mapping[str, Type[StateEnum]]
) -> Dict[str, StateEnum]:
    """
    Decode a property dict against a schema.

    Args:
        d: Mapping of property key to canonical name
        schema: Mapping of property key to family class

    Raises:
        SerializationError: Input is not a mapping, or has a key the schema lacks
        NoMatchingVariant: A value is not a canonical name of its family
    """
    if not isinstance(d, Mapping):
        raise SerializationError(f"Expected a mapping of properties, got {type(d).__name__}")
    unknown = sorted(str(key) for key in d if key not in schema)
    if unknown:
        raise SerializationError(f"Unknown properties: {', '.join(unknown)}")
    return {key: variant_from_value(schema[key], value) for key, value in d.items()}


def properties_to_json(properties: Mapping[str, StateEnum]) -> str:
    return json.dumps(properties_to_dict(properties), sort_keys=True)


def properties_from_json(s: str, schema: Mapping[str, Type[StateEnum]]) -> Dict[str, StateEnum]:
    d = json.loads(s)
    return properties_from_dict(d, schema)


def properties_to_yaml(properties: Mapping[str, StateEnum]) -> str:
    return yaml.safe_dump(properties_to_dict(properties))


def properties_from_yaml(s: str, schema: Mapping[str, Type[StateEnum]]) -> Dict[str, StateEnum]:
    d = yaml.safe_load(s)
    return properties_from_dict(d, schema)
