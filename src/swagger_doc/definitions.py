"""Reads contract files into Swagger definitions.

A contract file (YAML or JSON) maps definition names to their properties:

    createUserRequest:
      mobile: {type: string, required: true, description: Phone number}
      tags: {type: array, itemType: string}
      owner: {type: user}

Property types other than the Swagger primitives, `array`, `object`
and `file` are taken to be other definition names.
"""

import json
import logging
from pathlib import Path

import yaml

from swagger_doc.errors import ConfigError
from swagger_doc.parser.base import definition_ref

logger = logging.getLogger(__name__)

CONTRACT_SUFFIXES = (".yaml", ".yml", ".json")

PLAIN_TYPES = ("boolean", "integer", "number", "string", "object", "file")


def load_definitions(contract_dir: Path | None) -> dict:
    """Load every first-level contract file in the directory, sorted by name."""
    definitions: dict = {}
    if contract_dir is None or not contract_dir.is_dir():
        logger.debug("No contract directory at %s", contract_dir)
        return definitions

    for file_path in sorted(contract_dir.iterdir()):
        if not file_path.is_file() or file_path.suffix not in CONTRACT_SUFFIXES:
            continue
        definitions.update(read_contract(file_path))
    return definitions


def read_contract(file_path: Path) -> dict:
    text = file_path.read_text(encoding="utf-8")
    try:
        if file_path.suffix == ".json":
            data = json.loads(text)
        else:
            data = yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ConfigError(f"cannot parse contract {file_path}: {e}") from e

    if not data:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"contract {file_path} must be a mapping of definitions")

    for name, properties in data.items():
        if properties is None:
            continue
        if not isinstance(properties, dict):
            raise ConfigError(f"contract {file_path}: definition {name!r} must be a mapping")
        for prop_name, prop in properties.items():
            if not isinstance(prop, dict):
                raise ConfigError(f"contract {file_path}: property {name}.{prop_name} must be a mapping")

    return {name: convert_definition(properties or {}) for name, properties in data.items()}


def convert_definition(properties: dict) -> dict:
    """Convert a contract property map to a Swagger object schema."""
    definition = {"type": "object", "properties": {}}
    required = []
    for name, prop in properties.items():
        prop = dict(prop)
        if prop.pop("required", False):
            required.append(name)
        definition["properties"][name] = _convert_property(prop)
    if required:
        definition["required"] = required
    return definition


def _convert_property(prop: dict) -> dict:
    prop_type = prop.pop("type", "string")
    item_type = prop.pop("itemType", None)

    if prop_type == "array":
        if item_type is None or item_type in PLAIN_TYPES:
            items = {"type": item_type or "string"}
        else:
            items = {"$ref": definition_ref(item_type)}
        return {"type": "array", "items": items, **prop}
    if prop_type in PLAIN_TYPES:
        return {"type": prop_type, **prop}
    return {"$ref": definition_ref(prop_type)}
