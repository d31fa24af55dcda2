"""
Definition Sources
==================

Adapters that turn external enum sources into clean EnumDefinitions.

Supported Sources:
    - Mapping: plain dict of name -> value, optionally carrying the
      synthetic reverse entries of a TypeScript numeric enum
    - enum.Enum subclass: uses __members__, so aliases keep their own
      names and share the backing value of their canonical member
    - JSON / YAML file: one top-level mapping

Synthetic Keys:
    A TypeScript numeric enum compiles to an object that maps names to
    values AND values back to names:

        {"ADMIN": 1, "USER": 2, "1": "ADMIN", "2": "USER"}

    The reverse entries are recognised by their key reading as a number
    under JavaScript `Number()` rules and are dropped before the
    definition reaches the factory.

Example:
    from backed_enum.adapters import definition_from

    definition = definition_from({"ADMIN": 1, "1": "ADMIN"})
    assert list(definition.keys()) == ["ADMIN"]
"""

import enum
import json
import logging
import re
from pathlib import Path
from typing import Any, Mapping, Optional, Type, Union

import yaml

from backed_enum import config
from backed_enum.models.definition import EnumDefinition


logger = logging.getLogger(__name__)


# Strings Number() converts to something other than NaN (after trimming)
_NUMERIC_KEY = re.compile(
    r"""
    [+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)
    | 0[xX][0-9a-fA-F]+
    | 0[oO][0-7]+
    | 0[bB][01]+
    """,
    re.VERBOSE,
)


def is_synthetic_key(key: Any) -> bool:
    """
    Check whether a definition key is a numeric reverse entry.

    Args:
        key: Key from a source mapping

    Returns:
        True if the key reads as a number (non-string keys always do)
    """
    if not isinstance(key, str):
        return True

    text = key.strip()
    if not text:
        # Number("") is 0
        return True

    return _NUMERIC_KEY.fullmatch(text) is not None


def definition_from(
    source: Union[EnumDefinition, Mapping[Any, Any], Type[enum.Enum]],
    filter_numeric_keys: Optional[bool] = None,
) -> EnumDefinition:
    """
    Build an EnumDefinition from a mapping or a Python enum class.

    Args:
        source: Mapping, enum.Enum subclass, or an existing EnumDefinition
        filter_numeric_keys: Drop synthetic numeric keys from mappings.
            Defaults to `settings.adapters.filter_numeric_keys`.

    Returns:
        EnumDefinition: Validated definition in source order

    Raises:
        TypeError: If the source kind is not supported
        pydantic.ValidationError: If the resulting definition is invalid
    """
    if isinstance(source, EnumDefinition):
        return source

    if isinstance(source, type) and issubclass(source, enum.Enum):
        data = {name: member.value for name, member in source.__members__.items()}
        return EnumDefinition.model_validate(data)

    if not isinstance(source, Mapping):
        raise TypeError(
            f"Unsupported enum source: {type(source).__name__} "
            "(expected a mapping or an enum.Enum subclass)"
        )

    if filter_numeric_keys is None:
        filter_numeric_keys = config.settings.adapters.filter_numeric_keys

    if not filter_numeric_keys:
        return EnumDefinition.model_validate(dict(source))

    data = {}
    dropped = 0
    for key, value in source.items():
        if is_synthetic_key(key):
            dropped += 1
            continue
        data[key] = value

    if dropped:
        logger.debug(f"Dropped {dropped} synthetic numeric key(s) from definition")

    return EnumDefinition.model_validate(data)


def load_definition(
    path: Union[str, Path],
    filter_numeric_keys: Optional[bool] = None,
) -> EnumDefinition:
    """
    Load an enum definition from a JSON or YAML file.

    Args:
        path: Path to a .json, .yaml or .yml file
        filter_numeric_keys: See `definition_from`

    Returns:
        EnumDefinition: Validated definition

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the suffix is unknown, the file does not parse, or the
            document is not a mapping
    """
    file_path = Path(path)

    if not file_path.exists():
        raise FileNotFoundError(f"Enum definition file not found: {path}")

    suffix = file_path.suffix.lower()
    if suffix not in (".json", ".yaml", ".yml"):
        raise ValueError(f"Unsupported definition format: {suffix or '(none)'}")

    logger.info(f"Loading enum definition from: {path}")

    with open(file_path, "r") as f:
        if suffix == ".json":
            data = json.load(f)
        else:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(data, Mapping):
        raise ValueError(
            f"Enum definition must be a mapping, got {type(data).__name__}"
        )

    definition = definition_from(data, filter_numeric_keys=filter_numeric_keys)

    logger.info(f"Loaded enum definition: cases={len(definition)}")
    return definition
