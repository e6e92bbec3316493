# Copyright 2025 Roger Cibrian
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Typed lookups on loaded configuration documents.

A loaded document is a tree of mappings, sequences and strings, so every
lookup has to check what it got. The three functions here do that check
once and always return a value of the requested type:

- as_mapping: dict, or {} when missing or not a mapping
- as_string: str, or "" when missing or not a string
- as_sequence: list, or [] when missing or not a sequence

Missing keys and mismatched shapes are reported at debug level under the
ACCESS prefix. Matching values are returned as stored, not copied.

Example:
    ```python
    from webcfg.config.accessors import as_mapping, as_string

    doc = {"webpage_client": {"base_url": "localhost:8700"}}
    client = as_mapping(doc, "webpage_client")
    print(as_string(client, "base_url"))  # localhost:8700
    print(as_string(doc, "webpage_client"))  # "" (a mapping, not a string)
    ```
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from webcfg.logging import Logger, get_global_logger

__all__ = ["ConfigDocument", "ConfigValue", "as_mapping", "as_sequence", "as_string"]

# str | list[ConfigValue] | dict[str, ConfigValue] | None
ConfigValue = Any
ConfigDocument = dict[str, ConfigValue]


def _lookup(
    mapping: Mapping[str, Any], key: str, expected: type, logger: Logger | None
) -> Any:
    """Return mapping[key] when it is an instance of expected, else None."""
    log = logger if logger is not None else get_global_logger()

    value = mapping.get(key) if isinstance(mapping, Mapping) else None
    if value is None:
        log.debug("ACCESS", f"No value found for key '{key}'")
        return None
    if not isinstance(value, expected):
        log.debug(
            "ACCESS",
            f"Couldn't convert to {expected.__name__} for key '{key}', "
            f"type was '{type(value).__name__}'",
        )
        return None
    return value


def as_mapping(
    mapping: Mapping[str, Any], key: str, logger: Logger | None = None
) -> dict[str, Any]:
    """Read a nested mapping.

    Args:
        mapping: Mapping to read from.
        key: Key to look up.
        logger: Logger for miss/mismatch reports. Defaults to the global one.

    Returns:
        The stored dict, or a new empty dict.
    """
    value = _lookup(mapping, key, dict, logger)
    return value if value is not None else {}


def as_string(
    mapping: Mapping[str, Any], key: str, logger: Logger | None = None
) -> str:
    """Read a string value; "" when missing or not a string."""
    value = _lookup(mapping, key, str, logger)
    return value if value is not None else ""


def as_sequence(
    mapping: Mapping[str, Any], key: str, logger: Logger | None = None
) -> list[Any]:
    """Read a sequence value; [] when missing or not a sequence."""
    value = _lookup(mapping, key, list, logger)
    return value if value is not None else []
