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

"""Configuration loading and merging for webcfg.

This module loads the two configuration layers of a test run and merges
them into a single document.

Configuration Layers:
    1. **Common file** (``/common.yaml`` by default)
       - Baseline shared by every environment
       - Optional; a missing resource counts as an empty document

    2. **Environment file** (``/localhost.yaml`` by default)
       - Overrides for the environment under test
       - Optional; a missing resource counts as an empty document

Merge Behavior:
    The merge is a single-level overlay with "environment wins" semantics:

    - Top-level keys from the environment file replace those of the common file
    - Nested mappings are replaced as a whole, NOT merged key by key
    - Keys present in only one layer are kept

    So an environment that overrides one field of ``webpage_client`` must
    repeat the rest of ``webpage_client`` as well.

Scalar Handling:
    Plain YAML scalars are loaded as strings (``port: 8700`` gives
    ``"8700"``); only the null forms (``~``, ``null``, empty) become None.
    Values are looked up as strings later on, so no implicit typing is done.

Error Handling:
    - Missing resource: empty document, logged at debug level
    - Root that is not a mapping: empty document, logged at debug level
    - ConfigParseError: malformed YAML, chained from yaml.YAMLError
    - ResourceReadError: read failure on an opened resource, chained from OSError

Example:
    Basic usage:
        ```python
        from pathlib import Path
        from webcfg.config import LoaderSettings, load_effective_config

        settings = LoaderSettings(environment_file="staging",
                                  resource_path=(Path("config"),))
        cfg = load_effective_config(settings)
        print(cfg["webpage_client"]["base_url"])
        ```
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import IO, Any

import yaml

from webcfg.config.accessors import ConfigDocument
from webcfg.config.resources import ResourceLocator
from webcfg.config.settings import LoaderSettings
from webcfg.exceptions import ConfigParseError, ResourceReadError
from webcfg.logging import Logger, get_global_logger

__all__ = [
    "LoadContext",
    "load_document",
    "load_effective_config",
    "merge_documents",
    "parse_yaml",
    "read_document",
    "resolve_config",
]

# -------------------------------
# Data types
# -------------------------------


@dataclass(frozen=True)
class LoadContext:
    """Metadata describing how the config was resolved.
    Useful for debugging and logging.
    """

    common_resource_id: str
    environment_resource_id: str
    common_found: bool
    environment_found: bool


# -------------------------------
# YAML helpers
# -------------------------------

_KEPT_RESOLVERS = {"tag:yaml.org,2002:null", "tag:yaml.org,2002:merge"}


class _StringScalarLoader(yaml.SafeLoader):
    """SafeLoader that resolves only nulls and merge keys implicitly."""


_StringScalarLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag in _KEPT_RESOLVERS]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def parse_yaml(stream: IO[Any] | str | bytes) -> Any:
    """Parses a single YAML document.

    Args:
        stream: Open text or binary stream, or the YAML source itself.

    Returns:
        The parsed document: a dict, list, str or None.

    Raises:
        ConfigParseError: If the YAML is malformed.
        ResourceReadError: If reading from the stream fails.
    """
    try:
        return yaml.load(stream, Loader=_StringScalarLoader)
    except yaml.YAMLError as err:
        name = getattr(stream, "name", "<string>")
        raise ConfigParseError(f"Error parsing YAML: {name}: {err}") from err
    except OSError as err:
        name = getattr(stream, "name", "<stream>")
        raise ResourceReadError(f"Failed to read from {name}: {err}") from err


def read_document(stream: IO[Any], logger: Logger | None = None) -> ConfigDocument:
    """Parses a stream and keeps the result only if it is a mapping.

    The stream is left open.

    Args:
        stream: Open text or binary stream.
        logger: Logger to use. Defaults to the global logger.

    Returns:
        The parsed mapping, or {} for a sequence, scalar or empty document.
    """
    log = logger if logger is not None else get_global_logger()

    data = parse_yaml(stream)
    if data is None:
        log.debug("CONFIG", "YAML load returned no data")
        return {}
    if not isinstance(data, dict):
        log.debug(
            "CONFIG",
            f"Couldn't convert loaded data to mapping, type was '{type(data).__name__}'",
        )
        return {}
    return data


def _read_resource(
    resource_id: str, locator: ResourceLocator, log: Logger
) -> ConfigDocument | None:
    """Returns the document for resource_id, or None when it is not found."""
    stream = locator.open_resource(resource_id)
    if stream is None:
        log.debug("CONFIG", f"Resource '{resource_id}' not found, using empty config")
        return None
    with stream:
        return read_document(stream, logger=log)


def load_document(
    resource_id: str, locator: ResourceLocator, logger: Logger | None = None
) -> ConfigDocument:
    """Loads a resource as a configuration document.

    Args:
        resource_id: Id of the resource (e.g., "/common.yaml").
        locator: Locator used to open the resource.
        logger: Logger to use. Defaults to the global logger.

    Returns:
        The parsed mapping, or {} if the resource is missing or its root
        is not a mapping.

    Raises:
        ConfigParseError: If the resource holds malformed YAML.
        ResourceReadError: If reading the opened resource fails.
    """
    log = logger if logger is not None else get_global_logger()
    doc = _read_resource(resource_id, locator, log)
    return doc if doc is not None else {}


# -------------------------------
# Merge logic
# -------------------------------


def merge_documents(
    common: Mapping[str, Any], environment: Mapping[str, Any]
) -> ConfigDocument:
    """Overlays environment onto common at the top level only.

    Nested values are taken from whichever layer wins, never combined.
    This function does not mutate inputs; returns a new dict.

    Args:
        common: The baseline document.
        environment: The document that takes precedence.

    Returns:
        A new dict with the merged top-level keys.
    """
    result: ConfigDocument = dict(common)
    result.update(environment)
    return result


# -------------------------------
# Public API
# -------------------------------


def resolve_config(
    settings: LoaderSettings | None = None,
    *,
    locator: ResourceLocator | None = None,
    logger: Logger | None = None,
) -> tuple[ConfigDocument, LoadContext]:
    """Loads and merges both layers, reporting how they were resolved.

    Args:
        settings: Which resources to load. Read from the environment if None.
        locator: Locator to use. Built from settings.resource_path if None.
        logger: Logger to use. Defaults to the global logger.

    Returns:
        The merged configuration and its LoadContext.

    Raises:
        ConfigParseError: If either resource holds malformed YAML.
        ResourceReadError: If reading an opened resource fails.
    """
    log = logger if logger is not None else get_global_logger()
    if settings is None:
        settings = LoaderSettings.from_environ()
    if locator is None:
        locator = ResourceLocator(settings.resource_path, logger=log)

    common_id = settings.common_resource_id
    environment_id = settings.environment_resource_id

    log.verbose("CONFIG", f"Loading common config: {common_id}")
    common = _read_resource(common_id, locator, log)

    log.verbose("CONFIG", f"Loading environment config: {environment_id}")
    environment = _read_resource(environment_id, locator, log)

    merged = merge_documents(common or {}, environment or {})
    log.verbose(
        "CONFIG",
        f"Merged config has {len(merged)} top-level keys: {', '.join(map(str, merged))}",
    )

    context = LoadContext(
        common_resource_id=common_id,
        environment_resource_id=environment_id,
        common_found=common is not None,
        environment_found=environment is not None,
    )
    return merged, context


def load_effective_config(
    settings: LoaderSettings | None = None,
    *,
    locator: ResourceLocator | None = None,
    logger: Logger | None = None,
) -> ConfigDocument:
    """Loads the common and environment layers and returns the merged config.

    See resolve_config() for arguments and errors.
    """
    merged, _ = resolve_config(settings, locator=locator, logger=logger)
    return merged
