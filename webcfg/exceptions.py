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

"""Exception hierarchy for webcfg.

Loading configuration is deliberately forgiving: a missing resource, a
missing key or a value of the wrong shape all degrade to an empty default.
The exceptions below cover the few conditions that do reach the caller:

- ConfigParseError: an opened resource does not contain valid YAML
- ResourceReadError: reading bytes from an opened resource failed

All exceptions inherit from WebCfgError, allowing users to catch every
webcfg error with a single except clause if needed.

Example:
    Catching load failures:
        ```python
        from webcfg import LayeredConfigStore
        from webcfg.exceptions import ConfigParseError, ResourceReadError

        store = LayeredConfigStore()
        try:
            store.load_configuration()
        except ConfigParseError as e:
            print(f"Bad YAML: {e}")
        except ResourceReadError as e:
            print(f"Could not read configuration: {e}")
        ```
"""

from __future__ import annotations

__all__ = [
    "WebCfgError",
    "ConfigError",
    "ConfigParseError",
    "ResourceReadError",
]


class WebCfgError(Exception):
    """Base exception for all webcfg errors."""

    pass


class ConfigError(WebCfgError):
    """Raised for configuration-related errors.

    Missing resources and mismatched value shapes are NOT errors; see the
    accessor functions in webcfg.config.accessors.
    """

    pass


class ConfigParseError(ConfigError):
    """Raised when an opened resource holds malformed YAML.

    The original yaml.YAMLError is chained as ``__cause__``.
    """

    pass


class ResourceReadError(ConfigError, OSError):
    """Raised when reading an already opened resource fails.

    Also an OSError, so callers handling plain I/O failures keep working.
    The original OSError is chained as ``__cause__``.
    """

    pass
