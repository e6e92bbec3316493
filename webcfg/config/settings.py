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

"""Loader settings and resource name resolution.

Two resources make up the configuration of a test run:

1. **Common file** (default ``common``): baseline loaded for every environment
2. **Environment file** (default ``localhost``): overrides for the target
   environment, merged on top of the common file

Each name is turned into a resource id by prefixing ``/`` and appending
``.yaml``, so the defaults resolve to ``/common.yaml`` and
``/localhost.yaml``. The leading ``/`` anchors the id at a root of the
resource search path (see webcfg.config.resources).

Environment Variables:
    Only consulted by LoaderSettings.from_environ():

    - COMMON_YAML_CONFIG_FILE: common file name, without extension
    - TEST_ENVIRONMENT_CONFIG_FILE: environment file name, without extension
    - WEBCFG_RESOURCE_PATH: search roots separated by os.pathsep

Example:
    Explicit settings:
        ```python
        from pathlib import Path
        from webcfg.config import LoaderSettings

        settings = LoaderSettings(
            environment_file="staging",
            resource_path=(Path("tests/resources"),),
        )
        print(settings.environment_resource_id)  # /staging.yaml
        ```

    Settings taken from the process environment:
        ```python
        settings = LoaderSettings.from_environ()
        ```
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
import os
from pathlib import Path

__all__ = [
    "COMMON_FILE_ENV",
    "DEFAULT_COMMON_FILE",
    "DEFAULT_ENVIRONMENT_FILE",
    "ENVIRONMENT_FILE_ENV",
    "FILE_EXTENSION",
    "LoaderSettings",
    "RESOURCE_PATH_ENV",
    "resource_id",
]

COMMON_FILE_ENV = "COMMON_YAML_CONFIG_FILE"
ENVIRONMENT_FILE_ENV = "TEST_ENVIRONMENT_CONFIG_FILE"
RESOURCE_PATH_ENV = "WEBCFG_RESOURCE_PATH"

DEFAULT_COMMON_FILE = "common"
DEFAULT_ENVIRONMENT_FILE = "localhost"

FILE_EXTENSION = ".yaml"


def resource_id(name: str) -> str:
    """Return the resource id for a configuration file name.

    Args:
        name: File name without extension (e.g., "common").

    Returns:
        The id with a leading "/" and the ".yaml" extension.
    """
    return "/" + name + FILE_EXTENSION


def _default_resource_path() -> tuple[Path, ...]:
    return (Path.cwd(),)


@dataclass(frozen=True)
class LoaderSettings:
    """Which resources to load and where to look for them.

    Attributes:
        common_file: Common file name without extension.
        environment_file: Environment file name without extension.
        resource_path: Roots searched in order for each resource.
    """

    common_file: str = DEFAULT_COMMON_FILE
    environment_file: str = DEFAULT_ENVIRONMENT_FILE
    resource_path: tuple[Path, ...] = field(default_factory=_default_resource_path)

    @property
    def common_resource_id(self) -> str:
        return resource_id(self.common_file)

    @property
    def environment_resource_id(self) -> str:
        return resource_id(self.environment_file)

    @classmethod
    def from_environ(cls, environ: Mapping[str, str] | None = None) -> LoaderSettings:
        """Build settings from environment variables.

        Variables that are absent or empty fall back to the defaults. The
        environment is read on every call; nothing is cached.

        Args:
            environ: Mapping to read from. Defaults to os.environ.

        Returns:
            A new LoaderSettings instance.
        """
        if environ is None:
            environ = os.environ

        raw_path = environ.get(RESOURCE_PATH_ENV) or ""
        roots = tuple(Path(p) for p in raw_path.split(os.pathsep) if p)

        return cls(
            common_file=environ.get(COMMON_FILE_ENV) or DEFAULT_COMMON_FILE,
            environment_file=environ.get(ENVIRONMENT_FILE_ENV)
            or DEFAULT_ENVIRONMENT_FILE,
            resource_path=roots or _default_resource_path(),
        )
