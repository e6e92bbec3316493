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

"""Resource lookup on a search path.

Configuration files are addressed by resource id (e.g. ``/common.yaml``)
rather than by filesystem path. A ResourceLocator holds an ordered list of
roots and returns the first root that contains the id. Roots may be plain
directories or package data obtained from importlib.resources, so a test
suite can ship its YAML inside a Python package.

A resource that cannot be found is not an error here: lookups return None
and the loader treats that as an empty document.

Example:
    Look up resources in a directory and in package data:
        ```python
        from importlib.resources import files
        from pathlib import Path
        from webcfg.config.resources import ResourceLocator

        locator = ResourceLocator([Path("config"), files("mysuite.resources")])
        stream = locator.open_resource("/common.yaml")
        if stream is not None:
            with stream:
                print(stream.read())
        ```
"""

from __future__ import annotations

from collections.abc import Iterable
from importlib.resources.abc import Traversable
from pathlib import Path
from typing import BinaryIO

from webcfg.logging import Logger, get_global_logger

__all__ = ["ResourceLocator"]


class ResourceLocator:
    """Finds resources by id across an ordered list of roots.

    Attributes:
        roots: Search roots, tried in order.
    """

    def __init__(
        self,
        roots: Iterable[Path | Traversable],
        logger: Logger | None = None,
    ) -> None:
        self.roots: tuple[Path | Traversable, ...] = tuple(roots)
        self._logger = logger

    @property
    def logger(self) -> Logger:
        return self._logger if self._logger is not None else get_global_logger()

    def find(self, resource_id: str) -> Path | Traversable | None:
        """Return the first file matching resource_id, or None.

        Args:
            resource_id: Id such as "/common.yaml" or "/envs/qa.yaml".

        Returns:
            The matching file under the first root that has it, else None.
        """
        parts = [p for p in resource_id.split("/") if p]
        if not parts:
            return None

        for root in self.roots:
            candidate = root
            for part in parts:
                candidate = candidate.joinpath(part)
            if candidate.is_file():
                self.logger.verbose("RESOURCE", f"Found '{resource_id}' in {root}")
                return candidate

        self.logger.debug("RESOURCE", f"No resource found for '{resource_id}'")
        return None

    def open_resource(self, resource_id: str) -> BinaryIO | None:
        """Open a resource for binary reading.

        Args:
            resource_id: Id of the resource to open.

        Returns:
            An open binary stream the caller must close, or None when the
            resource is not on the search path or cannot be opened.
        """
        candidate = self.find(resource_id)
        if candidate is None:
            return None
        try:
            return candidate.open("rb")
        except OSError as err:
            self.logger.debug(
                "RESOURCE", f"Could not open '{resource_id}' ({candidate}): {err}"
            )
            return None
