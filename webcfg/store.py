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

"""Layered configuration store for browser-automation tests.

LayeredConfigStore loads the common and environment YAML resources, keeps
the merged document, and answers the lookups step definitions need: the
URL of a screen, the id of an element, the text of a message, the browser
to drive.

Recognised Keys:

- webpage_client: base_url, selenium.browser
- screens: <screen name> -> url, title, check_for_ids, get_here_by, form_data
- messages: <key> -> text
- element_ids: <key> -> element id
- element_groups: <group name> -> list of element keys

Every accessor returns a value of its declared type. Anything missing or of
the wrong shape comes back as "", [] or {}, so callers treat empty as "not
configured".

Example:
    ```python
    from pathlib import Path
    from webcfg import LayeredConfigStore, LoaderSettings

    store = LayeredConfigStore(
        LoaderSettings(environment_file="staging", resource_path=(Path("config"),))
    )
    store.load_configuration()
    print(store.base_url())
    print(store.url_for("User Details"))
    ```
"""

from __future__ import annotations

from typing import Any, BinaryIO

from webcfg.config.accessors import as_mapping, as_sequence, as_string
from webcfg.config.loader import LoadContext, resolve_config
from webcfg.config.resources import ResourceLocator
from webcfg.config.settings import LoaderSettings
from webcfg.logging import Logger, get_global_logger

__all__ = ["LayeredConfigStore"]

# Top-level keys
WEBPAGE_CLIENT = "webpage_client"
SCREENS = "screens"
MESSAGES = "messages"
ELEMENT_IDS = "element_ids"
ELEMENT_GROUPS = "element_groups"

# Second-level keys
BASE_URL = "base_url"
SELENIUM = "selenium"

# Third-level keys
BROWSER = "browser"
URL = "url"
TITLE = "title"
CHECK_FOR_IDS = "check_for_ids"
GET_HERE_BY = "get_here_by"
FORM_DATA = "form_data"


class LayeredConfigStore:
    """Holds the merged configuration of a test run.

    Settings passed to the constructor are used as-is. Without them, the
    environment variables described in webcfg.config.settings are read on
    every load_configuration() call.

    Attributes:
        settings: Explicit settings, or None to read them from the environment.
    """

    def __init__(
        self,
        settings: LoaderSettings | None = None,
        *,
        locator: ResourceLocator | None = None,
        logger: Logger | None = None,
    ) -> None:
        self.settings = settings
        self._locator = locator
        self._logger = logger
        self._config: dict[str, Any] = {}
        self._context: LoadContext | None = None

    @property
    def logger(self) -> Logger:
        return self._logger if self._logger is not None else get_global_logger()

    @property
    def config(self) -> dict[str, Any]:
        """The merged configuration; empty until load_configuration() runs."""
        return self._config

    @property
    def context(self) -> LoadContext | None:
        """How the last load resolved its resources, or None before loading."""
        return self._context

    # -------------------------------
    # Loading
    # -------------------------------

    def _current_settings(self) -> LoaderSettings:
        if self.settings is not None:
            return self.settings
        return LoaderSettings.from_environ()

    def _current_locator(self, settings: LoaderSettings) -> ResourceLocator:
        if self._locator is not None:
            return self._locator
        return ResourceLocator(settings.resource_path, logger=self._logger)

    def common_resource_id(self) -> str:
        return self._current_settings().common_resource_id

    def environment_resource_id(self) -> str:
        return self._current_settings().environment_resource_id

    def open_common_resource(self) -> BinaryIO | None:
        """Open the common resource; None when it is not on the search path."""
        settings = self._current_settings()
        self.logger.debug(
            "CONFIG", f"Getting common stream for '{settings.common_resource_id}'"
        )
        return self._current_locator(settings).open_resource(
            settings.common_resource_id
        )

    def open_environment_resource(self) -> BinaryIO | None:
        """Open the environment resource; None when it is not on the search path."""
        settings = self._current_settings()
        self.logger.debug(
            "CONFIG",
            f"Getting environment stream for '{settings.environment_resource_id}'",
        )
        return self._current_locator(settings).open_resource(
            settings.environment_resource_id
        )

    def load_configuration(self) -> dict[str, Any]:
        """Load both layers, merge them and keep the result.

        Returns:
            The merged configuration.

        Raises:
            ConfigParseError: If a resource holds malformed YAML.
            ResourceReadError: If reading an opened resource fails.
        """
        settings = self._current_settings()
        self.logger.verbose("CONFIG", "Loading YAML configuration files...")
        self._config, self._context = resolve_config(
            settings,
            locator=self._current_locator(settings),
            logger=self._logger,
        )
        self.logger.verbose("CONFIG", "...loaded")
        return self._config

    # -------------------------------
    # Accessors
    # -------------------------------

    def webpage_client(self) -> dict[str, Any]:
        return as_mapping(self._config, WEBPAGE_CLIENT, self._logger)

    def messages(self) -> dict[str, Any]:
        return as_mapping(self._config, MESSAGES, self._logger)

    def screens(self) -> dict[str, Any]:
        return as_mapping(self._config, SCREENS, self._logger)

    def screen_info(self, screen_name: str) -> dict[str, Any]:
        return as_mapping(self.screens(), screen_name, self._logger)

    def url_for(self, screen_name: str) -> str:
        return as_string(self.screen_info(screen_name), URL, self._logger)

    def title_for(self, screen_name: str) -> str:
        return as_string(self.screen_info(screen_name), TITLE, self._logger)

    def check_for_ids_for(self, screen_name: str) -> list[Any]:
        """Element keys whose presence confirms the screen has loaded."""
        return as_sequence(self.screen_info(screen_name), CHECK_FOR_IDS, self._logger)

    def get_here_by_for(self, screen_name: str) -> str:
        """How the screen is reached (e.g. "GET", "POST")."""
        return as_string(self.screen_info(screen_name), GET_HERE_BY, self._logger)

    def form_data_for(self, screen_name: str) -> list[Any]:
        return as_sequence(self.screen_info(screen_name), FORM_DATA, self._logger)

    def element_ids(self) -> dict[str, Any]:
        return as_mapping(self._config, ELEMENT_IDS, self._logger)

    def element_id(self, element_key: str) -> str:
        return as_string(self.element_ids(), element_key, self._logger)

    def element_groups(self) -> dict[str, Any]:
        return as_mapping(self._config, ELEMENT_GROUPS, self._logger)

    def element_group(self, group_name: str) -> list[Any]:
        return as_sequence(self.element_groups(), group_name, self._logger)

    def message(self, message_key: str) -> str:
        return as_string(self.messages(), message_key, self._logger)

    def base_url(self) -> str:
        return as_string(self.webpage_client(), BASE_URL, self._logger)

    def selenium(self) -> dict[str, Any]:
        return as_mapping(self.webpage_client(), SELENIUM, self._logger)

    def browser(self) -> str:
        return as_string(self.selenium(), BROWSER, self._logger)
