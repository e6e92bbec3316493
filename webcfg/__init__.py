"""
webcfg - layered YAML configuration for browser-automation tests

webcfg loads the configuration a UI test suite needs (pages, element ids,
messages, browser settings) from two YAML resources:

  - a common file shared by every environment (default: common.yaml)
  - an environment file with overrides for the target (default: localhost.yaml)

The environment file replaces common entries at the top level, and typed
accessors return empty values instead of failing for anything missing.

Quick Start
-----------
    >>> from webcfg import LayeredConfigStore
    >>> store = LayeredConfigStore()
    >>> config = store.load_configuration()
    >>> store.base_url()
    'localhost:8700'

Select the environment with TEST_ENVIRONMENT_CONFIG_FILE=staging, or pass
LoaderSettings(environment_file="staging") to the store.

Package Structure
-----------------
store : module
    LayeredConfigStore and its accessors.
config : package
    Settings, resource lookup, YAML loading and merging, typed lookups.
exceptions : module
    Exception hierarchy.
logging : module
    Pluggable, silent-by-default logger.

Project Information
-------------------
Author: Roger Cibrian
License: Apache-2.0
"""

__version__ = "0.1.0"
__author__ = "Roger Cibrian"
__license__ = "Apache-2.0"
__description__ = "Layered YAML configuration for browser-automation tests"

# Re-export commonly used names for convenience
from webcfg.config import LoadContext, LoaderSettings, ResourceLocator
from webcfg.config import load_effective_config
from webcfg.exceptions import (
    ConfigError,
    ConfigParseError,
    ResourceReadError,
    WebCfgError,
)
from webcfg.store import LayeredConfigStore

__all__ = [
    "__version__",
    "__author__",
    "__license__",
    "__description__",
    "LayeredConfigStore",
    "LoadContext",
    "LoaderSettings",
    "ResourceLocator",
    "load_effective_config",
    "WebCfgError",
    "ConfigError",
    "ConfigParseError",
    "ResourceReadError",
]
