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

"""Configuration loading for webcfg.

This package loads YAML configuration in two layers:

  - Common file, shared by every environment (/common.yaml)
  - Environment file, overrides for the target environment (/localhost.yaml)

The environment layer replaces common keys at the top level only. Resources
are looked up on a search path of directories or package data.

Example:
    Basic usage:
        ```python
        from webcfg.config import LoaderSettings, load_effective_config

        config = load_effective_config(LoaderSettings(environment_file="qa"))
        print(config.get("webpage_client", {}).get("base_url"))
        ```
"""

from .accessors import as_mapping, as_sequence, as_string
from .loader import (
    LoadContext,
    load_document,
    load_effective_config,
    merge_documents,
    parse_yaml,
    read_document,
    resolve_config,
)
from .resources import ResourceLocator
from .settings import LoaderSettings, resource_id

__all__ = [
    "LoadContext",
    "LoaderSettings",
    "ResourceLocator",
    "as_mapping",
    "as_sequence",
    "as_string",
    "load_document",
    "load_effective_config",
    "merge_documents",
    "parse_yaml",
    "read_document",
    "resolve_config",
    "resource_id",
]
