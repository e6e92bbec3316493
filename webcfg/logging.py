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

"""Logging interface for webcfg.

The loader and accessors report what they resolved, what they could not
find and which values had an unexpected shape. Those reports go through a
small logger interface so a test suite can decide how chatty configuration
loading should be.

Output levels:

- Step: Always printed (coarse progress, e.g. "loading configuration")
- Verbose: Printed when verbose mode is enabled (resources resolved, merge)
- Debug: Printed when debug mode is enabled (missing keys, shape mismatches)

Prefixes used by the library:

- CONFIG: loading and merging documents
- RESOURCE: resource lookup on the search path
- ACCESS: accessor misses and mismatches

Example:
    Turn on debug output for the whole process:
        ```python
        from webcfg.logging import get_logger, set_global_logger

        set_global_logger(get_logger(debug=True))
        ```

    Pass a logger to a single store instead:
        ```python
        from webcfg import LayeredConfigStore
        from webcfg.logging import get_logger

        store = LayeredConfigStore(logger=get_logger(verbose=True))
        ```

Note:
    The default global logger is silent, so nothing is printed unless a
    caller opts in.
"""

from __future__ import annotations

from typing import Protocol


class Logger(Protocol):
    """Protocol for logger implementations."""

    def step(self, step: int, total: int, message: str) -> None:
        """Print a step indicator.

        Args:
            step: Current step number (1-based).
            total: Total number of steps.
            message: Step description.
        """
        ...

    def verbose(self, prefix: str, message: str) -> None:
        """Print a verbose log message.

        Args:
            prefix: Message prefix (e.g., "CONFIG", "RESOURCE").
            message: Log message.
        """
        ...

    def debug(self, prefix: str, message: str) -> None:
        """Print a debug log message.

        Args:
            prefix: Message prefix (e.g., "ACCESS").
            message: Log message.
        """
        ...


class DefaultLogger:
    """Logger that prints to stdout, filtered by verbose and debug flags."""

    def __init__(self, verbose: bool = False, debug: bool = False) -> None:
        """Initialize logger with verbosity settings.

        Args:
            verbose: If True, print verbose messages.
            debug: If True, print debug messages (implies verbose).
        """
        self._verbose = verbose or debug
        self._debug = debug

    def step(self, step: int, total: int, message: str) -> None:
        print(f"[{step}/{total}] {message}")

    def verbose(self, prefix: str, message: str) -> None:
        if self._verbose:
            print(f"[{prefix}] {message}")

    def debug(self, prefix: str, message: str) -> None:
        if self._debug:
            print(f"[{prefix}] {message}")


class SilentLogger:
    """Logger that suppresses all output."""

    def step(self, step: int, total: int, message: str) -> None:
        pass

    def verbose(self, prefix: str, message: str) -> None:
        pass

    def debug(self, prefix: str, message: str) -> None:
        pass


# Global logger instance (defaults to silent)
_global_logger: Logger = SilentLogger()


def get_logger(verbose: bool = False, debug: bool = False) -> Logger:
    """Get a stdout logger with the given verbosity.

    Args:
        verbose: If True, logger will print verbose messages.
        debug: If True, logger will print debug messages (implies verbose).

    Returns:
        A DefaultLogger configured with the specified verbosity.
    """
    return DefaultLogger(verbose=verbose, debug=debug)


def get_global_logger() -> Logger:
    """Return the process-wide logger used when none is passed explicitly."""
    return _global_logger


def set_global_logger(logger: Logger) -> None:
    """Replace the process-wide logger.

    Args:
        logger: Logger instance to use as the global logger.

    Note:
        This affects every store and loader call that is not given a
        logger. Pass a logger to LayeredConfigStore for isolation.
    """
    global _global_logger
    _global_logger = logger
