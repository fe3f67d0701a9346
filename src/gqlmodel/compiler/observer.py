# Copyright 2026 GqlModel Contributors
# SPDX-License-Identifier: Apache-2.0

"""Progress observers notified while documents are introspected."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol

from gqlmodel.model.entities import Model

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


class IntrospectionObserver(Protocol):
    """Receives progress notifications. Implementations must not raise."""

    def on_file_start(self, path: Path) -> None: ...

    def on_model(self, model: Model) -> None: ...


class NullObserver:
    """Observer that ignores every notification."""

    def on_file_start(self, path: Path) -> None:
        pass

    def on_model(self, model: Model) -> None:
        pass


class LoggingObserver:
    """Observer that reports progress through :mod:`logging`."""

    def __init__(self, log: logging.Logger | None = None) -> None:
        self._log = log or logger

    def on_file_start(self, path: Path) -> None:
        self._log.info("Introspecting %s", path)

    def on_model(self, model: Model) -> None:
        self._log.info("Model %s (source %s, %d field(s))", model.name, model.source, len(model.fields))
