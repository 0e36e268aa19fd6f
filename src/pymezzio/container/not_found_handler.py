# Copyright 2026 Firefly Software Solutions Inc.
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
"""Factory building the 404 handler from a service locator."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from pymezzio.container import keys
from pymezzio.container.container import ServiceLocator
from pymezzio.container.response_factory import detect_response_factory, response_factory_factory
from pymezzio.core.config import lookup
from pymezzio.web.not_found import NotFoundHandler

logger = logging.getLogger(__name__)

TEMPLATE_PATH = ("mezzio", "error_handler", "template_404")
LAYOUT_PATH = ("mezzio", "error_handler", "layout")


class NotFoundHandlerResolver:
    """Builds a :class:`NotFoundHandler` out of locator services and config.

    Reads ``mezzio.error_handler.template_404`` and
    ``mezzio.error_handler.layout``. A missing template falls back to
    :attr:`NotFoundHandler.TEMPLATE_DEFAULT`; a missing or ``null`` layout
    becomes the empty string, as does any non-string layout.

    Usage::

        container.factory(keys.NOT_FOUND_HANDLER, lambda: resolver(container))
    """

    def __init__(self, default_provider: Callable[..., Any] = response_factory_factory) -> None:
        self._default_provider = default_provider

    def __call__(self, locator: ServiceLocator) -> NotFoundHandler:
        return self.resolve(locator)

    def resolve(self, locator: ServiceLocator, config: Any = None) -> NotFoundHandler:
        if config is None and locator.has(keys.CONFIG):
            config = locator.get(keys.CONFIG)

        resolution = detect_response_factory(locator, config, self._default_provider)
        renderer = locator.get(keys.TEMPLATE_RENDERER) if locator.has(keys.TEMPLATE_RENDERER) else None

        template = lookup(config, TEMPLATE_PATH)
        if not isinstance(template, str):
            template = NotFoundHandler.TEMPLATE_DEFAULT

        layout = lookup(config, LAYOUT_PATH)
        if not isinstance(layout, str):
            layout = ""

        logger.debug(
            "Resolved not-found handler: source=%s renderer=%s template=%s layout=%r",
            resolution.source.name,
            type(renderer).__name__ if renderer is not None else None,
            template,
            layout,
        )
        return NotFoundHandler(
            response_factory=resolution.response_factory,
            renderer=renderer,
            template=template,
            layout=layout,
        )
