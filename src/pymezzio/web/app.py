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
"""Starlette application factory wiring the 404 handler."""

from __future__ import annotations

from collections.abc import Mapping

from starlette.applications import Starlette
from starlette.routing import BaseRoute

from pymezzio.container import keys
from pymezzio.container.container import ServiceLocator
from pymezzio.container.not_found_handler import NotFoundHandlerResolver
from pymezzio.core.config import Config
from pymezzio.logging.port import LoggingPort
from pymezzio.web.not_found import NotFoundHandler


def create_app(
    container: ServiceLocator,
    routes: list[BaseRoute] | None = None,
    debug: bool = False,
    logging_port: LoggingPort | None = None,
) -> Starlette:
    """Create a Starlette application whose unmatched requests hit :class:`NotFoundHandler`.

    A handler registered under :data:`keys.NOT_FOUND_HANDLER` is used as is;
    otherwise one is built with :class:`NotFoundHandlerResolver`.

    When *logging_port* is given (e.g. ``StructlogAdapter()``) it is
    configured from the container's ``config`` service before anything
    else is resolved.
    """
    if logging_port is not None:
        logging_port.configure(_as_config(container))
        logger = logging_port.get_logger("pymezzio.web")
    else:
        logger = None

    if container.has(keys.NOT_FOUND_HANDLER):
        handler: NotFoundHandler = container.get(keys.NOT_FOUND_HANDLER)
    else:
        handler = NotFoundHandlerResolver()(container)

    if logger is not None:
        logger.info("Not-found handler installed", template=handler.template, layout=handler.layout)

    return Starlette(
        debug=debug,
        routes=routes or [],
        exception_handlers={404: handler},
    )


def _as_config(container: ServiceLocator) -> Config:
    config = container.get(keys.CONFIG) if container.has(keys.CONFIG) else None
    if isinstance(config, Config):
        return config
    if isinstance(config, Mapping):
        return Config(config)
    return Config()
