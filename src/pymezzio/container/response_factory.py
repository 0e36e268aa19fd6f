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
"""Default response provider and response-factory detection."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any

from pymezzio.container import keys
from pymezzio.container.container import ServiceLocator
from pymezzio.container.exceptions import MissingRequiredServiceError
from pymezzio.core.config import lookup
from pymezzio.web.response import (
    CallableResponseFactoryDecorator,
    FactoryResponseSupplier,
    ResponseFactory,
    ResponseSupplier,
    StarletteResponseFactory,
)

logger = logging.getLogger(__name__)

_MISSING = object()


def response_factory_factory(locator: ServiceLocator) -> ResponseSupplier:
    """Framework default provider for the :data:`keys.RESPONSE` service.

    Returns a supplier creating a fresh response from the registered
    response factory, or from :class:`StarletteResponseFactory` when none
    is registered. Suppliers over equal factories compare equal.
    """
    if locator.has(keys.RESPONSE_FACTORY):
        factory: ResponseFactory = locator.get(keys.RESPONSE_FACTORY)
    else:
        factory = StarletteResponseFactory()
    return FactoryResponseSupplier(factory)


class ResponseFactorySource(Enum):
    """Where a resolved response factory came from."""

    CONTAINER = auto()
    DECORATED_SUPPLIER = auto()


@dataclass(frozen=True)
class ResponseFactoryResolution:
    response_factory: ResponseFactory
    source: ResponseFactorySource


def is_response_overridden(
    config: Any,
    default_provider: Callable[..., Any] = response_factory_factory,
) -> bool:
    """Whether *config* wires the response service to something custom.

    Delegators always count as an override. Factory and alias entries count
    unless they are the *default_provider* itself.
    """
    dependencies = lookup(config, ("dependencies",), default=None)
    if dependencies is None:
        return False

    if lookup(dependencies, ("delegators", keys.RESPONSE), default=_MISSING) is not _MISSING:
        return True

    for section in ("factories", "aliases"):
        provider = lookup(dependencies, (section, keys.RESPONSE), default=_MISSING)
        if provider is not _MISSING and provider is not default_provider:
            return True
    return False


def detect_response_factory(
    locator: ServiceLocator,
    config: Any = None,
    default_provider: Callable[..., Any] = response_factory_factory,
) -> ResponseFactoryResolution:
    """Pick the response factory the application should use.

    The registered :data:`keys.RESPONSE_FACTORY` service wins unless the
    configuration overrides the response service; otherwise the
    :data:`keys.RESPONSE` supplier is wrapped in a
    :class:`CallableResponseFactoryDecorator`.

    Raises:
        MissingRequiredServiceError: the supplier is needed but not registered.
    """
    if locator.has(keys.RESPONSE_FACTORY) and not is_response_overridden(config, default_provider):
        logger.debug("Using response factory registered under %s", keys.RESPONSE_FACTORY)
        return ResponseFactoryResolution(
            response_factory=locator.get(keys.RESPONSE_FACTORY),
            source=ResponseFactorySource.CONTAINER,
        )

    if not locator.has(keys.RESPONSE):
        raise MissingRequiredServiceError(keys.RESPONSE, required_by="response factory detection")

    logger.debug("Decorating response supplier registered under %s", keys.RESPONSE)
    return ResponseFactoryResolution(
        response_factory=CallableResponseFactoryDecorator(locator.get(keys.RESPONSE)),
        source=ResponseFactorySource.DECORATED_SUPPLIER,
    )
