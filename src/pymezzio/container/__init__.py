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
"""PyMezzio Container — service locator and framework factories."""

from pymezzio.container import keys
from pymezzio.container.container import InMemoryContainer, ServiceLocator
from pymezzio.container.exceptions import (
    ContainerException,
    MissingRequiredServiceError,
    ServiceNotFoundError,
)
from pymezzio.container.not_found_handler import NotFoundHandlerResolver
from pymezzio.container.response_factory import (
    ResponseFactoryResolution,
    ResponseFactorySource,
    detect_response_factory,
    response_factory_factory,
)

__all__ = [
    "ContainerException",
    "InMemoryContainer",
    "MissingRequiredServiceError",
    "NotFoundHandlerResolver",
    "ResponseFactoryResolution",
    "ResponseFactorySource",
    "ServiceLocator",
    "ServiceNotFoundError",
    "detect_response_factory",
    "keys",
    "response_factory_factory",
]
