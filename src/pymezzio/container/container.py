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
"""Service locator contract and a minimal in-memory implementation."""

from __future__ import annotations

import difflib
from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable

from pymezzio.container.exceptions import ServiceNotFoundError


@runtime_checkable
class ServiceLocator(Protocol):
    """Read-only view of a service registry keyed by string."""

    def has(self, key: str) -> bool: ...
    def get(self, key: str) -> Any: ...


class InMemoryContainer:
    """Dictionary-backed :class:`ServiceLocator`.

    ``set`` stores a value returned as is, so a callable registered with
    ``set`` is handed out unchanged. ``factory`` stores a zero-argument
    callable invoked on every ``get``; results are not cached.
    """

    def __init__(self) -> None:
        self._services: dict[str, Any] = {}
        self._factories: dict[str, Callable[[], Any]] = {}

    def set(self, key: str, value: Any) -> None:
        """Register *value* under *key*, replacing any earlier registration."""
        self._factories.pop(key, None)
        self._services[key] = value

    def factory(self, key: str, factory: Callable[[], Any]) -> None:
        """Register a lazily invoked zero-argument *factory* under *key*."""
        self._services.pop(key, None)
        self._factories[key] = factory

    def has(self, key: str) -> bool:
        return key in self._services or key in self._factories

    def get(self, key: str) -> Any:
        if key in self._services:
            return self._services[key]
        if key in self._factories:
            return self._factories[key]()
        raise ServiceNotFoundError(key, suggestions=self._similar_keys(key))

    def _similar_keys(self, key: str) -> list[str]:
        registered = [*self._services, *self._factories]
        return difflib.get_close_matches(key, registered, n=5, cutoff=0.4)
