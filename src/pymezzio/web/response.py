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
"""Response factories: the port, the Starlette default and the callable decorator."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from starlette.responses import Response

ResponseSupplier = Callable[[], Response]


@runtime_checkable
class ResponseFactory(Protocol):
    """Creates fresh, empty responses."""

    def create_response(self, status_code: int = 200, reason_phrase: str = "") -> Response: ...


class StarletteResponseFactory:
    """Default :class:`ResponseFactory` producing empty Starlette responses.

    Starlette responses carry no reason phrase; the argument is accepted for
    protocol compatibility and ignored.
    """

    def create_response(self, status_code: int = 200, reason_phrase: str = "") -> Response:
        return Response(status_code=status_code)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, StarletteResponseFactory)

    def __hash__(self) -> int:
        return hash(StarletteResponseFactory)


@dataclass(frozen=True)
class FactoryResponseSupplier:
    """Zero-argument supplier producing a fresh response from *factory*.

    Compares equal to any supplier over an equal factory.
    """

    factory: ResponseFactory

    def __call__(self) -> Response:
        return self.factory.create_response()


class CallableResponseFactoryDecorator:
    """Adapts a zero-argument response supplier to :class:`ResponseFactory`.

    The supplier takes no arguments, so ``status_code`` and ``reason_phrase``
    are ignored; callers set the status on the returned response.

    Only non-callables are rejected: a Starlette ``Response`` is itself an
    ASGI callable, so passing a response instead of a supplier is not
    detected here.
    """

    __slots__ = ("_supplier",)

    def __init__(self, supplier: ResponseSupplier) -> None:
        if not callable(supplier):
            raise TypeError(
                f"Response supplier must be callable, got {type(supplier).__name__}"
            )
        self._supplier = supplier

    def create_response(self, status_code: int = 200, reason_phrase: str = "") -> Response:
        return self._supplier()

    def get_response_from_callable(self) -> Response:
        return self._supplier()

    def get_underlying_supplier(self) -> ResponseSupplier:
        return self._supplier

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CallableResponseFactoryDecorator):
            return NotImplemented
        return self._supplier == other._supplier

    def __hash__(self) -> int:
        return hash(self._supplier)

    def __repr__(self) -> str:
        return f"CallableResponseFactoryDecorator({self._supplier!r})"
