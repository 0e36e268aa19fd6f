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
"""Final request handler answering with 404 Not Found."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar

from starlette.requests import Request
from starlette.responses import Response

from pymezzio.template.ports.outbound import TemplateRenderer
from pymezzio.web.response import ResponseFactory

_BODY_HEADERS = ("content-length", "content-type")


@dataclass(frozen=True)
class NotFoundHandler:
    """Immutable 404 handler.

    The factory supplies a prototype response whose non-body headers are
    copied onto the 404 response. Without a renderer the body is a
    plain-text ``Cannot METHOD /path``; with one, ``template`` is rendered
    inside ``layout`` (an empty layout renders the template alone).
    """

    TEMPLATE_DEFAULT: ClassVar[str] = "error::404"
    STATUS_CODE: ClassVar[int] = 404

    response_factory: ResponseFactory
    renderer: TemplateRenderer | None = None
    template: str = TEMPLATE_DEFAULT
    layout: str = ""

    def get_response_factory(self) -> ResponseFactory:
        return self.response_factory

    async def handle(self, request: Request) -> Response:
        if self.renderer is None:
            return self._generate_plain_text_response(request)
        return self._generate_templated_response(self.renderer, request)

    async def __call__(self, request: Request, exc: Exception | None = None) -> Response:
        """Starlette exception-handler signature."""
        return await self.handle(request)

    def _generate_plain_text_response(self, request: Request) -> Response:
        body = f"Cannot {request.method} {request.url.path}"
        return self._write(body, "text/plain")

    def _generate_templated_response(self, renderer: TemplateRenderer, request: Request) -> Response:
        params: dict[str, Any] = {"request": request}
        if self.layout:
            params["layout"] = self.layout
        return self._write(renderer.render(self.template, params), "text/html")

    def _write(self, body: str, media_type: str) -> Response:
        prototype = self.response_factory.create_response(self.STATUS_CODE)
        headers = {
            key: value
            for key, value in prototype.headers.items()
            if key not in _BODY_HEADERS
        }
        return Response(
            content=body,
            status_code=self.STATUS_CODE,
            headers=headers,
            media_type=media_type,
        )
