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
"""Jinja2 template renderer resolving ``namespace::name`` template names."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from jinja2 import BaseLoader, DictLoader, Environment, Template, TemplateNotFound, select_autoescape
from markupsafe import Markup


class Jinja2TemplateRenderer:
    """:class:`TemplateRenderer` backed by a Jinja2 environment.

    ``error::404`` is looked up as ``error/404.html`` in the loader. Pass a
    ``PackageLoader``/``FileSystemLoader`` for templates on disk, or
    *templates* (keyed by ``namespace::name``) for an in-memory ``DictLoader``.

    When the params carry a ``layout``, the rendered page is handed to that
    layout template as the ``content`` variable.

    Usage::

        renderer = Jinja2TemplateRenderer(PackageLoader("myapp", "templates"))
        renderer.render("error::404", {"layout": "layout::default"})
    """

    def __init__(
        self,
        loader: BaseLoader | None = None,
        *,
        templates: Mapping[str, str] | None = None,
        extension: str = ".html",
    ) -> None:
        self._extension = extension
        if loader is None:
            loader = DictLoader(
                {self.template_path(name): source for name, source in (templates or {}).items()}
            )
        self._env = Environment(
            loader=loader,
            autoescape=select_autoescape(["html", "htm", "xml"]),
            keep_trailing_newline=True,
        )

    @property
    def environment(self) -> Environment:
        return self._env

    def template_path(self, name: str) -> str:
        """Map ``namespace::name`` onto the loader path ``namespace/name<extension>``."""
        namespace, sep, rest = name.partition("::")
        path = f"{namespace}/{rest}" if sep else name
        return path if path.endswith(self._extension) else path + self._extension

    def render(self, name: str, params: Mapping[str, Any] | None = None) -> str:
        values = dict(params or {})
        content = self._get_template(name).render(values)

        layout = values.get("layout")
        if not layout:
            return content
        values["content"] = Markup(content)
        return self._get_template(layout).render(values)

    def _get_template(self, name: str) -> Template:
        try:
            return self._env.get_template(self.template_path(name))
        except TemplateNotFound:
            raise KeyError(f"Template '{name}' is not registered") from None
