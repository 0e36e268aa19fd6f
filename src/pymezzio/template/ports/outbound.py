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
"""TemplateRenderer protocol — port for rendering named templates."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class TemplateRenderer(Protocol):
    """Abstract template-rendering interface.

    Template names use the ``namespace::name`` convention, e.g. ``error::404``.
    """

    def render(self, name: str, params: Mapping[str, Any] | None = None) -> str:
        """Render template *name* with *params*.

        Raises ``KeyError`` when the template is unknown.
        """
        ...
