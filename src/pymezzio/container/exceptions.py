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
"""Container exceptions — fatal errors while wiring services at bootstrap."""

from __future__ import annotations

from pymezzio.kernel.exceptions import InfrastructureException


class ContainerException(InfrastructureException):
    """A service could not be provided by the service locator."""


class ServiceNotFoundError(ContainerException):
    """No service is registered under the requested key."""

    def __init__(
        self,
        key: str,
        *,
        required_by: str | None = None,
        suggestions: list[str] | None = None,
    ) -> None:
        self.key = key
        self.required_by = required_by
        self.suggestions = suggestions or []

        lines = [f"{type(self).__name__}: No service registered under '{key}'"]
        if required_by:
            lines.append("")
            lines.append(f"  Required by: {required_by}")
        if self.suggestions:
            lines.append("")
            lines.append(f"  Similar registered keys: {', '.join(self.suggestions)}")

        super().__init__(
            "\n".join(lines),
            code="SERVICE_NOT_FOUND",
            context={"key": key},
        )


class MissingRequiredServiceError(ServiceNotFoundError):
    """A service the application cannot start without is absent.

    Raised when neither a usable response factory nor a response supplier
    can be located.
    """

    def __init__(self, key: str, *, required_by: str | None = None) -> None:
        super().__init__(key, required_by=required_by)
        self.code = "MISSING_REQUIRED_SERVICE"
