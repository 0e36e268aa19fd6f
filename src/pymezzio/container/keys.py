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
"""Well-known service keys."""

CONFIG = "config"

# Zero-argument callable producing a fresh response.
RESPONSE = "pymezzio.http.Response"

# Object exposing ``create_response(status_code, reason_phrase)``.
RESPONSE_FACTORY = "pymezzio.http.ResponseFactory"

TEMPLATE_RENDERER = "pymezzio.template.TemplateRenderer"

NOT_FOUND_HANDLER = "pymezzio.web.NotFoundHandler"
