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
"""Tests for NotFoundHandlerResolver — building the 404 handler from the container."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

import pytest
from starlette.responses import Response

from pymezzio.container import (
    InMemoryContainer,
    MissingRequiredServiceError,
    NotFoundHandlerResolver,
    keys,
    response_factory_factory,
)
from pymezzio.core.config import Config
from pymezzio.web.not_found import NotFoundHandler
from pymezzio.web.response import CallableResponseFactoryDecorator


# -- Fixtures --


class StubRenderer:
    def render(self, name: str, params: Mapping[str, Any] | None = None) -> str:
        return name


@dataclass(frozen=True)
class ThemedRenderer:
    theme: str = "default"

    def render(self, name: str, params: Mapping[str, Any] | None = None) -> str:
        return f"{self.theme}:{name}"


class StubResponseFactory:
    def create_response(self, status_code: int = 200, reason_phrase: str = "") -> Response:
        return Response(status_code=status_code)


class EmptyIndexable:
    """Indexable config object that knows no keys."""

    def __getitem__(self, key: str) -> Any:
        raise KeyError(key)


class NullIndexable:
    """Indexable config object answering ``None`` for every key."""

    def __getitem__(self, key: str) -> Any:
        return None


class DictIndexable:
    def __init__(self, data: dict[str, Any]) -> None:
        self._data = data

    def __getitem__(self, key: str) -> Any:
        return self._data[key]


def _custom_supplier() -> Response:
    return Response(status_code=200)


CONFIGS_WITH_DEFAULT_RESPONSE_PROVIDER = {
    "default": {"dependencies": {"factories": {keys.RESPONSE: response_factory_factory}}},
    "aliased": {"dependencies": {"aliases": {keys.RESPONSE: response_factory_factory}}},
    "unconfigured": {},
}

CONFIGS_WITH_OVERRIDDEN_RESPONSE_PROVIDER = {
    "default": {"dependencies": {"factories": {keys.RESPONSE: _custom_supplier}}},
    "aliased": {"dependencies": {"aliases": {keys.RESPONSE: "app.CustomResponse"}}},
    "delegated": {"dependencies": {"delegators": {keys.RESPONSE: [_custom_supplier]}}},
}


@pytest.fixture
def response() -> Response:
    return Response()


@pytest.fixture
def container(response: Response) -> InMemoryContainer:
    c = InMemoryContainer()
    c.set(keys.RESPONSE, lambda: response)
    return c


@pytest.fixture
def resolver() -> NotFoundHandlerResolver:
    return NotFoundHandlerResolver()


# -- Renderer and template configuration --


class TestRendererAndTemplates:
    def test_creates_instance_without_renderer_when_service_missing(self, container, resolver):
        handler = resolver(container)

        assert handler == NotFoundHandler(CallableResponseFactoryDecorator(container.get(keys.RESPONSE)))
        assert handler.renderer is None
        assert handler.template == NotFoundHandler.TEMPLATE_DEFAULT
        assert handler.layout == ""

    def test_uses_renderer_service_when_present(self, container, resolver):
        renderer = StubRenderer()
        container.set(keys.TEMPLATE_RENDERER, renderer)

        handler = resolver(container)

        assert handler.renderer is renderer
        assert handler == NotFoundHandler(
            CallableResponseFactoryDecorator(container.get(keys.RESPONSE)),
            renderer,
        )

    def test_uses_configured_404_template_and_layout(self, container, resolver):
        config = {"mezzio": {"error_handler": {"layout": "layout::error", "template_404": "foo::bar"}}}
        container.set(keys.CONFIG, config)

        handler = resolver(container)

        assert handler == NotFoundHandler(
            CallableResponseFactoryDecorator(container.get(keys.RESPONSE)),
            None,
            "foo::bar",
            "layout::error",
        )

    def test_null_layout_becomes_empty_string(self, container, resolver):
        config = {"mezzio": {"error_handler": {"template_404": "foo::bar", "layout": None}}}
        container.set(keys.CONFIG, config)

        handler = resolver(container)

        assert handler.template == "foo::bar"
        assert handler.layout == ""

    def test_missing_layout_becomes_empty_string(self, container, resolver):
        container.set(keys.CONFIG, {"mezzio": {"error_handler": {"template_404": "foo::bar"}}})

        assert resolver(container).layout == ""

    def test_non_string_template_falls_back_to_default(self, container, resolver):
        container.set(keys.CONFIG, {"mezzio": {"error_handler": {"template_404": 404}}})

    @pytest.mark.parametrize("layout", [{"a": 1}, ["layout::error"], 42, True])
    def test_non_string_layout_becomes_empty_string(self, container, resolver, layout):
        container.set(keys.CONFIG, {"mezzio": {"error_handler": {"layout": layout}}})

        assert resolver(container).layout == ""

        assert resolver(container).template == NotFoundHandler.TEMPLATE_DEFAULT

    def test_explicit_config_argument_wins_over_container_config(self, container, resolver):
        container.set(keys.CONFIG, {"mezzio": {"error_handler": {"template_404": "from::container"}}})

        handler = resolver.resolve(container, {"mezzio": {"error_handler": {"template_404": "from::argument"}}})

        assert handler.template == "from::argument"

    def test_scalar_in_config_path_is_treated_as_absent(self, container, resolver):
        container.set(keys.CONFIG, {"mezzio": {"error_handler": "not-a-map"}})

        handler = resolver(container)

        assert handler.template == NotFoundHandler.TEMPLATE_DEFAULT
        assert handler.layout == ""


class TestConfigShapes:
    @pytest.mark.parametrize("config", [EmptyIndexable(), NullIndexable(), "string", 42])
    def test_handles_config_without_mapping_shape(self, container, resolver, config):
        container.set(keys.CONFIG, config)

        handler = resolver(container)

        assert handler.template == NotFoundHandler.TEMPLATE_DEFAULT
        assert handler.layout == ""

    def test_indexable_config_matches_plain_mapping(self, container, resolver):
        data = {"mezzio": {"error_handler": {"layout": "layout::error", "template_404": "foo::bar"}}}

        from_mapping = resolver.resolve(container, data)
        from_indexable = resolver.resolve(container, DictIndexable(data))

        assert from_indexable == from_mapping

    def test_config_object_matches_plain_mapping(self, container, resolver):
        data = {"mezzio": {"error_handler": {"layout": "layout::error", "template_404": "foo::bar"}}}

        assert resolver.resolve(container, Config(data)) == resolver.resolve(container, data)

    @pytest.mark.parametrize(
        "config",
        list(CONFIGS_WITH_OVERRIDDEN_RESPONSE_PROVIDER.values()),
        ids=list(CONFIGS_WITH_OVERRIDDEN_RESPONSE_PROVIDER),
    )
    def test_config_object_detects_override_like_plain_mapping(self, resolver, config):
        container = InMemoryContainer()
        container.set(keys.RESPONSE_FACTORY, StubResponseFactory())
        container.set(keys.RESPONSE, lambda: Response())

        from_config = resolver.resolve(container, Config(config))

        assert from_config == resolver.resolve(container, config)
        assert isinstance(from_config.response_factory, CallableResponseFactoryDecorator)


class TestIdempotence:
    def test_two_resolutions_are_value_equal(self, resolver, response):
        container = InMemoryContainer()
        container.set(keys.RESPONSE, lambda: response)
        container.factory(keys.TEMPLATE_RENDERER, ThemedRenderer)
        container.set(keys.CONFIG, {"mezzio": {"error_handler": {"template_404": "foo::bar"}}})

        first = resolver(container)
        second = resolver(container)

        assert first.renderer is not second.renderer
        assert first == second

    def test_default_response_wiring_is_value_equal(self, resolver):
        container = InMemoryContainer()
        container.factory(keys.RESPONSE, lambda: response_factory_factory(container))

        first = resolver(container)
        second = resolver(container)

        first_supplier = first.response_factory.get_underlying_supplier()
        assert first_supplier is not second.response_factory.get_underlying_supplier()
        assert first == second


# -- Response factory selection --


class TestResponseFactorySelection:
    @pytest.mark.parametrize(
        "config",
        list(CONFIGS_WITH_DEFAULT_RESPONSE_PROVIDER.values()),
        ids=list(CONFIGS_WITH_DEFAULT_RESPONSE_PROVIDER),
    )
    def test_uses_registered_response_factory_when_response_not_overridden(self, resolver, config):
        response_factory = StubResponseFactory()
        container = InMemoryContainer()
        container.set(keys.CONFIG, config)
        container.set(keys.RESPONSE_FACTORY, response_factory)

        handler = resolver(container)

        assert handler.get_response_factory() is response_factory

    @pytest.mark.parametrize(
        "config",
        list(CONFIGS_WITH_OVERRIDDEN_RESPONSE_PROVIDER.values()),
        ids=list(CONFIGS_WITH_OVERRIDDEN_RESPONSE_PROVIDER),
    )
    def test_wraps_response_supplier_when_response_overridden(self, resolver, config):
        response_factory = StubResponseFactory()
        response = Response()
        container = InMemoryContainer()
        container.set(keys.CONFIG, config)
        container.set(keys.RESPONSE_FACTORY, response_factory)
        container.set(keys.RESPONSE, lambda: response)

        factory = resolver(container).get_response_factory()

        assert factory is not response_factory
        assert isinstance(factory, CallableResponseFactoryDecorator)
        assert factory.get_response_from_callable() is response

    def test_custom_default_provider_token_is_honoured(self, response):
        def my_default(locator):
            return lambda: response

        response_factory = StubResponseFactory()
        container = InMemoryContainer()
        container.set(keys.CONFIG, {"dependencies": {"factories": {keys.RESPONSE: my_default}}})
        container.set(keys.RESPONSE_FACTORY, response_factory)

        handler = NotFoundHandlerResolver(default_provider=my_default)(container)

        assert handler.get_response_factory() is response_factory

    def test_raises_when_no_response_service_can_be_located(self, resolver):
        with pytest.raises(MissingRequiredServiceError) as exc_info:
            resolver(InMemoryContainer())

        assert exc_info.value.key == keys.RESPONSE
        assert exc_info.value.code == "MISSING_REQUIRED_SERVICE"

    def test_raises_when_override_leaves_no_supplier(self, resolver):
        container = InMemoryContainer()
        container.set(keys.RESPONSE_FACTORY, StubResponseFactory())
        container.set(keys.CONFIG, CONFIGS_WITH_OVERRIDDEN_RESPONSE_PROVIDER["delegated"])

        with pytest.raises(MissingRequiredServiceError):
            resolver(container)
