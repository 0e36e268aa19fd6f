"""Tests for the default response provider and response-factory detection."""

import pytest
from starlette.responses import Response

from pymezzio.container import (
    InMemoryContainer,
    ResponseFactorySource,
    detect_response_factory,
    keys,
    response_factory_factory,
)
from pymezzio.container.response_factory import is_response_overridden
from pymezzio.core.config import Config
from pymezzio.web.response import CallableResponseFactoryDecorator


class TeapotResponseFactory:
    def create_response(self, status_code: int = 200, reason_phrase: str = "") -> Response:
        return Response(status_code=418)


class TestResponseFactoryFactory:
    def test_uses_registered_response_factory(self):
        container = InMemoryContainer()
        container.set(keys.RESPONSE_FACTORY, TeapotResponseFactory())

        supplier = response_factory_factory(container)

        assert supplier().status_code == 418

    def test_falls_back_to_starlette_factory(self):
        supplier = response_factory_factory(InMemoryContainer())

        response = supplier()

        assert isinstance(response, Response)
        assert response.status_code == 200

    def test_supplier_produces_fresh_responses(self):
        supplier = response_factory_factory(InMemoryContainer())
        assert supplier() is not supplier()

    def test_wires_as_response_service(self):
        container = InMemoryContainer()
        container.factory(keys.RESPONSE, lambda: response_factory_factory(container))

        resolution = detect_response_factory(container)

        assert resolution.source is ResponseFactorySource.DECORATED_SUPPLIER
        assert isinstance(resolution.response_factory.create_response(), Response)


class TestIsResponseOverridden:
    @pytest.mark.parametrize("config", [None, {}, {"dependencies": {}}, Config({})])
    def test_no_dependencies_means_not_overridden(self, config):
        assert not is_response_overridden(config)

    def test_default_provider_factory_is_not_an_override(self):
        config = {"dependencies": {"factories": {keys.RESPONSE: response_factory_factory}}}
        assert not is_response_overridden(config)

    def test_other_factory_is_an_override(self):
        config = {"dependencies": {"factories": {keys.RESPONSE: lambda locator: None}}}
        assert is_response_overridden(config)

    def test_alias_to_other_service_is_an_override(self):
        config = {"dependencies": {"aliases": {keys.RESPONSE: "app.Response"}}}
        assert is_response_overridden(config)

    def test_any_delegator_is_an_override(self):
        config = {"dependencies": {"delegators": {keys.RESPONSE: []}}}
        assert is_response_overridden(config)

    def test_entries_for_other_services_are_ignored(self):
        config = {"dependencies": {"factories": {"app.Other": lambda locator: None}}}
        assert not is_response_overridden(config)

    def test_reads_config_objects(self):
        config = Config({"dependencies": {"delegators": {keys.RESPONSE: []}}})
        assert is_response_overridden(config)


class TestDetectResponseFactory:
    def test_prefers_registered_response_factory(self):
        factory = TeapotResponseFactory()
        container = InMemoryContainer()
        container.set(keys.RESPONSE_FACTORY, factory)
        container.set(keys.RESPONSE, lambda: Response())

        resolution = detect_response_factory(container, {})

        assert resolution.source is ResponseFactorySource.CONTAINER
        assert resolution.response_factory is factory

    def test_decorates_supplier_when_no_factory_registered(self):
        supplier = lambda: Response()  # noqa: E731
        container = InMemoryContainer()
        container.set(keys.RESPONSE, supplier)

        resolution = detect_response_factory(container)

        assert resolution.source is ResponseFactorySource.DECORATED_SUPPLIER
        assert isinstance(resolution.response_factory, CallableResponseFactoryDecorator)
        assert resolution.response_factory.get_underlying_supplier() is supplier
