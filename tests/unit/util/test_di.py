"""Unit tests for provider selection."""

import pytest

from forum.util.di import (
    PersistenceProvider,
    ProdConfigProvider,
    ProdPersistenceProvider,
    ProviderBase,
    get_provider,
)
from forum.util.error import DependencyInjectionError
from tests.di import MockPersistenceProvider, build_test_container


class TestGetProvider:
    def test_concrete_provider_is_returned_as_is(self):
        assert get_provider(ProdConfigProvider) is ProdConfigProvider

    def test_component_selection(self):
        assert get_provider(PersistenceProvider) is ProdPersistenceProvider
        assert (
            get_provider(PersistenceProvider, use_mock=True) is MockPersistenceProvider
        )

    def test_missing_implementation(self):
        class ComponentBase(ProviderBase):
            __mock_component__ = "persistence"

        class OnlyProduction(ComponentBase):
            __is_mock__ = False

        with pytest.raises(DependencyInjectionError):
            get_provider(ComponentBase, use_mock=True)


class TestBuildTestContainer:
    def test_unknown_component(self):
        with pytest.raises(ValueError):
            build_test_container(unmock={"cache"})
