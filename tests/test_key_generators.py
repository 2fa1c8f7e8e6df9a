# ============================================================================
# KEY GENERATOR REGISTRY TESTS
# ============================================================================
# STATUS: Tests - Key generator registration and lookup
# PURPOSE: Verify defaults, case-insensitive lookup, last-wins duplicates
# CREATED: 16 OCT 2026
# ============================================================================
"""
Key Generator Registry Tests

Run with:
    pytest tests/test_key_generators.py -v
"""

import logging

import pytest

from core.contracts import KeyGeneratorStrategy
from core.errors import StructuralMappingError
from core.models import KeyGeneratorDef
from core.schema import SequenceKeyGenerator
from dialects.generic import GenericFactory
from dialects.mysql import MysqlFactory
from generator.key_generators import KeyGeneratorRegistry


@pytest.fixture
def registry():
    return KeyGeneratorRegistry(GenericFactory())


class TestBuiltinGenerators:
    """The registry starts with one generator per supported strategy."""

    def test_all_strategies_available(self, registry):
        for strategy in KeyGeneratorStrategy:
            assert registry.get(strategy.value).strategy == strategy

    def test_lookup_is_case_insensitive(self, registry):
        assert registry.get("identity") is registry.get("IDENTITY")

    def test_unknown_name(self, registry):
        assert registry.get("nope") is None
        assert registry.get(None) is None
        assert "nope" not in registry

    def test_mysql_has_no_sequence(self):
        registry = KeyGeneratorRegistry(MysqlFactory())
        assert registry.get("SEQUENCE") is None
        assert registry.get("IDENTITY") is not None


class TestRegistration:
    """Tests for declared key generators."""

    def test_register_named_sequence(self, registry):
        registry.register(KeyGeneratorDef(name="prod_seq", strategy="SEQUENCE",
                                          params={"sequence": "{0}_ids"}))
        generator = registry.get("Prod_Seq")
        assert isinstance(generator, SequenceKeyGenerator)
        assert generator.name == "PROD_SEQ"
        assert generator.params == {"sequence": "{0}_ids"}

    def test_unknown_strategy(self, registry):
        with pytest.raises(StructuralMappingError, match="Unknown key generator strategy"):
            registry.register(KeyGeneratorDef(name="odd", strategy="RANDOM"))

    def test_unsupported_strategy(self):
        registry = KeyGeneratorRegistry(MysqlFactory())
        with pytest.raises(StructuralMappingError, match="not supported"):
            registry.register(KeyGeneratorDef(name="seq", strategy="SEQUENCE"))

    def test_duplicate_last_wins_with_warning(self, registry, caplog):
        registry.register(KeyGeneratorDef(name="ids", strategy="MAX"))
        with caplog.at_level(logging.WARNING, logger="generator.key_generators"):
            registry.register(KeyGeneratorDef(name="IDS", strategy="UUID"))
        assert registry.get("ids").strategy == KeyGeneratorStrategy.UUID
        assert "declared more than once" in caplog.text

    def test_overriding_builtin_does_not_warn(self, registry, caplog):
        with caplog.at_level(logging.WARNING, logger="generator.key_generators"):
            registry.register(KeyGeneratorDef(name="SEQUENCE", params={"increment": 10}))
        assert registry.get("sequence").params == {"increment": 10}
        assert "declared more than once" not in caplog.text

    def test_load_and_reset(self, registry):
        count = registry.load([
            KeyGeneratorDef(name="a", strategy="MAX"),
            KeyGeneratorDef(name="b", strategy="UUID"),
        ])
        assert count == 2
        assert "A" in registry
        registry.reset()
        assert "A" not in registry
        assert "MAX" in registry
