"""
Tests for the strategy catalogue.
"""

import pytest

from singletons import (
    STRATEGIES,
    Strategy,
    UnknownStrategyError,
    get_strategy,
    load_accessor,
    load_module,
    recommend,
)
from singletons import holder


class TestStrategyTable:
    """Test the strategy table contents."""

    def test_every_strategy_described(self):
        assert set(STRATEGIES) == set(Strategy)
        for strategy, info in STRATEGIES.items():
            assert info.strategy is strategy

    def test_only_unsynchronized_is_unsafe(self):
        unsafe = [s for s, info in STRATEGIES.items() if not info.thread_safe]

        assert unsafe == [Strategy.UNSYNCHRONIZED]

    def test_eager_variants_are_not_lazy(self):
        eager = {s for s, info in STRATEGIES.items() if not info.lazy}

        assert eager == {Strategy.EAGER, Strategy.ENUMERATION}

    @pytest.mark.parametrize("strategy", list(Strategy), ids=lambda s: s.value)
    def test_module_exposes_accessor(self, strategy):
        module = load_module(strategy)

        assert callable(module.get_instance)
        assert callable(module.construction_count)


class TestGetStrategy:
    """Test strategy name resolution."""

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("eager", Strategy.EAGER),
            ("double-checked", Strategy.DOUBLE_CHECKED),
            (" HOLDER ", Strategy.HOLDER),
            (Strategy.LOCKED, Strategy.LOCKED),
        ],
    )
    def test_resolves_names(self, name, expected):
        assert get_strategy(name) is expected

    def test_unknown_name_raises(self):
        with pytest.raises(UnknownStrategyError) as excinfo:
            get_strategy("borg")

        assert excinfo.value.name == "borg"
        assert "borg" in str(excinfo.value)

    def test_unknown_strategy_is_key_error(self):
        with pytest.raises(KeyError):
            load_accessor("monostate")


class TestLoadAccessor:
    """Test accessor loading."""

    def test_returns_module_accessor(self):
        accessor = load_accessor("holder")

        assert accessor is holder.get_instance
        assert accessor() is holder.get_instance()


class TestRecommend:
    """Test strategy recommendation."""

    def test_default_is_eager(self):
        assert recommend() is Strategy.EAGER

    def test_lazy_loading_uses_holder(self):
        assert recommend(lazy=True) is Strategy.HOLDER

    def test_serialization_uses_enumeration(self):
        assert recommend(serialization=True) is Strategy.ENUMERATION
        assert recommend(lazy=True, serialization=True) is Strategy.ENUMERATION

    def test_special_needs_use_double_checked(self):
        assert recommend(custom=True) is Strategy.DOUBLE_CHECKED

    @pytest.mark.parametrize("lazy", [True, False])
    @pytest.mark.parametrize("serialization", [True, False])
    @pytest.mark.parametrize("custom", [True, False])
    def test_never_recommends_unsafe_strategy(self, lazy, serialization, custom):
        strategy = recommend(lazy=lazy, serialization=serialization, custom=custom)

        assert STRATEGIES[strategy].thread_safe
