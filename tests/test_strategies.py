"""Tests for LoopBench summation strategies."""

import pytest

from loopbench.strategies import (
    STRATEGIES,
    for_each,
    get_strategy,
    iter_keys,
    list_strategies,
    resolve_strategies,
)
from loopbench.utils.errors import InvalidInputError


class TestStrategyFunctions:
    """Each strategy sums the sequence exactly once."""

    @pytest.mark.parametrize("name", list(STRATEGIES))
    def test_sums_one_to_five(self, name):
        assert STRATEGIES[name]([1, 2, 3, 4, 5]) == 15

    @pytest.mark.parametrize("name", list(STRATEGIES))
    def test_single_element(self, name):
        assert STRATEGIES[name]([1]) == 1

    @pytest.mark.parametrize("name", list(STRATEGIES))
    def test_empty_sequence_sums_to_zero(self, name):
        assert STRATEGIES[name]([]) == 0

    @pytest.mark.parametrize("name", list(STRATEGIES))
    def test_large_values_do_not_overflow(self, name):
        big = 2**63 - 1
        assert STRATEGIES[name]([big, big]) == 2 * big

    def test_iter_keys_yields_string_indices_in_order(self):
        assert list(iter_keys([10, 20, 30])) == ["0", "1", "2"]

    def test_for_each_visits_in_order(self):
        seen = []
        for_each([3, 1, 2], seen.append)
        assert seen == [3, 1, 2]


class TestStrategyRegistry:
    """Registry lookup and ordering."""

    def test_fixed_run_order(self):
        assert list_strategies() == ["for_index", "while_loop", "for_item", "for_key", "callback"]

    def test_get_strategy_by_name(self):
        strategy = get_strategy("for_key")
        assert strategy.label == "for...in"
        assert strategy([4, 5]) == 9

    def test_get_unknown_strategy_raises(self):
        with pytest.raises(InvalidInputError, match="Unknown strategy"):
            get_strategy("do_while")

    def test_resolve_none_returns_all(self):
        assert [s.name for s in resolve_strategies()] == list_strategies()

    def test_resolve_preserves_requested_order(self):
        names = [s.name for s in resolve_strategies(["callback", "for_index"])]
        assert names == ["callback", "for_index"]

    def test_resolve_empty_selection_raises(self):
        with pytest.raises(InvalidInputError):
            resolve_strategies([])

    @pytest.mark.parametrize("names", [5, "for_item", 2.0])
    def test_resolve_rejects_non_list_selection(self, names):
        with pytest.raises(InvalidInputError, match="must be a list"):
            resolve_strategies(names)

    def test_resolve_rejects_non_string_name(self):
        with pytest.raises(InvalidInputError, match="must be a string"):
            resolve_strategies([["for_item"]])
