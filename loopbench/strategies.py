"""Summation strategies compared by the iteration benchmark.

Every strategy computes the same value, the sum of all elements of the
sequence, visiting each element exactly once in ascending index order with a
local accumulator. They differ only in the iteration construct used:

- ``for_index``: counter loop over ``range(len(seq))`` with subscripting.
- ``while_loop``: pre-test ``while`` loop with a manually advanced counter.
- ``for_item``: direct iteration over the sequence (JavaScript ``for...of``).
- ``for_key``: enumeration of string-formatted indices, each converted back
  with ``int()`` before subscripting (JavaScript ``for...in``). It measures
  string-conversion overhead and is not an idiom to recommend.
- ``callback``: a ``for_each`` helper calling a closure once per element
  (JavaScript ``forEach``).

Python ints never overflow, so every accumulator widens as needed.
"""

from collections.abc import Callable, Iterable, Iterator, Sequence
from dataclasses import dataclass

from loopbench.utils.errors import InvalidInputError


def sum_for_index(sequence: Sequence[int]) -> int:
    total = 0
    for i in range(len(sequence)):
        total += sequence[i]
    return total


def sum_while_loop(sequence: Sequence[int]) -> int:
    total = 0
    i = 0
    while i < len(sequence):
        total += sequence[i]
        i += 1
    return total


def sum_for_item(sequence: Sequence[int]) -> int:
    total = 0
    for value in sequence:
        total += value
    return total


def iter_keys(sequence: Sequence[int]) -> Iterator[str]:
    """Yield the positions of ``sequence`` as strings, in ascending order."""
    for i in range(len(sequence)):
        yield str(i)


def sum_for_key(sequence: Sequence[int]) -> int:
    total = 0
    for key in iter_keys(sequence):
        total += sequence[int(key)]
    return total


def for_each(sequence: Iterable[int], callback: Callable[[int], None]) -> None:
    """Invoke ``callback`` once per element of ``sequence``."""
    for value in sequence:
        callback(value)


def sum_callback(sequence: Sequence[int]) -> int:
    total = 0

    def accumulate(value: int) -> None:
        nonlocal total
        total += value

    for_each(sequence, accumulate)
    return total


@dataclass(frozen=True)
class Strategy:
    """A named iteration construct that sums a sequence."""

    name: str
    label: str
    description: str
    func: Callable[[Sequence[int]], int]

    def __call__(self, sequence: Sequence[int]) -> int:
        return self.func(sequence)


# Run order matches the order strategies are reported in.
STRATEGIES: dict[str, Strategy] = {
    s.name: s
    for s in (
        Strategy("for_index", "for (indexed)", "Counter loop over range(len(seq)) with subscripting", sum_for_index),
        Strategy("while_loop", "while", "Pre-test while loop with a manual counter", sum_while_loop),
        Strategy("for_item", "for...of", "Direct iteration over the sequence elements", sum_for_item),
        Strategy(
            "for_key",
            "for...in",
            "Enumerates string-formatted indices and converts each back to int",
            sum_for_key,
        ),
        Strategy("callback", "forEach", "Calls a closure once per element via for_each()", sum_callback),
    )
}


def list_strategies() -> list[str]:
    """Return strategy names in run order."""
    return list(STRATEGIES)


def get_strategy(name: str) -> Strategy:
    """Look up a strategy by name.

    Raises:
        InvalidInputError: If no strategy has that name
    """
    if not isinstance(name, str):
        raise InvalidInputError(f"Strategy name must be a string, got {name!r}")
    if name not in STRATEGIES:
        available = ", ".join(STRATEGIES)
        raise InvalidInputError(f"Unknown strategy '{name}'. Available strategies: {available}")
    return STRATEGIES[name]


def resolve_strategies(names: Iterable[str] | None = None) -> list[Strategy]:
    """Resolve strategy names to Strategy objects.

    Args:
        names: Strategy names in the desired run order; None selects all

    Returns:
        List of Strategy objects

    Raises:
        InvalidInputError: If names is not a collection of strategy names,
            is empty, or holds an unknown name
    """
    if names is None:
        return list(STRATEGIES.values())
    # a bare string would otherwise be split into single characters
    if isinstance(names, str) or not isinstance(names, Iterable):
        raise InvalidInputError(f"strategies must be a list of strategy names, got {names!r}")
    resolved = [get_strategy(name) for name in names]
    if not resolved:
        raise InvalidInputError("At least one strategy must be selected")
    return resolved
