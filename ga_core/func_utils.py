"""
Function composition helpers.

Used to assemble per-locus genotype-to-phenotype converters out of
smaller transformations.
"""

from typing import Any, Callable, Iterable


def identity(value: Any) -> Any:
    """Return value unchanged."""
    return value


def repeat_function(fn: Callable[[Any], Any], times: int) -> Callable[[Any], Any]:
    """
    Compose a function with itself.

    Args:
        fn: Single-argument function
        times: How many applications the result performs (>= 1)

    Returns:
        Function equivalent to fn(fn(...fn(x)))
    """
    if times < 1:
        raise ValueError(f"times must be at least 1, got {times}")

    def repeated(value):
        for _ in range(times):
            value = fn(value)
        return value

    return repeated


def compose_functions(functions: Iterable[Callable[[Any], Any]]) -> Callable[[Any], Any]:
    """
    Chain functions left to right: the first one is applied first.

    An empty sequence yields the identity function.
    """
    chain = list(functions)
    if not chain:
        return identity

    def composed(value):
        for fn in chain:
            value = fn(value)
        return value

    return composed
