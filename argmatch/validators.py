# Argmatch — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Ready-made value validators for use with `ArgSpecRegistry.attach_validator()`.

Every factory here returns a plain `str -> bool` predicate. Predicates are named
after the factory call that produced them so that registry definitions and debug
output stay readable.

Included Validators:
- ends_with / starts_with: Accept values with one of the given suffixes/prefixes.
- one_of: Accept one of a fixed set of words.
- matches: Accept values that fully match a regular expression.
- int_range: Accept integers within an inclusive range.
- non_empty: Reject empty or whitespace-only values.
- all_of: Combine predicates; every one must accept.
"""
from __future__ import annotations

import re
from typing import Callable

Predicate = Callable[[str], bool]


def _named(predicate: Predicate, name: str) -> Predicate:
    predicate.__name__ = name
    predicate.__qualname__ = name
    return predicate


def ends_with(*suffixes: str) -> Predicate:
    """Validator for values ending with any of `suffixes`."""
    if not suffixes:
        raise ValueError("ends_with requires at least one suffix")

    def validate(text: str) -> bool:
        return text.endswith(suffixes)

    return _named(validate, f"ends_with({', '.join(map(repr, suffixes))})")


def starts_with(*prefixes: str) -> Predicate:
    """Validator for values starting with any of `prefixes`."""
    if not prefixes:
        raise ValueError("starts_with requires at least one prefix")

    def validate(text: str) -> bool:
        return text.startswith(prefixes)

    return _named(validate, f"starts_with({', '.join(map(repr, prefixes))})")


def one_of(*choices: str, case_sensitive: bool = True) -> Predicate:
    """Validator for a fixed set of words."""
    if not choices:
        raise ValueError("one_of requires at least one choice")
    allowed = set(choices) if case_sensitive else {choice.lower() for choice in choices}

    def validate(text: str) -> bool:
        return (text if case_sensitive else text.lower()) in allowed

    return _named(validate, f"one_of({', '.join(map(repr, choices))})")


def matches(pattern: str | re.Pattern[str]) -> Predicate:
    """Validator for values fully matching `pattern`."""
    compiled = re.compile(pattern)

    def validate(text: str) -> bool:
        return compiled.fullmatch(text) is not None

    return _named(validate, f"matches({compiled.pattern!r})")


def int_range(minimum: int, maximum: int) -> Predicate:
    """Validator for integer ranges."""
    if minimum > maximum:
        raise ValueError(f"minimum ({minimum}) cannot be greater than maximum ({maximum})")

    def validate(text: str) -> bool:
        try:
            value = int(text)
        except ValueError:
            return False
        return minimum <= value <= maximum

    return _named(validate, f"int_range({minimum}, {maximum})")


def non_empty() -> Predicate:
    """Validator rejecting empty or whitespace-only values."""

    def validate(text: str) -> bool:
        return bool(text.strip())

    return _named(validate, "non_empty()")


def all_of(*predicates: Predicate) -> Predicate:
    """Validator that accepts only if every predicate accepts."""
    if not predicates:
        raise ValueError("all_of requires at least one predicate")
    for predicate in predicates:
        if not callable(predicate):
            raise ValueError(f"{predicate!r} is not callable")

    def validate(text: str) -> bool:
        return all(predicate(text) for predicate in predicates)

    names = ", ".join(getattr(predicate, "__name__", "?") for predicate in predicates)
    return _named(validate, f"all_of({names})")
