# Argmatch — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `ArgMatcher`, the single-pass matching algorithm that turns a
token sequence into an `ArgMatches` result for a given `ArgSpecRegistry`.

The scan runs left to right without backtracking. At each position an alias match
wins over a subcommand name, which wins over positional collection. Once a
subcommand token is recognized, every remaining token is handed to the nested
registry and the outer scan ends.

Key Features:
- Exact short (`-x`) and long (`--name`) alias resolution
- POSIX-style bundling of short aliases (`-abc` -> `-a -b -c`)
- Value binding with validator checks on live values
- Default substitution and required-argument checks after the scan
- Recursive subcommand delegation with error path tracking
- Configurable handling of unrecognized flag-shaped tokens

Example Usage:
    matcher = ArgMatcher(registry, unknown_options="error")
    matches = matcher.match(["-v", "--name", "value", "build", "--release"])
"""
from __future__ import annotations

from enum import Enum
from typing import Sequence

from argmatch.arg_spec import ArgSpec
from argmatch.exceptions import (
    ConfigurationError,
    MissingRequiredError,
    MissingValueError,
    ParseError,
    UnknownOptionError,
    ValidationFailedError,
)
from argmatch.logger import logger
from argmatch.matches import ArgMatches
from argmatch.registry import ArgSpecRegistry


class UnknownOptionPolicy(Enum):
    """
    Defines how flag-shaped tokens that match no declared alias are handled.

    Members:
        POSITIONAL: Collect the token as a positional (default).
        ERROR: Raise `UnknownOptionError`.

    Aliases:
        - "permissive", "ignore" → "positional"
        - "strict" → "error"

    Example:
        UnknownOptionPolicy("strict") → UnknownOptionPolicy.ERROR
    """

    POSITIONAL = "positional"
    ERROR = "error"

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "permissive": "positional",
            "ignore": "positional",
            "strict": "error",
        }
        return aliases.get(value, value)

    @classmethod
    def _missing_(cls, value: object) -> UnknownOptionPolicy:
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        normalized = value.strip().lower()
        alias = cls._get_alias(normalized)
        for member in cls:
            if member.value == alias:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    def __str__(self) -> str:
        return self.value


def is_flag_shaped(token: str) -> bool:
    """Return True if `token` looks like an option rather than a value."""
    return token.startswith("-") and len(token) > 1


class ArgMatcher:
    """
    Matches token sequences against an ArgSpecRegistry.

    The matcher only reads the registry. Matching freezes the registry tree so
    that it cannot change between or during parses.
    """

    def __init__(
        self,
        registry: ArgSpecRegistry,
        unknown_options: UnknownOptionPolicy | str = UnknownOptionPolicy.POSITIONAL,
    ) -> None:
        if not isinstance(registry, ArgSpecRegistry):
            raise TypeError(
                f"registry must be an ArgSpecRegistry, got {type(registry).__name__}"
            )
        self.registry: ArgSpecRegistry = registry
        self.unknown_options: UnknownOptionPolicy = UnknownOptionPolicy(unknown_options)

    def _expand_posix_bundling(self, token: str) -> list[str] | None:
        """Expand `-abc` into `-a -b -c` if every character is a declared short alias."""
        if not token.startswith("-") or token.startswith("--") or len(token) <= 2:
            return None
        chars = token[1:]
        if not all(self.registry.has_short(char) for char in chars):
            return None
        return [f"-{char}" for char in chars]

    def _consume_alias(
        self,
        spec: ArgSpec,
        args: list[str],
        i: int,
        values: dict[str, str],
        flags: dict[str, bool],
    ) -> int:
        """Apply the alias at `args[i]` and return the index of the next token."""
        if not spec.takes_value:
            flags[spec.name] = True
            logger.debug("Flag '%s' set by %r", spec.name, args[i])
            return i + 1

        if i + 1 >= len(args) or args[i + 1].startswith("-"):
            raise MissingValueError(spec.name)
        value = args[i + 1]

        if spec.validator is not None:
            try:
                accepted = spec.validator(value)
            except Exception as error:
                raise ValidationFailedError(spec.name, value) from error
            if not isinstance(accepted, bool):
                raise ConfigurationError(
                    f"Validator for '{spec.name}' returned {type(accepted).__name__}, expected bool"
                )
            if not accepted:
                raise ValidationFailedError(spec.name, value)

        if spec.name in values:
            logger.debug(
                "Argument '%s' given again, replacing %r", spec.name, values[spec.name]
            )
        values[spec.name] = value
        logger.debug("Bound '%s' = %r from %r", spec.name, value, args[i])
        return i + 2

    def _delegate(self, name: str, child: ArgSpecRegistry, remaining: list[str]) -> ArgMatches:
        logger.debug("Delegating %d token(s) to subcommand '%s'", len(remaining), name)
        try:
            return ArgMatcher(child, unknown_options=self.unknown_options).match(remaining)
        except ParseError as error:
            error.prepend_command(name)
            raise

    def _collect_positional(self, token: str, positionals: list[str]) -> None:
        if is_flag_shaped(token) and self.unknown_options == UnknownOptionPolicy.ERROR:
            suggestions = tuple(
                alias for alias in self.registry.aliases() if alias.startswith(token)
            )
            raise UnknownOptionError(token, suggestions)
        positionals.append(token)

    def _resolve_missing(self, values: dict[str, str]) -> None:
        """Substitute defaults and enforce required value-taking arguments."""
        for spec in self.registry:
            if not spec.takes_value or spec.name in values:
                continue
            if spec.default is not None:
                values[spec.name] = spec.default
                logger.debug("Defaulted '%s' = %r", spec.name, spec.default)
            elif spec.required:
                raise MissingRequiredError(spec.name)

    def match(self, tokens: Sequence[str]) -> ArgMatches:
        """
        Match `tokens` against the registry.

        Args:
            tokens (Sequence[str]): Invocation arguments without the program name.

        Returns:
            ArgMatches: The parse result for this level and any nested subcommand.

        Raises:
            MissingValueError: A value-taking alias has no usable value token.
            ValidationFailedError: A validator rejected a bound value.
            MissingRequiredError: A required argument has no value or default.
            UnknownOptionError: An unrecognized option under the ERROR policy.
            ConfigurationError: A validator returned something other than a bool.
        """
        if isinstance(tokens, str):
            raise TypeError("tokens must be a sequence of strings, not a single string")
        self.registry.freeze()

        args = list(tokens)
        values: dict[str, str] = {}
        flags: dict[str, bool] = {spec.name: False for spec in self.registry if spec.is_flag()}
        positionals: list[str] = []
        subcommand: ArgMatches | None = None
        subcommand_name: str | None = None

        i = 0
        while i < len(args):
            token = args[i]
            spec = self.registry.lookup_alias(token)
            if spec is None:
                expanded = self._expand_posix_bundling(token)
                if expanded is not None:
                    args[i : i + 1] = expanded
                    token = args[i]
                    spec = self.registry.lookup_alias(token)
            if spec is not None:
                i = self._consume_alias(spec, args, i, values, flags)
                continue

            child = self.registry.subcommands.get(token)
            if child is not None:
                subcommand_name = token
                subcommand = self._delegate(token, child, args[i + 1 :])
                break

            self._collect_positional(token, positionals)
            i += 1

        self._resolve_missing(values)

        return ArgMatches(
            values=values,
            flags=flags,
            positionals=tuple(positionals),
            subcommand=subcommand,
            subcommand_name=subcommand_name,
        )
