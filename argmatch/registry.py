# Argmatch — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `ArgSpecRegistry`, the declarative schema for one parser
level. A registry holds an ordered set of `ArgSpec` declarations and a mapping of
subcommand names to nested registries.

Registries are built through a fluent API where every call mutates the registry
and returns it, so a whole schema reads as one chained expression. Any violation
of the schema's invariants (duplicate names, colliding aliases, references to
undeclared arguments) raises a `ConfigurationError` immediately: these are
programming errors and are never deferred to parse time.

Public Interface:
- `declare(name)`: Add a new argument with only its name set.
- `set_short(name, char)` / `set_long(name, string)`: Attach aliases.
- `mark_takes_value(name)` / `mark_required(name)`: Set value semantics.
- `set_default(name, value)`: Register a fallback value.
- `attach_validator(name, predicate)`: Register a value predicate.
- `attach_subcommand(name, child)`: Nest another registry under a name.
- `parse(tokens)`: Freeze the registry and match tokens into `ArgMatches`.

Example Usage:
    registry = (
        ArgSpecRegistry()
        .declare("input")
        .set_short("input", "i")
        .set_long("input", "input-file")
        .mark_takes_value("input")
        .set_default("input", "default.txt")
    )
    matches = registry.parse(["-i", "file.txt"])

    # matches.values == {"input": "file.txt"}
"""
from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Iterator, Mapping, Sequence

from argmatch.arg_spec import ArgSpec, Validator
from argmatch.exceptions import (
    ConfigurationError,
    DuplicateAliasError,
    DuplicateArgumentError,
    DuplicateSubcommandError,
    InvalidAliasError,
    RegistryFrozenError,
    UndeclaredArgumentError,
)
from argmatch.logger import logger

if TYPE_CHECKING:
    from argmatch.matcher import UnknownOptionPolicy
    from argmatch.matches import ArgMatches


class ArgSpecRegistry:
    """
    Declarative argument schema for a single parser level.

    Features:
    - Fluent, chainable configuration.
    - Unique names and aliases enforced at configuration time.
    - Nested registries for subcommands, to any depth.
    - Implicit freezing on first parse.
    """

    def __init__(self) -> None:
        """Initialize an empty ArgSpecRegistry."""
        self._specs: dict[str, ArgSpec] = {}
        self._short_map: dict[str, ArgSpec] = {}
        self._long_map: dict[str, ArgSpec] = {}
        self._subcommands: dict[str, ArgSpecRegistry] = {}
        self._frozen: bool = False

    def _ensure_mutable(self) -> None:
        if self._frozen:
            raise RegistryFrozenError("Registry cannot be modified after parsing")

    def _get_spec(self, name: str) -> ArgSpec:
        self._ensure_mutable()
        spec = self._specs.get(name)
        if spec is None:
            raise UndeclaredArgumentError(name)
        return spec

    def _validate_short(self, char: str) -> None:
        if not isinstance(char, str) or len(char) != 1:
            raise InvalidAliasError(char, "short alias must be a single character")
        if char == "-" or char.isspace():
            raise InvalidAliasError(char, "short alias cannot be '-' or whitespace")

    def _validate_long(self, long: str) -> None:
        if not isinstance(long, str) or len(long) < 2:
            raise InvalidAliasError(long, "long alias must be at least 2 characters")
        if long.startswith("-"):
            raise InvalidAliasError(long, "long alias must be given without dashes")
        if any(char.isspace() for char in long):
            raise InvalidAliasError(long, "long alias cannot contain whitespace")

    def declare(self, name: str) -> ArgSpecRegistry:
        """
        Declare a new argument.

        Args:
            name (str): Unique name of the argument within this registry.

        Raises:
            DuplicateArgumentError: If `name` is already an argument or subcommand.
        """
        self._ensure_mutable()
        if not isinstance(name, str) or not name:
            raise ConfigurationError("Argument name must be a non-empty string")
        if name in self._specs or name in self._subcommands:
            raise DuplicateArgumentError(name)
        self._specs[name] = ArgSpec(name=name)
        logger.debug("Declared argument '%s'", name)
        return self

    def set_short(self, name: str, char: str) -> ArgSpecRegistry:
        """Attach the single-character alias `-<char>` to `name`."""
        spec = self._get_spec(name)
        self._validate_short(char)
        existing = self._short_map.get(char)
        if existing is not None and existing is not spec:
            raise DuplicateAliasError(f"-{char}", existing.name)
        if spec.short is not None:
            self._short_map.pop(spec.short, None)
        spec.short = char
        self._short_map[char] = spec
        logger.debug("Set short alias '-%s' for '%s'", char, name)
        return self

    def set_long(self, name: str, long: str) -> ArgSpecRegistry:
        """Attach the multi-character alias `--<long>` to `name`."""
        spec = self._get_spec(name)
        self._validate_long(long)
        existing = self._long_map.get(long)
        if existing is not None and existing is not spec:
            raise DuplicateAliasError(f"--{long}", existing.name)
        if spec.long is not None:
            self._long_map.pop(spec.long, None)
        spec.long = long
        self._long_map[long] = spec
        logger.debug("Set long alias '--%s' for '%s'", long, name)
        return self

    def mark_takes_value(self, name: str) -> ArgSpecRegistry:
        """Make `name` consume the following token as its value."""
        self._get_spec(name).takes_value = True
        return self

    def mark_required(self, name: str) -> ArgSpecRegistry:
        """Make `name` required."""
        self._get_spec(name).required = True
        return self

    def set_default(self, name: str, value: str) -> ArgSpecRegistry:
        """
        Register a default for `name`.

        The default may be set before or after `mark_takes_value`; it is only
        used if the argument takes a value when parsing happens.
        """
        self._get_spec(name).default = value
        return self

    def attach_validator(self, name: str, predicate: Validator) -> ArgSpecRegistry:
        """Attach `predicate`, replacing any validator previously set on `name`."""
        spec = self._get_spec(name)
        if not callable(predicate):
            raise ConfigurationError(f"Validator for '{name}' must be callable")
        spec.validator = predicate
        return self

    def attach_subcommand(self, name: str, child: ArgSpecRegistry) -> ArgSpecRegistry:
        """
        Nest `child` under the subcommand token `name`.

        Raises:
            DuplicateArgumentError: If `name` is a declared argument name.
            DuplicateSubcommandError: If `name` is already a subcommand.
        """
        self._ensure_mutable()
        if not isinstance(child, ArgSpecRegistry):
            raise ConfigurationError(
                f"Subcommand '{name}' must be an ArgSpecRegistry, got {type(child).__name__}"
            )
        if not isinstance(name, str) or not name:
            raise ConfigurationError("Subcommand name must be a non-empty string")
        if name in self._specs:
            raise DuplicateArgumentError(name)
        if name in self._subcommands:
            raise DuplicateSubcommandError(name)
        self._subcommands[name] = child
        logger.debug("Attached subcommand '%s'", name)
        return self

    def freeze(self) -> None:
        """Make this registry and all nested registries read-only."""
        self._frozen = True
        for child in self._subcommands.values():
            if not child._frozen:
                child.freeze()

    @property
    def frozen(self) -> bool:
        return self._frozen

    def parse(
        self,
        tokens: Sequence[str],
        unknown_options: UnknownOptionPolicy | str = "positional",
    ) -> ArgMatches:
        """
        Match `tokens` against this registry.

        Args:
            tokens (Sequence[str]): Invocation arguments without the program name.
            unknown_options (UnknownOptionPolicy | str): How to treat flag-shaped
                tokens that match no alias.

        Returns:
            ArgMatches: The structured parse result.

        Raises:
            ParseError: If the tokens do not satisfy the registry.
        """
        from argmatch.matcher import ArgMatcher

        return ArgMatcher(self, unknown_options=unknown_options).match(tokens)

    def get(self, name: str) -> ArgSpec | None:
        """Return the ArgSpec declared as `name`, if any."""
        return self._specs.get(name)

    def lookup_alias(self, token: str) -> ArgSpec | None:
        """Resolve an exact `-x` or `--long` token to its ArgSpec."""
        if token.startswith("--"):
            return self._long_map.get(token[2:])
        if token.startswith("-") and len(token) == 2:
            return self._short_map.get(token[1])
        return None

    def has_short(self, char: str) -> bool:
        return char in self._short_map

    def aliases(self) -> list[str]:
        """Return all alias tokens in declaration order."""
        return [flag for spec in self._specs.values() for flag in spec.flags()]

    @property
    def subcommands(self) -> Mapping[str, ArgSpecRegistry]:
        return MappingProxyType(self._subcommands)

    def to_definition(self) -> dict[str, Any]:
        """Return the registry as plain nested builtins."""
        return {
            "arguments": [spec.to_definition() for spec in self._specs.values()],
            "subcommands": {
                name: child.to_definition() for name, child in self._subcommands.items()
            },
        }

    def __contains__(self, name: object) -> bool:
        return name in self._specs

    def __iter__(self) -> Iterator[ArgSpec]:
        return iter(self._specs.values())

    def __len__(self) -> int:
        return len(self._specs)

    def __str__(self) -> str:
        """Return a human-readable summary of the registry state."""
        values = sum(spec.takes_value for spec in self._specs.values())
        required = sum(spec.required for spec in self._specs.values())
        return (
            f"ArgSpecRegistry(args={len(self._specs)}, "
            f"aliases={len(self._short_map) + len(self._long_map)}, "
            f"values={values}, required={required}, "
            f"subcommands={len(self._subcommands)})"
        )

    def __repr__(self) -> str:
        return str(self)
