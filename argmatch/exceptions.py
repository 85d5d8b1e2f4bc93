# Argmatch — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by Argmatch.

Two families live here. Configuration errors are raised while a registry is being
built and point at a defect in the schema itself; they are not meant to be caught
and retried. Parse errors are raised by `ArgMatcher` when caller input does not fit
the schema; they end the parse and carry enough structured context (argument name,
rejected value, subcommand path) for a presentation layer to build a diagnostic.

All exceptions inherit from `ArgmatchError`, the base exception for the package.

Exception Hierarchy:
- ArgmatchError
    ├── ConfigurationError
    │   ├── DuplicateArgumentError
    │   ├── DuplicateAliasError
    │   ├── UndeclaredArgumentError
    │   ├── DuplicateSubcommandError
    │   ├── InvalidAliasError
    │   └── RegistryFrozenError
    └── ParseError
        ├── MissingValueError
        ├── ValidationFailedError
        ├── MissingRequiredError
        └── UnknownOptionError
"""
from __future__ import annotations


class ArgmatchError(Exception):
    """Base exception for Argmatch."""


class ConfigurationError(ArgmatchError):
    """Exception raised when a registry is configured incorrectly."""


class DuplicateArgumentError(ConfigurationError):
    """Exception raised when an argument name is declared twice."""

    def __init__(self, name: str):
        super().__init__(f"Argument '{name}' is already declared")
        self.name = name


class DuplicateAliasError(ConfigurationError):
    """Exception raised when an alias is already used by another argument."""

    def __init__(self, alias: str, existing: str):
        super().__init__(f"Alias '{alias}' is already used by argument '{existing}'")
        self.alias = alias
        self.existing = existing


class UndeclaredArgumentError(ConfigurationError):
    """Exception raised when configuring an argument that was never declared."""

    def __init__(self, name: str):
        super().__init__(f"Argument '{name}' is not declared")
        self.name = name


class DuplicateSubcommandError(ConfigurationError):
    """Exception raised when a subcommand name is attached twice."""

    def __init__(self, name: str):
        super().__init__(f"Subcommand '{name}' is already attached")
        self.name = name


class InvalidAliasError(ConfigurationError):
    """Exception raised when a short or long alias has an invalid shape."""

    def __init__(self, alias: str, reason: str):
        super().__init__(f"Invalid alias {alias!r}: {reason}")
        self.alias = alias
        self.reason = reason


class RegistryFrozenError(ConfigurationError):
    """Exception raised when a registry is modified after it has been parsed."""


class ParseError(ArgmatchError):
    """
    Base exception for input that does not match a registry.

    Attributes:
        command_path (tuple[str, ...]): Subcommand names leading to the level that
            failed, outermost first. Empty when the top level failed.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
        self.command_path: tuple[str, ...] = ()

    def prepend_command(self, name: str) -> None:
        """Record that this error was raised inside subcommand `name`."""
        self.command_path = (name, *self.command_path)

    def __str__(self) -> str:
        if self.command_path:
            return f"{' '.join(self.command_path)}: {self.message}"
        return self.message


class MissingValueError(ParseError):
    """Exception raised when a value-taking argument has no value token."""

    def __init__(self, name: str):
        super().__init__(f"Argument '{name}' expects a value")
        self.name = name


class ValidationFailedError(ParseError):
    """Exception raised when a validator rejects a bound value."""

    def __init__(self, name: str, value: str):
        super().__init__(f"Invalid value {value!r} for argument '{name}'")
        self.name = name
        self.value = value


class MissingRequiredError(ParseError):
    """Exception raised when a required argument is absent and has no default."""

    def __init__(self, name: str):
        super().__init__(f"Missing required argument '{name}'")
        self.name = name


class UnknownOptionError(ParseError):
    """Exception raised for unrecognized flag-shaped tokens in strict mode."""

    def __init__(self, token: str, suggestions: tuple[str, ...] = ()):
        if suggestions:
            message = (
                f"Unrecognized option '{token}'. "
                f"Did you mean one of: {', '.join(suggestions)}?"
            )
        else:
            message = f"Unrecognized option '{token}'"
        super().__init__(message)
        self.token = token
        self.suggestions = suggestions
