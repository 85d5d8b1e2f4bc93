"""
Argmatch CLI Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .arg_spec import ArgSpec
from .exceptions import (
    ArgmatchError,
    ConfigurationError,
    DuplicateAliasError,
    DuplicateArgumentError,
    DuplicateSubcommandError,
    InvalidAliasError,
    MissingRequiredError,
    MissingValueError,
    ParseError,
    RegistryFrozenError,
    UndeclaredArgumentError,
    UnknownOptionError,
    ValidationFailedError,
)
from .matcher import ArgMatcher, UnknownOptionPolicy
from .matches import ArgMatches
from .registry import ArgSpecRegistry

logger = logging.getLogger("argmatch")


__all__ = [
    "ArgSpec",
    "ArgSpecRegistry",
    "ArgMatcher",
    "ArgMatches",
    "UnknownOptionPolicy",
    "ArgmatchError",
    "ConfigurationError",
    "DuplicateAliasError",
    "DuplicateArgumentError",
    "DuplicateSubcommandError",
    "InvalidAliasError",
    "RegistryFrozenError",
    "UndeclaredArgumentError",
    "ParseError",
    "MissingRequiredError",
    "MissingValueError",
    "UnknownOptionError",
    "ValidationFailedError",
]
