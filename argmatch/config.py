# Argmatch — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Configuration loader for Argmatch registries.

Registries can be declared in YAML or TOML instead of Python code. Each level
lists its arguments and maps subcommand names either to an inline definition or
to another config file (`config: path`, resolved relative to the parent file).

Example (YAML):
    arguments:
      - name: input
        short: i
        long: input-file
        takes_value: true
        validator: argmatch.validators.ends_with
        validator_args: [".txt"]
    subcommands:
      process:
        arguments:
          - name: output
            short: o
            takes_value: true
            required: true
"""
from __future__ import annotations

from pathlib import Path
from typing import Any

import toml
import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from argmatch.arg_spec import Validator
from argmatch.importer import resolve_callable
from argmatch.logger import logger
from argmatch.registry import ArgSpecRegistry

MAX_CONFIG_DEPTH = 5


class RawArgument(BaseModel):
    """Raw argument model for Argmatch configuration."""

    model_config = ConfigDict(extra="forbid")

    name: str
    short: str | None = None
    long: str | None = None
    takes_value: bool = False
    required: bool = False
    default: str | None = None
    validator: str | None = None
    validator_args: list[Any] | None = None

    @field_validator("short", "long", "default", mode="before")
    @classmethod
    def stringify_scalars(cls, value: Any) -> Any:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    @model_validator(mode="after")
    def validate_validator_args(self) -> RawArgument:
        if self.validator_args is not None and not self.validator:
            raise ValueError(
                f"validator_args given for '{self.name}' without a validator path"
            )
        return self


class RawRegistry(BaseModel):
    """Raw registry model for Argmatch configuration."""

    model_config = ConfigDict(extra="forbid")

    arguments: list[RawArgument] = Field(default_factory=list)
    subcommands: dict[str, dict[str, Any]] = Field(default_factory=dict)


def import_validator(raw_argument: RawArgument) -> Validator:
    """Resolve the validator path of `raw_argument`, calling it as a factory if needed."""
    assert raw_argument.validator is not None
    try:
        target = resolve_callable(raw_argument.validator)
    except (ImportError, ValueError) as error:
        logger.error(
            "Failed to import validator '%s' for '%s': %s",
            raw_argument.validator,
            raw_argument.name,
            error,
        )
        raise
    if raw_argument.validator_args is None:
        return target
    predicate = target(*raw_argument.validator_args)
    if not callable(predicate):
        raise ValueError(
            f"Validator factory '{raw_argument.validator}' did not return a callable"
        )
    return predicate


def convert_argument(registry: ArgSpecRegistry, raw_argument: RawArgument) -> None:
    name = raw_argument.name
    registry.declare(name)
    if raw_argument.short is not None:
        registry.set_short(name, raw_argument.short)
    if raw_argument.long is not None:
        registry.set_long(name, raw_argument.long)
    if raw_argument.takes_value:
        registry.mark_takes_value(name)
    if raw_argument.required:
        registry.mark_required(name)
    if raw_argument.default is not None:
        registry.set_default(name, raw_argument.default)
    if raw_argument.validator:
        registry.attach_validator(name, import_validator(raw_argument))


def registry_from_dict(
    raw_config: dict[str, Any],
    *,
    parent_path: Path | None = None,
    _depth: int = 0,
) -> ArgSpecRegistry:
    """
    Build an ArgSpecRegistry from an already-parsed configuration mapping.

    Args:
        raw_config (dict): Mapping with optional `arguments` and `subcommands` keys.
        parent_path (Path | None): File the mapping came from, used to resolve
            relative `config:` references of subcommands.

    Raises:
        ValueError: If the mapping does not match the configuration schema.
        ConfigurationError: If the definitions violate registry invariants.
    """
    if not isinstance(raw_config, dict):
        raise ValueError(
            f"Registry configuration must be a mapping, got {type(raw_config).__name__}"
        )
    raw_registry = RawRegistry.model_validate(raw_config)
    registry = ArgSpecRegistry()
    for raw_argument in raw_registry.arguments:
        convert_argument(registry, raw_argument)

    for name, raw_subcommand in raw_registry.subcommands.items():
        if "config" in raw_subcommand:
            if len(raw_subcommand) > 1:
                raise ValueError(
                    f"Subcommand '{name}' cannot mix 'config' with inline definitions"
                )
            config_path = Path(raw_subcommand["config"])
            if parent_path is not None and not config_path.is_absolute():
                config_path = (parent_path.parent / config_path).resolve()
            child = loader(config_path, _depth=_depth + 1)
        else:
            child = registry_from_dict(
                raw_subcommand, parent_path=parent_path, _depth=_depth
            )
        registry.attach_subcommand(name, child)
    return registry


def loader(file_path: Path | str, _depth: int = 0) -> ArgSpecRegistry:
    """
    Load an Argmatch registry from a YAML or TOML file.

    Args:
        file_path (Path | str): Path to the config file (YAML or TOML).

    Returns:
        ArgSpecRegistry: The registry described by the file.

    Raises:
        TypeError: If `file_path` is not a string or Path.
        FileNotFoundError: If the file does not exist.
        ValueError: If the file format is unsupported or the content is invalid.
    """
    if _depth > MAX_CONFIG_DEPTH:
        raise ValueError(
            f"Maximum subcommand config depth exceeded ({MAX_CONFIG_DEPTH} levels deep)"
        )

    if isinstance(file_path, (str, Path)):
        path = Path(file_path)
    else:
        raise TypeError("file_path must be a string or Path object.")

    if not path.is_file():
        raise FileNotFoundError(f"No such config file: {file_path}")

    suffix = path.suffix
    with path.open("r", encoding="UTF-8") as config_file:
        if suffix in (".yaml", ".yml"):
            raw_config = yaml.safe_load(config_file)
        elif suffix == ".toml":
            raw_config = toml.load(config_file)
        else:
            raise ValueError(f"Unsupported config format: {suffix}")

    if not isinstance(raw_config, dict):
        raise ValueError(
            "Configuration file must contain a mapping with a list of arguments.\n"
            "Example:\n"
            "arguments:\n"
            "  - name: 'input'\n"
            "    short: 'i'\n"
            "    takes_value: true"
        )

    logger.debug("Loading registry from %s", path)
    return registry_from_dict(raw_config, parent_path=path, _depth=_depth)
