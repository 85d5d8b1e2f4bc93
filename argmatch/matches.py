# Argmatch — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `ArgMatches`, the immutable result of matching tokens against a registry.

One `ArgMatches` is produced per parsed registry level. When a subcommand token is
recognized, the nested result hangs off `subcommand`, so a full parse forms a
chain from the top-level registry down to the deepest subcommand that was used.

Mappings are exposed as read-only views and positionals as a tuple; two results
compare equal field by field.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping

from rich.markup import escape
from rich.tree import Tree


@dataclass(frozen=True)
class ArgMatches:
    """
    Parse result for one registry level.

    Attributes:
        values (Mapping[str, str]): Bound or defaulted values of value-taking arguments.
        flags (Mapping[str, bool]): Presence of every declared non-value argument.
        positionals (tuple[str, ...]): Tokens not consumed as aliases, values,
            or the subcommand discriminator.
        subcommand (ArgMatches | None): Result of the nested subcommand parse.
        subcommand_name (str | None): Token that selected `subcommand`.
    """

    values: Mapping[str, str] = field(default_factory=dict)
    flags: Mapping[str, bool] = field(default_factory=dict)
    positionals: tuple[str, ...] = ()
    subcommand: ArgMatches | None = None
    subcommand_name: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", MappingProxyType(dict(self.values)))
        object.__setattr__(self, "flags", MappingProxyType(dict(self.flags)))
        object.__setattr__(self, "positionals", tuple(self.positionals))
        if (self.subcommand is None) != (self.subcommand_name is None):
            raise ValueError("subcommand and subcommand_name must be set together")

    def __hash__(self) -> int:
        return hash(
            (
                tuple(sorted(self.values.items())),
                tuple(sorted(self.flags.items())),
                self.positionals,
                self.subcommand,
                self.subcommand_name,
            )
        )

    def value_of(self, name: str, default: Any = None) -> Any:
        """Return the value bound to `name`, or `default` if there is none."""
        return self.values.get(name, default)

    def is_present(self, name: str) -> bool:
        """Return True if `name` resolved to a value or its flag was given."""
        return name in self.values or self.flags.get(name, False)

    def subcommand_path(self) -> tuple[str, ...]:
        """Return the chain of selected subcommand names, outermost first."""
        path: list[str] = []
        current: ArgMatches | None = self
        while current is not None and current.subcommand_name is not None:
            path.append(current.subcommand_name)
            current = current.subcommand
        return tuple(path)

    def to_dict(self) -> dict[str, Any]:
        """Return the result as plain nested builtins."""
        return {
            "values": dict(self.values),
            "flags": dict(self.flags),
            "positionals": list(self.positionals),
            "subcommand": (
                {self.subcommand_name: self.subcommand.to_dict()}
                if self.subcommand is not None
                else None
            ),
        }

    def _build_tree(self, tree: Tree) -> Tree:
        for name, value in self.values.items():
            tree.add(f"[bold]{escape(name)}[/] = [green]{escape(repr(value))}[/]")
        for name, present in self.flags.items():
            style = "cyan" if present else "dim"
            tree.add(f"[{style}]{escape(name)}[/] = {present}")
        if self.positionals:
            tree.add(f"positionals: {escape(repr(list(self.positionals)))}")
        if self.subcommand is not None:
            branch = tree.add(f"[bold magenta]{escape(self.subcommand_name or '')}[/]")
            self.subcommand._build_tree(branch)
        return tree

    def __rich__(self) -> Tree:
        return self._build_tree(Tree("[bold]ArgMatches[/]"))
