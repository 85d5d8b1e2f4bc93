import sys
from pathlib import Path

from rich.console import Console

from argmatch import UnknownOptionPolicy
from argmatch.config import loader

console = Console()

registry = loader(Path(__file__).parent / "cli.yaml")

if __name__ == "__main__":
    matches = registry.parse(sys.argv[1:], unknown_options=UnknownOptionPolicy.ERROR)
    console.print(matches)
    console.print(matches.to_dict())
