import sys

from rich.console import Console

from argmatch import ArgSpecRegistry, ParseError
from argmatch.utils import enable_logging
from argmatch.validators import ends_with

enable_logging("cli")

console = Console()

# Schema for `simple.py process ...`
process = (
    ArgSpecRegistry()
    .declare("output")
    .set_short("output", "o")
    .set_long("output", "output-file")
    .mark_takes_value("output")
    .mark_required("output")
)

registry = (
    ArgSpecRegistry()
    .declare("input")
    .set_short("input", "i")
    .set_long("input", "input-file")
    .mark_takes_value("input")
    .set_default("input", "default.txt")
    .attach_validator("input", ends_with(".txt"))
    .declare("verbose")
    .set_short("verbose", "v")
    .attach_subcommand("process", process)
)

# Entry point
if __name__ == "__main__":
    try:
        matches = registry.parse(sys.argv[1:])
    except ParseError as error:
        console.print(f"[red]error:[/] {error}")
        sys.exit(2)
    console.print(matches)
