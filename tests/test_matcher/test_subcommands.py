import pytest

from argmatch import (
    ArgSpecRegistry,
    MissingRequiredError,
    UnknownOptionError,
    ValidationFailedError,
)
from argmatch.validators import one_of


def remote_registry() -> ArgSpecRegistry:
    add = (
        ArgSpecRegistry()
        .declare("url")
        .set_long("url", "url")
        .mark_takes_value("url")
        .mark_required("url")
        .declare("fetch")
        .set_short("fetch", "f")
    )
    remote = (
        ArgSpecRegistry()
        .declare("verbose")
        .set_short("verbose", "v")
        .attach_subcommand("add", add)
    )
    return (
        ArgSpecRegistry()
        .declare("verbose")
        .set_short("verbose", "v")
        .declare("color")
        .set_long("color", "color")
        .mark_takes_value("color")
        .attach_validator("color", one_of("auto", "never"))
        .attach_subcommand("remote", remote)
    )


def test_nested_subcommands():
    matches = remote_registry().parse(
        ["-v", "remote", "add", "--url", "git@host", "-f", "origin"]
    )
    assert matches.flags == {"verbose": True}
    assert matches.subcommand_name == "remote"
    assert matches.subcommand.flags == {"verbose": False}
    assert matches.subcommand.subcommand_name == "add"
    add = matches.subcommand.subcommand
    assert add.values == {"url": "git@host"}
    assert add.flags == {"fetch": True}
    assert add.positionals == ("origin",)
    assert matches.subcommand_path() == ("remote", "add")


def test_remaining_tokens_belong_to_subcommand():
    matches = remote_registry().parse(["remote", "-v", "--color", "never"])
    assert matches.flags == {"verbose": False}
    assert matches.values == {}
    assert matches.subcommand.flags == {"verbose": True}
    assert matches.subcommand.positionals == ("--color", "never")


def test_subcommand_name_is_not_rechecked_after_delegation():
    registry = ArgSpecRegistry().attach_subcommand("run", ArgSpecRegistry())
    matches = registry.parse(["run", "run"])
    assert matches.subcommand.positionals == ("run",)
    assert matches.positionals == ()


def test_positionals_before_subcommand_stay_at_parent():
    matches = remote_registry().parse(["x", "remote", "y"])
    assert matches.positionals == ("x",)
    assert matches.subcommand.positionals == ("y",)


def test_alias_takes_precedence_over_subcommand():
    registry = (
        ArgSpecRegistry()
        .declare("build")
        .set_long("build", "build")
        .attach_subcommand("--build", ArgSpecRegistry())
    )
    matches = registry.parse(["--build"])
    assert matches.flags == {"build": True}
    assert matches.subcommand is None


def test_subcommand_takes_precedence_over_positional():
    registry = ArgSpecRegistry().attach_subcommand("status", ArgSpecRegistry())
    matches = registry.parse(["status"])
    assert matches.positionals == ()
    assert matches.subcommand_name == "status"


def test_nested_error_carries_command_path():
    with pytest.raises(MissingRequiredError) as exc_info:
        remote_registry().parse(["remote", "add", "-f"])
    error = exc_info.value
    assert error.name == "url"
    assert error.command_path == ("remote", "add")
    assert str(error) == "remote add: Missing required argument 'url'"


def test_parent_required_checked_after_subcommand():
    child = ArgSpecRegistry().declare("output").set_short("output", "o").mark_takes_value(
        "output"
    )
    registry = (
        ArgSpecRegistry()
        .declare("input")
        .set_short("input", "i")
        .mark_takes_value("input")
        .mark_required("input")
        .attach_subcommand("process", child)
    )
    with pytest.raises(MissingRequiredError) as exc_info:
        registry.parse(["process", "-o", "b.txt"])
    assert exc_info.value.name == "input"
    assert exc_info.value.command_path == ()


def test_child_requirements_do_not_apply_to_parent():
    matches = remote_registry().parse(["-v"])
    assert matches.subcommand is None


def test_parent_validation_error_before_subcommand():
    with pytest.raises(ValidationFailedError) as exc_info:
        remote_registry().parse(["--color", "pink", "remote"])
    assert exc_info.value.command_path == ()
    assert exc_info.value.value == "pink"


def test_unknown_option_policy_propagates_to_subcommands():
    with pytest.raises(UnknownOptionError) as exc_info:
        remote_registry().parse(["remote", "--bogus"], unknown_options="error")
    assert exc_info.value.command_path == ("remote",)
    assert exc_info.value.token == "--bogus"
