import logging

import pytest

from argmatch import ArgMatcher, ArgSpecRegistry


def flag_registry() -> ArgSpecRegistry:
    return (
        ArgSpecRegistry()
        .declare("verbose")
        .set_short("verbose", "v")
        .set_long("verbose", "verbose")
        .declare("quiet")
        .set_short("quiet", "q")
        .declare("name")
        .set_long("name", "name")
        .mark_takes_value("name")
    )


def test_all_flags_are_reported():
    matches = flag_registry().parse(["-v"])
    assert matches.flags == {"verbose": True, "quiet": False}


def test_flags_default_to_false():
    matches = flag_registry().parse([])
    assert matches.flags == {"verbose": False, "quiet": False}
    assert matches.values == {}


def test_flag_repeated_stays_true():
    matches = flag_registry().parse(["-v", "--verbose"])
    assert matches.flags["verbose"] is True


def test_repeated_value_keeps_last():
    matches = flag_registry().parse(["--name", "first", "--name", "second"])
    assert matches.values == {"name": "second"}


def test_positionals_keep_order():
    matches = flag_registry().parse(["a", "-v", "b", "--name", "n", "c"])
    assert matches.positionals == ("a", "b", "c")
    assert matches.values == {"name": "n"}


def test_value_may_look_like_alias_name():
    matches = flag_registry().parse(["--name", "verbose"])
    assert matches.values == {"name": "verbose"}
    assert matches.flags["verbose"] is False


def test_lone_dash_is_positional():
    matches = flag_registry().parse(["-"])
    assert matches.positionals == ("-",)


def test_default_without_takes_value_is_ignored():
    registry = ArgSpecRegistry().declare("debug").set_short("debug", "d").set_default(
        "debug", "yes"
    )
    matches = registry.parse([])
    assert matches.values == {}
    assert matches.flags == {"debug": False}


def test_default_set_before_takes_value_is_honored():
    registry = (
        ArgSpecRegistry()
        .declare("level")
        .set_default("level", "info")
        .mark_takes_value("level")
        .set_long("level", "level")
    )
    assert registry.parse([]).values == {"level": "info"}


def test_required_flag_does_not_fail_when_absent():
    registry = ArgSpecRegistry().declare("force").set_long("force", "force").mark_required(
        "force"
    )
    assert registry.parse([]).flags == {"force": False}


def test_value_argument_without_alias_only_gets_default():
    registry = ArgSpecRegistry().declare("hidden").mark_takes_value("hidden").set_default(
        "hidden", "h"
    )
    matches = registry.parse(["hidden", "x"])
    assert matches.values == {"hidden": "h"}
    assert matches.positionals == ("hidden", "x")


def test_matcher_can_be_used_directly():
    registry = flag_registry()
    matches = ArgMatcher(registry).match(["-q"])
    assert matches.flags["quiet"] is True
    assert registry.frozen


def test_matcher_accepts_tuples():
    assert flag_registry().parse(("-v",)).flags["verbose"] is True


def test_matcher_rejects_plain_string():
    with pytest.raises(TypeError):
        flag_registry().parse("-v")


def test_matcher_rejects_non_registry():
    with pytest.raises(TypeError):
        ArgMatcher({"verbose": True})


def test_matching_logs_bindings(caplog):
    caplog.set_level(logging.DEBUG, logger="argmatch")
    registry = flag_registry().declare("mode").mark_takes_value("mode").set_default(
        "mode", "fast"
    )
    registry.parse(["--name", "n"])
    messages = [record.getMessage() for record in caplog.records]
    assert "Bound 'name' = 'n' from '--name'" in messages
    assert "Defaulted 'mode' = 'fast'" in messages
