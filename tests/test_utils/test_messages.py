"""Tests for positional message templates."""

from sshnode.utils.messages import format_message


def test_substitutes_positional_args() -> None:
    assert format_message('node "{0}" said {1}', "web1", "no") == 'node "web1" said no'


def test_missing_args_left_in_place() -> None:
    assert format_message("{0} {1} {2}", "a") == "a {1} {2}"


def test_other_braces_untouched() -> None:
    assert format_message("{name} {0} {}", "x") == "{name} x {}"


def test_repeated_placeholder() -> None:
    assert format_message("{0}/{0}", "n") == "n/n"
