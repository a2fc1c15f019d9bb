import pytest

from askpw.mode import AskpwAction
from askpw.parser import ArgumentParser, ParsedArguments


@pytest.fixture
def parser():
    return ArgumentParser()


def test_empty_tokens(parser):
    assert parser.parse([]) == ParsedArguments()
    parsed = parser.parse([])
    assert parsed.action is AskpwAction.RUN_COMMAND
    assert parsed.bin == ""
    assert parsed.entry == ""
    assert parsed.pass_through == []
    assert parsed.use_stderr is False


def test_pass_through_order(parser):
    parsed = parser.parse(["extra1", "--entry=x", "extra2"])
    assert parsed.entry == "x"
    assert parsed.pass_through == ["extra1", "extra2"]


def test_pass_through_keeps_duplicates(parser):
    parsed = parser.parse(["-p", "x", "-p", "x"])
    assert parsed.pass_through == ["-p", "x", "-p", "x"]


def test_bin_and_entry(parser):
    parsed = parser.parse(["--bin=/opt/pwsafe", "-e=mail"])
    assert parsed.bin == "/opt/pwsafe"
    assert parsed.entry == "mail"
    assert parsed.pass_through == []


def test_last_override_wins(parser):
    parsed = parser.parse(["--bin=one", "-b=two", "--entry=a", "-e=b"])
    assert parsed.bin == "two"
    assert parsed.entry == "b"


@pytest.mark.parametrize("token", ["--bin=", "--bin", "-b", "-b="])
def test_empty_bin_keeps_previous_value(parser, token):
    assert parser.parse([token]).bin == ""
    assert parser.parse(["--bin=keep", token]).bin == "keep"


def test_empty_entry_keeps_previous_value(parser):
    assert parser.parse(["--entry=keep", "--entry="]).entry == "keep"


def test_bare_valued_flag_is_not_forwarded(parser):
    parsed = parser.parse(["--bin", "--entry"])
    assert parsed.pass_through == []


def test_stderr_toggle(parser):
    assert parser.parse(["--stderr"]).use_stderr is True
    assert parser.parse(["-2"]).use_stderr is True
    assert parser.parse(["--stderr=yes"]).use_stderr is False
    assert parser.parse(["--stderr=yes"]).pass_through == ["--stderr=yes"]


@pytest.mark.parametrize("token", ["--version", "-v"])
def test_version_discards_remaining_tokens(parser, token):
    parsed = parser.parse([token, "--help", "--entry=x", "--bin=y", "extra"])
    assert parsed.action is AskpwAction.SHOW_VERSION
    assert parsed.entry == ""
    assert parsed.bin == ""
    assert parsed.pass_through == []


@pytest.mark.parametrize("token", ["--help", "-h", "-?"])
def test_help_discards_remaining_tokens(parser, token):
    parsed = parser.parse([token, "--version", "--", "extra"])
    assert parsed.action is AskpwAction.SHOW_HELP
    assert parsed.pass_through == []


def test_tokens_before_version_still_apply(parser):
    parsed = parser.parse(["extra", "--entry=x", "--version"])
    assert parsed.action is AskpwAction.SHOW_VERSION
    assert parsed.entry == "x"
    assert parsed.pass_through == ["extra"]


def test_forward_marker(parser):
    parsed = parser.parse(["--entry=a", "--", "--entry=x", "--version", "-h", "--"])
    assert parsed.action is AskpwAction.RUN_COMMAND
    assert parsed.entry == "a"
    assert parsed.pass_through == ["--entry=x", "--version", "-h", "--"]


def test_forward_marker_alone(parser):
    assert parser.parse(["--"]).pass_through == []


def test_unrelated_token_order_does_not_matter(parser):
    first = parser.parse(["--stderr", "--bin=a", "--entry=b", "x"])
    second = parser.parse(["x", "--entry=b", "--stderr", "--bin=a"])
    assert first == second


def test_parser_is_reusable(parser):
    parser.parse(["--entry=a", "extra"])
    assert parser.parse([]) == ParsedArguments()


def test_str(parser):
    assert str(parser) == "ArgumentParser(flags=6)"
    assert repr(parser) == str(parser)
