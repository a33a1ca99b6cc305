import pytest

from ergo.command import (
    Migrate,
    MigrateCommand,
    ParseError,
    Quit,
    SyntaxItem,
    SyntaxKind,
    parse_command,
    parse_migrate,
    parse_syntax_item,
)


def test_quit():
    assert parse_command("quit") == ("", Quit())


@pytest.mark.parametrize(
    "text, direction",
    [("up", Migrate.UP), ("down", Migrate.DOWN), ("left", Migrate.LEFT), ("right", Migrate.RIGHT)],
)
def test_migrate_commands(text, direction):
    assert parse_command(text) == ("", MigrateCommand(direction))
    assert parse_migrate(text) == ("", direction)


def test_leftover_text_is_returned():
    rest, command = parse_command("quit now")
    assert command == Quit()
    assert rest == " now"


@pytest.mark.parametrize("text", ["", "foo", "Up", " quit"])
def test_unknown_command(text):
    with pytest.raises(ParseError):
        parse_command(text)


def test_unknown_direction():
    with pytest.raises(ParseError):
        parse_migrate("north")


def test_syntax_integer():
    assert parse_syntax_item("42+") == ("+", SyntaxItem(SyntaxKind.I, 42))


def test_syntax_operators():
    assert parse_syntax_item("+") == ("", SyntaxItem(SyntaxKind.ADD))
    assert parse_syntax_item("*1") == ("1", SyntaxItem(SyntaxKind.MUL))


def test_syntax_unknown():
    with pytest.raises(ParseError):
        parse_syntax_item("-1")