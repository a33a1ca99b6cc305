"""Interactive terminal editor for terms."""

from __future__ import annotations

from dataclasses import dataclass

from ergo.command import (
    Command,
    Migrate,
    MigrateCommand,
    Mode,
    ParseError,
    Quit,
    SetMode,
    parse_command,
)
from ergo.render import render_zip
from ergo.term import abstract, i, ident, let
from ergo.zipper import Zip

ENTER = "KEY_ENTER"
ESCAPE = "KEY_ESCAPE"
BACKSPACE = "KEY_BACKSPACE"

_FOCUS_COLOR = (161, 63, 255)
_POLL_SECONDS = 0.1

_MIGRATE_KEYS = {
    "h": Migrate.LEFT,
    "j": Migrate.DOWN,
    "k": Migrate.UP,
    "l": Migrate.RIGHT,
}


@dataclass
class Model:
    """Editor state: typed input, last output, mode, pending command and zipper."""

    zip: Zip
    input: str = ""
    output: str = ""
    mode: Mode = Mode.MIGRATE
    command: Command | None = None

    def key_event(self, key: str, ctrl: bool = False) -> None:
        """Handle a key: a single character or one of the named keys."""
        if key == ESCAPE:
            self.command = SetMode(Mode.MIGRATE)
        elif key == BACKSPACE:
            self.input = self.input[:-1]
        elif key == ENTER:
            text, self.input = self.input, ""
            try:
                rest, command = parse_command(text)
            except ParseError:
                self.output = text
                return
            if rest:
                self.output = text
            else:
                self.command = command
        elif len(key) == 1:
            self.char_press(key, ctrl)

    def char_press(self, char: str, ctrl: bool = False) -> None:
        """Handle a printable character, possibly with Control held."""
        if ctrl:
            if char == "c":
                self.command = Quit()
        elif self.mode is Mode.MIGRATE:
            if char == ":":
                self.command = SetMode(Mode.COMMAND)
            elif char in _MIGRATE_KEYS:
                self.command = MigrateCommand(_MIGRATE_KEYS[char])
        else:
            self.input += char

    def migrate(self, direction: Migrate) -> None:
        """Move the focus, reporting in ``output`` when it cannot move."""
        moves = {
            Migrate.UP: self.zip.up,
            Migrate.DOWN: self.zip.down,
            Migrate.LEFT: self.zip.left,
            Migrate.RIGHT: self.zip.right,
        }
        if not moves[direction]():
            self.output = f"cannot go {direction.value}"

    def apply(self, command: Command) -> bool:
        """Carry out ``command``; return False when the editor should stop."""
        match command:
            case Quit():
                return False
            case SetMode(mode):
                self.mode = mode
            case MigrateCommand(direction):
                self.migrate(direction)
        return True

    def run(self, terminal) -> None:
        """Run the editor on a blessed terminal until it is told to quit."""
        with terminal.fullscreen(), terminal.raw():
            while True:
                self._draw(terminal)
                keystroke = terminal.inkey(timeout=_POLL_SECONDS)
                if keystroke:
                    self.key_event(*_translate(keystroke))
                command, self.command = self.command, None
                if command is not None and not self.apply(command):
                    break

    def _draw(self, terminal) -> None:
        prefix, focus, suffix = render_zip(self.zip)
        parts = [
            terminal.normal,
            terminal.clear,
            terminal.move_xy(0, terminal.height - 1),
            "Output: ",
            self.output,
            terminal.move_xy(20, 20),
            _raw_lines(prefix),
            terminal.on_color_rgb(*_FOCUS_COLOR),
            _raw_lines(focus),
            terminal.normal,
            _raw_lines(suffix),
            terminal.move_xy(0, 0),
        ]
        if self.mode is Mode.COMMAND:
            parts += ["Command: ", self.input]
        terminal.stream.write("".join(parts))
        terminal.stream.flush()


def _raw_lines(text: str) -> str:
    return text.replace("\n", "\r\n")


def _translate(keystroke) -> tuple[str, bool]:
    if keystroke.is_sequence:
        return keystroke.name or "", False
    text = str(keystroke)
    if len(text) == 1 and 1 <= ord(text) <= 26:
        return chr(ord("a") + ord(text) - 1), True
    return text, False


def main(argv=None) -> int:
    """Open the editor on a small sample term."""
    from blessed import Terminal

    term = let(i(69), abstract("x", ident("x")))
    model = Model(zip=Zip(term))
    model.run(Terminal())
    return 0