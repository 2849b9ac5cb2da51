import logging
from typing import List

from .block_scanner import BlockScanner
from .line_cursor import LineCursor
from .lirc_number import is_decimal, parse_decimal, parse_lirc_number
from .models import Command
from .parse_step import ParseStep


class CodeListParser:
    """Parses the ``begin codes`` or ``begin raw_codes`` section of a remote.

    Every public method returning a mismatch leaves the cursor where it found it.
    """

    def __init__(self, cursor: LineCursor, scanner: BlockScanner) -> None:
        self._cursor = cursor
        self._scanner = scanner
        self._logger = logging.getLogger("code_list_parser")

    def parse_codes(self) -> ParseStep[List[Command]]:
        cooked = self.parse_cooked()
        if not cooked.is_mismatch:
            return cooked
        return self.parse_raw()

    def parse_cooked(self) -> ParseStep[List[Command]]:
        start = self._cursor.checkpoint()
        opened = self._scanner.require("begin", "codes")
        if not opened.is_ok:
            return opened.forward()

        commands: List[Command] = []
        while True:
            step = self._cooked_line()
            if not step.is_ok:
                break
            commands.append(step.value)

        closed = self._scanner.require("end", "codes")
        if not closed.is_ok:
            self._cursor.rewind(start)
            return closed.forward()
        return ParseStep.ok(commands)

    def parse_raw(self) -> ParseStep[List[Command]]:
        start = self._cursor.checkpoint()
        opened = self._scanner.require("begin", "raw_codes")
        if not opened.is_ok:
            return opened.forward()

        commands: List[Command] = []
        while True:
            step = self._raw_command()
            if not step.is_ok:
                break
            commands.append(step.value)

        closed = self._scanner.require("end", "raw_codes")
        if not closed.is_ok:
            self._cursor.rewind(start)
            return closed.forward()
        return ParseStep.ok(commands)

    def _cooked_line(self) -> ParseStep[Command]:
        line = self._cursor.peek()
        if line is None:
            return ParseStep.eof()
        if len(line.tokens) < 2 or line.matches("end", "codes"):
            return ParseStep.mismatch("Not a code line", line.number)
        try:
            codes = [parse_lirc_number(token) for token in line.tokens[1:]]
        except ValueError as exc:
            return ParseStep.mismatch(str(exc), line.number)
        self._cursor.consume()
        return ParseStep.ok(Command.cooked(line.tokens[0], codes))

    def _raw_command(self) -> ParseStep[Command]:
        line = self._cursor.peek()
        if line is None:
            return ParseStep.eof()
        if len(line.tokens) < 2 or line.tokens[0].lower() != "name":
            return ParseStep.mismatch("Not a raw command name line", line.number)
        self._cursor.consume()
        return ParseStep.ok(Command.raw(line.tokens[1], self._durations()))

    def _durations(self) -> List[int]:
        durations: List[int] = []
        while True:
            line = self._cursor.peek()
            if line is None or not is_decimal(line.tokens[0]):
                return durations
            try:
                values = [parse_decimal(token) for token in line.tokens]
            except ValueError as exc:
                self._logger.warning(f"Skipping duration line {line.number} \"{line.text}\": {exc}")
            else:
                durations.extend(values)
            self._cursor.consume()
