import logging
import re
from typing import List, Sequence

from .line_cursor import Line, LineCursor
from .lirc_number import parse_lirc_number
from .models import ParameterRecord
from .parse_step import ParseStep

_FLAG_SEPARATOR = re.compile(r"\s*\|\s*")


class ParameterParser:
    def __init__(self, cursor: LineCursor) -> None:
        self._cursor = cursor
        self._logger = logging.getLogger("parameter_parser")

    def parse(self) -> ParseStep[ParameterRecord]:
        """Reads parameter lines up to, but not including, the first ``begin`` line."""
        record = ParameterRecord()
        while True:
            line = self._cursor.peek()
            if line is None:
                return ParseStep.eof("End of input inside remote parameters")

            keyword = line.tokens[0].lower()
            if keyword == "begin":
                return ParseStep.ok(record)

            if keyword in ("name", "driver"):
                self._parse_string(record, keyword, line)
            elif keyword == "flags":
                record.flags = self.parse_flags(line.tokens[1:])
            else:
                self._parse_numeric(record, line)
            self._cursor.consume()

    @staticmethod
    def parse_flags(tokens: Sequence[str]) -> List[str]:
        joined = " ".join(tokens)
        return [flag for flag in _FLAG_SEPARATOR.split(joined) if flag]

    def _parse_string(self, record: ParameterRecord, keyword: str, line: Line) -> None:
        if len(line.tokens) < 2:
            self._logger.warning(f"Ignoring '{keyword}' without value at line {line.number}")
            return
        setattr(record, keyword, line.tokens[1])

    def _parse_numeric(self, record: ParameterRecord, line: Line) -> None:
        tokens = line.tokens
        try:
            if len(tokens) == 2:
                record.add_unary(tokens[0], parse_lirc_number(tokens[1]))
            elif len(tokens) == 3:
                record.add_binary(tokens[0], parse_lirc_number(tokens[1]), parse_lirc_number(tokens[2]))
            else:
                self._logger.warning(f"Ignoring parameter declaration at line {line.number}: {line.text}")
        except ValueError as exc:
            self._logger.warning(f"Could not parse line {line.number} \"{line.text}\": {exc}")
