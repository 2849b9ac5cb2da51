import re
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Tuple

_WHITESPACE = re.compile(r"\s+")


@dataclass(frozen=True)
class Line:
    number: int
    text: str
    tokens: Tuple[str, ...]

    def matches(self, *keywords: str) -> bool:
        if len(self.tokens) != len(keywords):
            return False
        return all(token.lower() == keyword.lower() for token, keyword in zip(self.tokens, keywords))


class LineCursor:
    """Walks the non-blank lines of a config source with comments stripped.

    ``peek()`` fetches a line only when no fetched line is pending, so a grammar
    can look at the same line any number of times until it calls ``consume()``.
    Fetched lines are kept so ``rewind()`` can return to a ``checkpoint()``.
    """

    def __init__(self, lines: Iterable[str]) -> None:
        self._source: Iterator[str] = iter(lines)
        self._source_line_number = 0
        self._buffer: List[Line] = []
        self._position = 0
        self._exhausted = False

    @property
    def position(self) -> int:
        return self._position

    @property
    def line_number(self) -> int:
        if self._position < len(self._buffer):
            return self._buffer[self._position].number
        return self._source_line_number

    def peek(self) -> Optional[Line]:
        if self._position < len(self._buffer):
            return self._buffer[self._position]
        line = self._fetch()
        if line is None:
            return None
        self._buffer.append(line)
        return line

    def consume(self) -> None:
        if self._position < len(self._buffer):
            self._position += 1

    def checkpoint(self) -> int:
        return self._position

    def rewind(self, checkpoint: int) -> None:
        if checkpoint < 0 or checkpoint > self._position:
            raise ValueError(f"Cannot rewind to {checkpoint} from {self._position}")
        self._position = checkpoint

    def commit(self) -> None:
        # Drops consumed lines; checkpoints taken earlier become invalid.
        del self._buffer[: self._position]
        self._position = 0

    def _fetch(self) -> Optional[Line]:
        if self._exhausted:
            return None
        for raw in self._source:
            self._source_line_number += 1
            text = raw.split("#", 1)[0].strip()
            if not text:
                continue
            return Line(number=self._source_line_number, text=text, tokens=tuple(_WHITESPACE.split(text)))
        self._exhausted = True
        return None
