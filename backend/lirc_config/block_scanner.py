from .line_cursor import LineCursor
from .parse_step import ParseStep


class BlockScanner:
    def __init__(self, cursor: LineCursor) -> None:
        self._cursor = cursor

    @property
    def cursor(self) -> LineCursor:
        return self._cursor

    def require(self, *keywords: str) -> ParseStep[None]:
        # Consumes the line only when it matches.
        line = self._cursor.peek()
        if line is None:
            return ParseStep.eof(f"Expected '{' '.join(keywords)}', got end of input")
        if not line.matches(*keywords):
            return ParseStep.mismatch(f"Expected '{' '.join(keywords)}', got '{line.text}'", line.number)
        self._cursor.consume()
        return ParseStep.ok(None)

    def seek(self, *keywords: str) -> ParseStep[None]:
        # Consumes every line up to and including the matching one.
        while True:
            line = self._cursor.peek()
            if line is None:
                return ParseStep.eof(f"No '{' '.join(keywords)}' before end of input")
            self._cursor.consume()
            if line.matches(*keywords):
                return ParseStep.ok(None)
