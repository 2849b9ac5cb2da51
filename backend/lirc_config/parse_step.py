from dataclasses import dataclass
from typing import Generic, Literal, Optional, TypeVar

T = TypeVar("T")

StepStatus = Literal["ok", "mismatch", "eof"]


@dataclass(frozen=True)
class ParseStep(Generic[T]):
    """Outcome of one grammar step.

    ``mismatch`` means the current line does not fit the expected shape and is
    recoverable (fallback grammar or resynchronization). ``eof`` means the input
    ran out while the step was looking for a line.
    """

    status: StepStatus
    value: Optional[T] = None
    message: str = ""
    line_number: int = 0

    @classmethod
    def ok(cls, value: T) -> "ParseStep[T]":
        return cls(status="ok", value=value)

    @classmethod
    def mismatch(cls, message: str, line_number: int = 0) -> "ParseStep[T]":
        return cls(status="mismatch", message=message, line_number=line_number)

    @classmethod
    def eof(cls, message: str = "Unexpected end of input") -> "ParseStep[T]":
        return cls(status="eof", message=message)

    @property
    def is_ok(self) -> bool:
        return self.status == "ok"

    @property
    def is_mismatch(self) -> bool:
        return self.status == "mismatch"

    @property
    def is_eof(self) -> bool:
        return self.status == "eof"

    def forward(self) -> "ParseStep":
        """Re-types a failed step so it can be returned from a caller."""
        if self.is_ok:
            raise ValueError("Only failed steps can be forwarded")
        return ParseStep(status=self.status, message=self.message, line_number=self.line_number)
