from dataclasses import dataclass
from typing import Optional, Sequence, Tuple


@dataclass(frozen=True)
class Command:
    name: str
    codes: Optional[Tuple[int, ...]] = None
    durations: Optional[Tuple[int, ...]] = None
    toggle_count: int = 0

    def __post_init__(self) -> None:
        if (self.codes is None) == (self.durations is None):
            raise ValueError("Command needs either cooked codes or raw durations")
        if self.codes is not None and not self.codes:
            raise ValueError("Cooked command needs at least one code")

    @classmethod
    def cooked(cls, name: str, codes: Sequence[int]) -> "Command":
        return cls(name=name, codes=tuple(int(c) for c in codes))

    @classmethod
    def raw(cls, name: str, durations: Sequence[int], toggle_count: int = 0) -> "Command":
        return cls(name=name, durations=tuple(int(d) for d in durations), toggle_count=toggle_count)

    @property
    def is_raw(self) -> bool:
        return self.durations is not None
