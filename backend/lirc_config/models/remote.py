from dataclasses import dataclass, field
from typing import Dict, List, NamedTuple, Optional

from .command import Command


class XY(NamedTuple):
    x: int
    y: int


TIMING_UNARY_PARAMETERS = frozenset(
    {"bits", "plead", "ptrail", "pre_data_bits", "post_data_bits", "gap", "repeat_gap", "frequency"}
)
TIMING_BINARY_PARAMETERS = frozenset(
    {"header", "one", "zero", "two", "three", "foot", "repeat", "pre", "post", "gap"}
)


@dataclass
class Remote:
    name: Optional[str]
    driver: Optional[str] = None
    flags: List[str] = field(default_factory=list)
    unary_parameters: Dict[str, int] = field(default_factory=dict)
    binary_parameters: Dict[str, XY] = field(default_factory=dict)
    commands: List[Command] = field(default_factory=list)
    source: Optional[str] = None
    # Links the remotes read from one source; see link_remotes().
    next_remote: Optional["Remote"] = field(default=None, repr=False, compare=False)

    @property
    def has_timing_info(self) -> bool:
        if any(name.lower() in TIMING_UNARY_PARAMETERS for name in self.unary_parameters):
            return True
        return any(name.lower() in TIMING_BINARY_PARAMETERS for name in self.binary_parameters)


def link_remotes(remotes: List[Remote]) -> List[Remote]:
    previous: Optional[Remote] = None
    for remote in remotes:
        remote.next_remote = None
        if previous is not None:
            previous.next_remote = remote
        previous = remote
    return remotes
