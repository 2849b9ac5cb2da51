from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class RenameEvent:
    original_name: str
    new_name: str
    source: Optional[str] = None
