from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .remote import XY


@dataclass
class ParameterRecord:
    """Protocol parameters collected while reading one remote block."""

    name: Optional[str] = None
    driver: Optional[str] = None
    flags: List[str] = field(default_factory=list)
    unary_parameters: Dict[str, int] = field(default_factory=dict)
    binary_parameters: Dict[str, XY] = field(default_factory=dict)

    def add_unary(self, name: str, value: int) -> None:
        self.unary_parameters[name] = value

    def add_binary(self, name: str, x: int, y: int) -> None:
        self.binary_parameters[name] = XY(x, y)
