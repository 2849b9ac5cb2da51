from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, Field


class CommandDocument(BaseModel):
    name: str = Field(..., description="Button name")
    codes: Optional[List[int]] = Field(default=None, description="Cooked code values")
    durations: Optional[List[int]] = Field(default=None, description="Raw pulse/space durations in microseconds")
    toggle_count: int = Field(default=0, description="Toggle count of raw commands")


class RemoteDocument(BaseModel):
    name: Optional[str] = Field(default=None, description="Remote name")
    driver: Optional[str] = Field(default=None, description="Driver the remote was recorded with")
    source: Optional[str] = Field(default=None, description="File or label the remote was read from")
    flags: List[str] = Field(default_factory=list, description="Flags in declaration order")
    has_timing_info: bool = Field(..., description="Whether timing parameters are present")
    unary_parameters: Optional[Dict[str, int]] = Field(default=None)
    binary_parameters: Optional[Dict[str, Tuple[int, int]]] = Field(default=None)
    commands: List[CommandDocument] = Field(default_factory=list)


class RemoteSetDocument(BaseModel):
    source: Optional[str] = Field(default=None, description="Source label of the whole set")
    remotes: List[RemoteDocument] = Field(default_factory=list)
