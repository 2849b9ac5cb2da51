from typing import Optional

from pydantic import BaseModel, Field


class ParseRequest(BaseModel):
    text: str = Field(..., description="Contents of a lircd.conf file")
    source: Optional[str] = Field(default=None, max_length=1024, description="Label recorded as the remotes' source")
    accept_lirc_code: Optional[bool] = Field(default=None, description="Keep remotes without timing info")
    generate_parameters: Optional[bool] = Field(default=None, description="Include protocol parameters")
    alternating_signs: Optional[bool] = Field(default=None, description="Render raw spaces as negative durations")
