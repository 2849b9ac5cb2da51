from typing import Optional


class ConfigReadError(OSError):
    def __init__(self, message: str, path: Optional[str] = None, missing: bool = False) -> None:
        super().__init__(message)
        self.message = message
        self.path = path
        self.missing = missing
