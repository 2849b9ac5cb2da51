import os
from typing import Optional


class Environment:
    def __init__(self) -> None:
        self.api_key = os.getenv("API_KEY", "").strip()
        self.lirc_config_path = os.getenv("LIRC_CONFIG_PATH", "/etc/lirc/lircd.conf.d").strip()
        self.lirc_config_encoding = os.getenv("LIRC_CONFIG_ENCODING", "windows-1252").strip() or "windows-1252"

        # Public base url for reverse-proxy sub-path hosting (e.g. /lirc-config/)
        self.public_base_url = self._normalize_base_url(os.getenv("PUBLIC_BASE_URL", "/"))

        self.debug = self._read_bool("DEBUG", default=False)

        # Remotes without timing info only work with special drivers.
        self.accept_lirc_code = self._read_bool("ACCEPT_LIRCCODE", default=False)
        self.generate_parameters = self._read_bool("GENERATE_PARAMETERS", default=True)
        self.alternating_signs = self._read_bool("ALTERNATING_SIGNS", default=False)

        self.max_upload_bytes = self._read_int("MAX_UPLOAD_BYTES", default=1024 * 1024, min_value=1)

    def _read_bool(self, name: str, default: bool) -> bool:
        raw = os.getenv(name)
        if raw is None:
            return default
        value = raw.strip().lower()
        if value in ("1", "true", "yes", "y", "on"):
            return True
        if value in ("0", "false", "no", "n", "off"):
            return False
        return default

    def _read_int(self, name: str, default: int, min_value: Optional[int] = None, max_value: Optional[int] = None) -> int:
        raw = os.getenv(name)
        if raw is None:
            return default
        try:
            value = int(raw.strip())
        except ValueError:
            return default
        if min_value is not None and value < min_value:
            return default
        if max_value is not None and value > max_value:
            return default
        return value

    def _normalize_base_url(self, raw: Optional[str]) -> str:
        value = (raw or "/").strip()
        if not value:
            return "/"
        if not value.startswith("/"):
            value = "/" + value
        if not value.endswith("/"):
            value += "/"
        # Collapse accidental double slash root
        if value == "//":
            return "/"
        return value
