import io
import logging
import os
from typing import TYPE_CHECKING, Any, Dict, List, Optional, TextIO

from .directory_policy import is_rejected_file, merge_remotes
from .errors import ConfigReadError
from .models import Remote, link_remotes
from .remote_assembler import RemoteAssembler

if TYPE_CHECKING:
    from remote_set.builder import RemoteSetBuilder

DEFAULT_ENCODING = "windows-1252"


class ConfigReader:
    def __init__(self, encoding: str = DEFAULT_ENCODING, accept_lirc_code: bool = False) -> None:
        self._encoding = encoding
        self._accept_lirc_code = accept_lirc_code
        self._logger = logging.getLogger("config_reader")

    def read_stream(self, stream: TextIO, source: Optional[str] = None) -> List[Remote]:
        assembler = RemoteAssembler(stream, source=source, accept_lirc_code=self._accept_lirc_code)
        try:
            return assembler.remotes()
        except UnicodeDecodeError as exc:
            raise ConfigReadError(f"Could not decode {source}: {exc}", path=source) from exc

    def read_text(self, text: str, source: Optional[str] = None) -> List[Remote]:
        return self.read_stream(io.StringIO(text), source=source)

    def read_path(self, path: str) -> List[Remote]:
        return self._read_entry(path, top_level=True)

    def _read_entry(self, path: str, top_level: bool) -> List[Remote]:
        if os.path.isfile(path):
            return self._read_file(path)
        if os.path.isdir(path):
            return list(self._read_directory(path).values())
        if not os.path.exists(path):
            # Only the requested path counts as missing; a broken entry makes its directory unreadable.
            raise ConfigReadError(f"No such file or directory: {path}", path=path, missing=top_level)
        raise ConfigReadError(f"Cannot read {path}", path=path)

    def parse_config(
        self,
        path: str,
        builder: "RemoteSetBuilder",
        generate_parameters: bool = True,
        alternating_signs: bool = False,
    ) -> Any:
        remotes = self.read_path(path)
        return builder.build(
            remotes,
            source=os.path.realpath(path),
            generate_parameters=generate_parameters,
            alternating_signs=alternating_signs,
        )

    def _read_file(self, path: str) -> List[Remote]:
        source = os.path.realpath(path)
        try:
            with open(path, "r", encoding=self._encoding) as stream:
                return self.read_stream(stream, source=source)
        except ConfigReadError:
            raise
        except (OSError, LookupError) as exc:
            raise ConfigReadError(f"Cannot read {source}: {exc}", path=source) from exc

    def _read_directory(self, path: str) -> Dict[str, Remote]:
        try:
            entries = sorted(os.listdir(path))
        except OSError as exc:
            raise ConfigReadError(f"Cannot list {path}: {exc}", path=path) from exc

        merged: Dict[str, Remote] = {}
        for entry in entries:
            entry_path = os.path.join(path, entry)
            if is_rejected_file(entry):
                self._logger.warning(f"Rejecting file {os.path.realpath(entry_path)}")
                continue

            merged, renames = merge_remotes(merged, self._read_entry(entry_path, top_level=False))
            for rename in renames:
                self._logger.warning(
                    f"Remote name {rename.original_name} (source: {rename.source}) already present, "
                    f"renaming to {rename.new_name}"
                )

        link_remotes(list(merged.values()))
        return merged
