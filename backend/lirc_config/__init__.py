from .block_scanner import BlockScanner
from .code_list_parser import CodeListParser
from .config_reader import ConfigReader
from .directory_policy import is_rejected_file, merge_remotes
from .errors import ConfigReadError
from .line_cursor import Line, LineCursor
from .lirc_number import parse_lirc_number
from .models import XY, Command, ParameterRecord, Remote, RenameEvent
from .parameter_parser import ParameterParser
from .parse_step import ParseStep
from .remote_assembler import RemoteAssembler

__all__ = [
    "BlockScanner",
    "CodeListParser",
    "Command",
    "ConfigReadError",
    "ConfigReader",
    "Line",
    "LineCursor",
    "ParameterParser",
    "ParameterRecord",
    "ParseStep",
    "Remote",
    "RemoteAssembler",
    "RenameEvent",
    "XY",
    "is_rejected_file",
    "merge_remotes",
    "parse_lirc_number",
]
