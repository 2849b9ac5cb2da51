from .command import Command
from .parameter_record import ParameterRecord
from .remote import XY, Remote, link_remotes
from .rename_event import RenameEvent

__all__ = [
    "Command",
    "ParameterRecord",
    "RenameEvent",
    "Remote",
    "XY",
    "link_remotes",
]
