import logging
from typing import Iterable, List, Literal, Optional

from .block_scanner import BlockScanner
from .code_list_parser import CodeListParser
from .line_cursor import LineCursor
from .models import Command, ParameterRecord, Remote, link_remotes
from .parameter_parser import ParameterParser
from .parse_step import ParseStep

AssemblerState = Literal[
    "seeking_block_start",
    "parsing_parameters",
    "parsing_codes",
    "require_block_end",
    "assembled",
    "resynchronizing",
    "end_of_input",
]


class RemoteAssembler:
    """Turns a sequence of lircd.conf lines into Remote values.

    A block that fails to parse is dropped by seeking to its ``end remote`` line;
    parsing then continues with the next ``begin remote``.
    """

    def __init__(self, lines: Iterable[str], source: Optional[str] = None, accept_lirc_code: bool = False) -> None:
        self._cursor = LineCursor(lines)
        self._scanner = BlockScanner(self._cursor)
        self._parameters = ParameterParser(self._cursor)
        self._codes = CodeListParser(self._cursor, self._scanner)
        self._source = source
        self._accept_lirc_code = accept_lirc_code
        self._logger = logging.getLogger("remote_assembler")

    def remotes(self) -> List[Remote]:
        accepted: List[Remote] = []
        for remote in self.assemble_all():
            if remote.has_timing_info or self._accept_lirc_code:
                accepted.append(remote)
            else:
                self._logger.warning(f"Ignoring timingless remote {remote.name} in {remote.source}")
        return link_remotes(accepted)

    def assemble_all(self) -> List[Remote]:
        remotes: List[Remote] = []
        state: AssemblerState = "seeking_block_start"
        record: Optional[ParameterRecord] = None
        commands: List[Command] = []

        while state != "end_of_input":
            if state == "seeking_block_start":
                self._cursor.commit()
                step = self._scanner.seek("begin", "remote")
                state = "parsing_parameters" if step.is_ok else "end_of_input"

            elif state == "parsing_parameters":
                parameters = self._parameters.parse()
                record = parameters.value
                state = "parsing_codes" if parameters.is_ok else self._resynchronize_after(parameters)

            elif state == "parsing_codes":
                codes = self._codes.parse_codes()
                commands = codes.value or []
                state = "require_block_end" if codes.is_ok else self._resynchronize_after(codes)

            elif state == "require_block_end":
                step = self._scanner.require("end", "remote")
                state = "assembled" if step.is_ok else self._resynchronize_after(step)

            elif state == "assembled":
                remotes.append(self._fold(record, commands))
                record, commands = None, []
                state = "seeking_block_start"

            elif state == "resynchronizing":
                step = self._scanner.seek("end", "remote")
                state = "seeking_block_start" if step.is_ok else "end_of_input"

        return remotes

    def _resynchronize_after(self, step: ParseStep) -> AssemblerState:
        self._logger.debug(f"Dropping remote block in {self._source} ({step.status} at line {step.line_number}): {step.message}")
        return "resynchronizing"

    def _fold(self, record: ParameterRecord, commands: List[Command]) -> Remote:
        return Remote(
            name=record.name,
            driver=record.driver,
            flags=list(record.flags),
            unary_parameters=dict(record.unary_parameters),
            binary_parameters=dict(record.binary_parameters),
            commands=list(commands),
            source=self._source,
        )
