from typing import List, Optional, Sequence

from api_models import CommandDocument, RemoteDocument, RemoteSetDocument
from lirc_config.models import Command, Remote


class DocumentBuilder:
    def build(
        self,
        remotes: Sequence[Remote],
        source: Optional[str],
        generate_parameters: bool,
        alternating_signs: bool,
    ) -> RemoteSetDocument:
        return RemoteSetDocument(
            source=source,
            remotes=[self.build_remote(r, generate_parameters, alternating_signs) for r in remotes],
        )

    def build_remote(self, remote: Remote, generate_parameters: bool, alternating_signs: bool) -> RemoteDocument:
        document = RemoteDocument(
            name=remote.name,
            driver=remote.driver,
            source=remote.source,
            flags=list(remote.flags),
            has_timing_info=remote.has_timing_info,
            commands=[self._build_command(c, alternating_signs) for c in remote.commands],
        )
        if generate_parameters:
            document.unary_parameters = dict(remote.unary_parameters)
            document.binary_parameters = {name: (xy.x, xy.y) for name, xy in remote.binary_parameters.items()}
        return document

    def _build_command(self, command: Command, alternating_signs: bool) -> CommandDocument:
        if not command.is_raw:
            return CommandDocument(name=command.name, codes=list(command.codes or ()))
        return CommandDocument(
            name=command.name,
            durations=self._signed(command.durations or (), alternating_signs),
            toggle_count=command.toggle_count,
        )

    def _signed(self, durations: Sequence[int], alternating_signs: bool) -> List[int]:
        # Even positions are pulses, odd positions are spaces.
        if not alternating_signs:
            return [int(d) for d in durations]
        return [abs(int(d)) if i % 2 == 0 else -abs(int(d)) for i, d in enumerate(durations)]
