from typing import Any, Protocol, Sequence

from lirc_config.models import Remote


class RemoteSetBuilder(Protocol):
    def build(
        self,
        remotes: Sequence[Remote],
        source: str,
        generate_parameters: bool,
        alternating_signs: bool,
    ) -> Any:
        ...
