import dataclasses
from typing import Dict, Iterable, List, Tuple

from .models import Remote, RenameEvent

REJECTED_SUFFIXES = (".jpg", ".png", ".gif", ".html")


def is_rejected_file(filename: str) -> bool:
    # Pictures and web pages are common in lircd.conf collections and never parse.
    return filename.lower().endswith(REJECTED_SUFFIXES)


def merge_remotes(
    existing: Dict[str, Remote],
    new_remotes: Iterable[Remote],
) -> Tuple[Dict[str, Remote], List[RenameEvent]]:
    merged: Dict[str, Remote] = dict(existing)
    renames: List[RenameEvent] = []
    for remote in new_remotes:
        base_name = str(remote.name or "")
        name = base_name
        n = 1
        while name in merged:
            name = f"{base_name}${n}"
            n += 1

        if name != base_name:
            renames.append(RenameEvent(original_name=base_name, new_name=name, source=remote.source))
            remote = dataclasses.replace(remote, name=name, next_remote=None)
        merged[name] = remote
    return merged, renames
