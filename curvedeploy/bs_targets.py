"""iSCSI targets served by the block-storage target daemon."""

from __future__ import annotations

import re
from dataclasses import dataclass

DEFAULT_TGTD_CONTAINER_NAME = "curvebs-target-daemon"
DEFAULT_TGTD_LISTEN_PORT = 3260

_TITLE = re.compile(r"^Target ([0-9]+): (.+)\Z")
_STORE = re.compile(r"Backing store path: (cbd:pool//.+)\Z")


class TargetDaemonError(Exception):
    """The target daemon container is not running."""


@dataclass
class Target:
    tid: str
    name: str
    store: str
    portal: str


def parse_targets(output: str, host: str) -> list[Target]:
    """Parse `tgtadm --mode target --op show` output into targets.

    A later target with the same id replaces an earlier one.
    """
    targets: dict[str, Target] = {}
    current: Target | None = None
    for line in output.split("\n"):
        title = _TITLE.match(line)
        if title:
            current = Target(
                tid=title.group(1),
                name=title.group(2),
                store="-",
                portal=f"{host}:{DEFAULT_TGTD_LISTEN_PORT}",
            )
            targets[current.tid] = current
            continue

        store = _STORE.search(line)
        if store:
            if current is None:
                raise ValueError("backing store listed before any target")
            current.store = store.group(1)
    return list(targets.values())


def check_tgtd_status(output: str) -> str:
    """Check `docker ps` output ('<id> <status>'); return the container id."""
    items = output.split(" ")
    if len(items) < 2 or not items[1].startswith("Up"):
        raise TargetDaemonError("Target daemon not running")
    return items[0]