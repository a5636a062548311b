"""Tables showing chunkfile-pool format progress and service status."""

from __future__ import annotations

import os
from itertools import groupby
from typing import Any, Callable, Iterable

from curvedeploy.bs_format import FormatStatus
from curvedeploy.service_status import STATUS_CLEANED, STATUS_LOSED, ServiceStatus
from curvedeploy.tui.table import (
    DecoratedMessage,
    blue,
    cut_column,
    fixed_format,
    format_title,
    red,
)

ROLE_ETCD = "etcd"
ROLE_MDS = "mds"
ROLE_CHUNKSERVER = "chunkserver"
ROLE_METASERVER = "metaserver"
ROLE_SNAPSHOTCLONE = "snapshotclone"

ROLE_SCORE = {
    ROLE_ETCD: 0,
    ROLE_MDS: 1,
    ROLE_CHUNKSERVER: 2,
    ROLE_METASERVER: 2,
    ROLE_SNAPSHOTCLONE: 3,
}

STATUS_RUNNING = "RUNNING"
STATUS_STOPPED = "STOPPED"
STATUS_ABNORMAL = "ABNORMAL"

REPLICA_ID = "<replica>"


def format_format_status(statuses: Iterable[FormatStatus]) -> str:
    """Render format progress sorted by host, then device."""
    first, second = format_title(["Host", "Device", "MountPoint", "Formatted", "Status"])
    lines: list[list[Any]] = [first, second]
    for status in sorted(statuses, key=lambda s: (s.host, s.device)):
        lines.append(
            [status.host, status.device, status.mount_point, status.formatted, status.status]
        )
    return fixed_format(lines, 2)


def _status_decorate(status: str) -> str:
    if status == STATUS_CLEANED:
        return blue(status)
    if status in (STATUS_LOSED, STATUS_ABNORMAL):
        return red(status)
    return status


def _merge_id(items: list[str]) -> str:
    return items[0] if len(items) == 1 else REPLICA_ID


def _merge_status(items: list[str]) -> str:
    if len(items) == 1:
        return items[0]
    normalized = set()
    for item in items:
        if item.startswith("Up"):
            normalized.add(STATUS_RUNNING)
        elif item.startswith("Exited"):
            normalized.add(STATUS_STOPPED)
        else:
            normalized.add(item)
    if len(normalized) == 1:
        return normalized.pop()
    return STATUS_ABNORMAL


def _merge_dir(items: list[str]) -> str:
    if len(items) == 1:
        return items[0]
    prefix = os.path.commonprefix(items)
    first = items[0][len(prefix):]
    last = items[-1][len(prefix):]
    limit = min(5, len(first), len(last))
    return f"{prefix}{{{first[:limit]}...{last[:limit]}}}"


def _merge(
    group: list[ServiceStatus],
    field: Callable[[ServiceStatus], str],
    combine: Callable[[list[str]], str],
) -> str:
    return combine(sorted(field(status) for status in group))


def _sort_key(status: ServiceStatus) -> tuple[int, str, str]:
    return ROLE_SCORE.get(status.role, 0), status.role, status.sorted_key


def merge_statuses(statuses: Iterable[ServiceStatus]) -> list[ServiceStatus]:
    """Fold consecutive replicas sharing a parent id into one row each."""
    merged = []
    for _, members in groupby(statuses, key=lambda s: s.parent_id):
        group = list(members)
        head = group[0]
        total = head.replica.split("/")[1]
        merged.append(
            ServiceStatus(
                id=_merge(group, lambda s: s.id, _merge_id),
                parent_id="",
                role=head.role,
                host=head.host,
                replica=f"{len(group)}/{total}",
                container_id=_merge(group, lambda s: s.container_id, _merge_id),
                status=_merge(group, lambda s: s.status, _merge_status),
                log_dir=_merge(group, lambda s: s.log_dir, _merge_dir),
                data_dir=_merge(group, lambda s: s.data_dir, _merge_dir),
            )
        )
    return merged


def format_service_status(
    statuses: Iterable[ServiceStatus], verbose: bool, expand: bool
) -> str:
    """Render service status ordered by role; replicas merged unless expanded."""
    title = [
        "Id",
        "Role",
        "Host",
        "Replica",
        "Container Id",
        "Status",
        "Log Dir",
        "Data Dir",
    ]
    first, second = format_title(title)
    lines: list[list[Any]] = [first, second]

    ordered = sorted(statuses, key=_sort_key)
    if not expand:
        ordered = merge_statuses(ordered)
    for status in ordered:
        lines.append(
            [
                status.id,
                status.role,
                status.host,
                status.replica,
                status.container_id,
                DecoratedMessage(status.status, _status_decorate),
                status.log_dir,
                status.data_dir,
            ]
        )

    if not verbose:
        cut_column(lines, title.index("Data Dir"))
        cut_column(lines, title.index("Log Dir"))
    return fixed_format(lines, 2)