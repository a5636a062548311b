"""State of a file-system mount point served by a client container."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass

from curvedeploy.task import SkipTask
from curvedeploy.tui.table import trim_container_id

STATUS_UNMOUNTED = "unmount"
STATUS_NORMAL = "normal"
STATUS_ABNORMAL = "abnormal"


@dataclass
class MountStatus:
    mount_point: str
    container_id: str
    container_name: str
    status: str


def mount_point_container_name(mount_point: str) -> str:
    """Name of the client container for `mount_point`: the MD5 of its path."""
    return hashlib.md5(mount_point.encode()).hexdigest()


def parse_mount_status(output: str, mount_point: str, container_name: str) -> MountStatus:
    """Interpret `docker ps` output ('<id> <status>') for a mount point."""
    if not output:
        status = STATUS_UNMOUNTED
        container_id = "-"
    else:
        items = output.split(" ")
        if len(items) < 2:
            raise ValueError(f"'{output}': unexpected container listing")
        container_id = items[0]
        status = STATUS_NORMAL if items[1].startswith("Up") else STATUS_ABNORMAL

    return MountStatus(
        mount_point=mount_point,
        container_id=trim_container_id(container_id),
        container_name=container_name,
        status=status,
    )


def check_mount_point(mount_point: str) -> None:
    """Raise ValueError unless `mount_point` is an absolute path."""
    if not mount_point.startswith("/"):
        raise ValueError(f"{mount_point}: is not an absolute path")


def check_mounted(output: str) -> None:
    """Raise SkipTask when the container listing shows nothing is mounted."""
    if not output:
        raise SkipTask()