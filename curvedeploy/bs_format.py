"""Progress of formatting a chunkfile pool on a block-storage device."""

from __future__ import annotations

import hashlib
import re
from dataclasses import dataclass

STATUS_DONE = "Done"
STATUS_MOUNTING = "Mounting"
STATUS_FORMATTING = "Formatting"
STATUS_PULLING_IMAGE = "Pulling image"

_INTEGER = re.compile(r"[+-]?[0-9]+")


class FormatStatusError(ValueError):
    """The device usage reported by `df` could not be understood."""


@dataclass
class FormatStatus:
    host: str
    device: str
    mount_point: str
    formatted: str
    status: str

    @property
    def key(self) -> str:
        """Identifier of this status: '<host>:<device>'."""
        return f"{self.host}:{self.device}"


def device_container_name(device: str) -> str:
    """Name of the container that formats `device`: the MD5 of its path."""
    return hashlib.md5(device.encode()).hexdigest()


def _device_usage(df_output: str) -> str:
    """Extract the usage number from `df --output=pcent` output, or '-'."""
    if not df_output:
        return "-"
    lines = df_output.split("\n")
    if len(lines) < 2:
        raise FormatStatusError(f"'{df_output}': unexpected disk free output")
    usage = lines[1].removeprefix(" ")
    return usage.removesuffix("%")


def parse_format_status(
    host: str,
    device: str,
    mount_point: str,
    usage_percent: int,
    device_usage: str,
    container_status: str,
) -> FormatStatus:
    """Work out how far formatting has come from `df` and `docker ps` output.

    `device_usage` is the output of `df --output=pcent <device>` and
    `container_status` the status of the formatting container, if any.
    """
    usage_text = _device_usage(device_usage)
    formatted = f"{usage_text}/{usage_percent}"

    number = usage_text.removeprefix(" ")
    if not _INTEGER.fullmatch(number):
        raise FormatStatusError(f"'{usage_text}': get device usage failed")
    usage = int(number)

    if usage == 0:
        status = STATUS_MOUNTING
    elif len(container_status) > 1:
        status = STATUS_FORMATTING
    elif usage < usage_percent:
        status = STATUS_PULLING_IMAGE
    else:
        status = STATUS_DONE

    return FormatStatus(
        host=host,
        device=device,
        mount_point=mount_point,
        formatted=formatted,
        status=status,
    )