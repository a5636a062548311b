"""Status of one deployed service, as shown by the status listing."""

from __future__ import annotations

from dataclasses import dataclass

from curvedeploy.tui.table import trim_container_id

STATUS_CLEANED = "Cleaned"
STATUS_LOSED = "Losed"
CLEANED_CONTAINER_ID = "-"


@dataclass
class ServiceStatus:
    id: str
    parent_id: str
    role: str
    host: str
    replica: str
    container_id: str
    status: str
    log_dir: str
    data_dir: str
    sorted_key: str = ""


def make_service_status(
    service_id: str,
    parent_id: str,
    role: str,
    host: str,
    replica: int,
    container_id: str,
    status: str,
    log_dir: str,
    data_dir: str,
    sorted_key: str,
) -> ServiceStatus:
    """Build the status of one service replica from its container listing.

    A removed container shows as Cleaned, one missing from the listing as Losed.
    """
    if container_id == CLEANED_CONTAINER_ID:
        status = STATUS_CLEANED
    elif not status:
        status = STATUS_LOSED

    return ServiceStatus(
        id=service_id,
        parent_id=parent_id,
        role=role,
        host=host,
        replica=f"1/{replica}",
        container_id=trim_container_id(container_id),
        status=status,
        log_dir=log_dir,
        data_dir=data_dir,
        sorted_key=sorted_key,
    )