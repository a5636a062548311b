"""Tables listing audit logs, clusters, plugins and iSCSI targets."""

from __future__ import annotations

from typing import Any, Iterable

from curvedeploy.tui.table import (
    DecoratedMessage,
    fixed_format,
    format_title,
    green,
    red,
    trim_plugin_description,
)

RESULT_SUCCESS = "success"
RESULT_FAIL = "fail"

_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


def _result_decorate(message: str) -> str:
    if message == RESULT_SUCCESS:
        return green(message)
    return red(message)


def format_audit_logs(audit_logs: Iterable[Any]) -> str:
    """Render audit log entries (id, execute_time, command, success)."""
    first, second = format_title(["Id", "Execute Time", "Command", "Result"])
    lines: list[list[Any]] = [first, second]
    for log in audit_logs:
        result = RESULT_SUCCESS if log.success else RESULT_FAIL
        lines.append(
            [
                str(log.id),
                log.execute_time.strftime(_TIME_FORMAT),
                log.command,
                DecoratedMessage(result, _result_decorate),
            ]
        )
    return fixed_format(lines, 2)


def format_clusters(clusters: Iterable[Any], verbose: bool) -> str:
    """Render clusters, marking the current one with a green '*'."""
    lines: list[list[Any]] = []
    if verbose:
        first, second = format_title(
            [" ", "Cluster", "Id", "UUId", "Create Time", "Description"]
        )
        second[0] = ""
        lines.extend([first, second])

    for cluster in clusters:
        if cluster.current:
            row: list[Any] = [
                DecoratedMessage("*", green),
                DecoratedMessage(cluster.name, green),
            ]
        else:
            row = [" ", cluster.name]
        if verbose:
            row.extend(
                [
                    str(cluster.id),
                    cluster.uuid,
                    cluster.create_time.strftime(_TIME_FORMAT),
                    cluster.description,
                ]
            )
        lines.append(row)

    return fixed_format(lines, 2 if verbose else 1)


def format_plugins(plugins: Iterable[Any]) -> str:
    """Render plugins sorted by name, with long descriptions shortened."""
    first, second = format_title(["Plugin", "Version", "Released Time", "Description"])
    lines: list[list[Any]] = [first, second]
    for plugin in sorted(plugins, key=lambda p: p.name):
        lines.append(
            [
                plugin.name,
                plugin.version,
                plugin.released_time,
                trim_plugin_description(plugin.description),
            ]
        )
    return fixed_format(lines, 2)


def format_targets(targets: Iterable[Any]) -> str:
    """Render iSCSI targets sorted by target id (compared as text)."""
    first, second = format_title(["Tid", "Target Name", "Store", "Portal"])
    lines: list[list[Any]] = [first, second]
    for target in sorted(targets, key=lambda t: t.tid):
        lines.append([target.tid, target.name, target.store, target.portal])
    return fixed_format(lines, 2)