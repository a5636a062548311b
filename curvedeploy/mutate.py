"""Rewriting of client configuration files and client container settings.

A mutator is called for every line of a `key<delimiter>value` config file
as ``mutate(line, key, value)`` and returns the line to write.  Lines that
carry no key (comments, blank lines) come with an empty key and are passed
through unchanged.
"""

from __future__ import annotations

from typing import Callable, Mapping

Mutate = Callable[[str, str, str], str]
Render = Callable[[str], str]

KEY_CURVEBS_CLUSTER = "curvebs.cluster"
CLIENT_CONFIG_DELIMITER = "="

FORMAT_FUSE_ARGS = (
    "-f",
    "-o default_permissions",
    "-o allow_other",
    "-o fsname={fs_name}",
    "-o fstype={fs_type}",
    "-o user=curvefs",
    "-o conf={conf_path}",
    "{mount_path}",
)

NEBD_DATA_DIR = "/curvebs/nebd/data"
NEBD_LOG_DIR = "/curvebs/nebd/logs"

_CURVEBS_CLIENT_ITEMS = {
    "mds.listen.addr": KEY_CURVEBS_CLUSTER,
}
_CURVEBS_FIXED_OPTIONS = {
    "mds.registerToMDS": "false",
    "global.logging.enable": "false",
}
_TOOLS_TO_CLIENT = {
    "mdsAddr": "mdsOpt.rpcRetryOpt.addrs",
}


class MissingClusterError(ValueError):
    """A volume-backed file system was configured without `curvebs.cluster`."""


def make_client_mutate(service_config: Mapping[str, str], delimiter: str) -> Mutate:
    """Override values with the (lower-cased) keys found in `service_config`."""

    def mutate(line: str, key: str, value: str) -> str:
        if not key:
            return line
        value = service_config.get(key.lower(), value)
        return f"{key}{delimiter}{value}"

    return mutate


def make_curvebs_mutate(service_config: Mapping[str, str], delimiter: str) -> Mutate:
    """Mutator for the block-storage client config used by volume file systems.

    Some options are forced, `mds.listen.addr` is taken from
    `curvebs.cluster`, and every other key is looked up as is.  Without a
    `curvebs.cluster` entry every call raises MissingClusterError.
    """
    if not service_config.get(KEY_CURVEBS_CLUSTER, ""):

        def refuse(line: str, key: str, value: str) -> str:
            raise MissingClusterError("need `curvebs.cluster` if fstype is `volume`")

        return refuse

    def mutate(line: str, key: str, value: str) -> str:
        if not key:
            return line
        if key in _CURVEBS_FIXED_OPTIONS:
            value = _CURVEBS_FIXED_OPTIONS[key]
        else:
            replace_key = _CURVEBS_CLIENT_ITEMS.get(key) or key
            value = service_config.get(replace_key, value)
        return f"{key}{delimiter}{value}"

    return mutate


def make_tools_mutate(service_config: Mapping[str, str], delimiter: str) -> Mutate:
    """Mutator for the tools config, mapping tool keys onto client keys."""

    def mutate(line: str, key: str, value: str) -> str:
        if not key:
            return line
        replace_key = _TOOLS_TO_CLIENT.get(key) or key
        value = service_config.get(replace_key.lower(), value)
        return f"{key}{delimiter}{value}"

    return mutate


def make_nebd_mutate(
    service_config: Mapping[str, str], delimiter: str, render: Render
) -> Mutate:
    """Like the client mutator, but every value is passed through `render`.

    `render` substitutes variables in a value and raises if it cannot.
    """

    def mutate(line: str, key: str, value: str) -> str:
        if not key:
            return line
        value = service_config.get(key.lower(), value)
        value = render(value)
        return f"{key}{delimiter}{value}"

    return mutate


def fuse_mount_command(fs_name: str, fs_type: str, conf_path: str, mount_path: str) -> str:
    """Command line run in the client container to mount a file system."""
    fuse_args = " ".join(FORMAT_FUSE_ARGS).format(
        fs_name=fs_name,
        fs_type=fs_type,
        conf_path=conf_path,
        mount_path=mount_path,
    )
    return f"/client.sh {fs_name} {fs_type} --role=client --args='{fuse_args}'"


def nebd_volumes(data_dir: str, log_dir: str) -> list[tuple[str, str]]:
    """Host-to-container bind mounts for the NEBD and target daemon containers.

    Returns (host path, container path) pairs; the log directory is mounted
    only when one is configured.
    """
    volumes = [
        ("/dev", "/dev"),
        ("/lib/modules", "/lib/modules"),
        (data_dir, NEBD_DATA_DIR),
    ]
    if log_dir:
        volumes.append((log_dir, NEBD_LOG_DIR))
    return volumes