"""Confirmation prompts shown before destructive operations."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any

from curvedeploy.tui.table import red, yellow

PROMPT_REMOVE_CLUSTER = """{{.warning}}
Do you want to continue?"""

PROMPT_STOP_SERVICE = """{{.warning}}
Do you want to continue?"""

PROMPT_CLEAN_SERVICE = """{{.warning}}
  - Service role: {{.role}} ("*" means all roles)
  - Service host: {{.host}} ("*" means all hosts)
  - Clean items : [{{.items}}]
Do you want to continue?"""

PROMPT_COLLECT_SERVICE = """
FYI:
  > We have collected logs for troubleshooting,
  > and now we will send these logs to the curve center.
  > Please don't worry about the data security,
  > we guarantee that all logs are encrypted
  > and only you have the secret key.
"""

PROMPT_TOPOLOGY_CHANGE_NOTICE = """
NOTICE: We noticed that you have modified the configuration of 
some services while {{.operation}}. If you want make these 
configurations effect, you should reload the corresponding 
services after the scale out success.
"""

PROMPT_CANCEL_OPERATION = "[x] {{.operation}} canceled"

DEFAULT_CONFIRM_PROMPT = "Do you want to continue?"

_PLACEHOLDER = re.compile(r"\{\{\s*\.(\w+)\s*\}\}")
_NO_VALUE = "<no value>"


@dataclass
class Prompt:
    """A prompt template with `{{.name}}` placeholders and its data."""

    text: str
    data: dict[str, Any] = field(default_factory=dict)

    def build(self) -> str:
        """Fill the placeholders; unknown names render as '<no value>'."""
        return _PLACEHOLDER.sub(
            lambda m: str(self.data.get(m.group(1), _NO_VALUE)), self.text
        )


def prompt_remove_cluster(cluster_name: str) -> str:
    warning = (
        f"WARNING: cluster '{cluster_name}' will be removed,\n"
        "and all data in it will be cleaned up"
    )
    return Prompt(PROMPT_REMOVE_CLUSTER, {"warning": warning}).build()


def prompt_stop_service() -> str:
    warning = "WARNING: stop service may cause client IO be hang"
    return Prompt(PROMPT_STOP_SERVICE, {"warning": warning}).build()


def prompt_clean_service(role: str, host: str, items: list[str]) -> str:
    data = {
        "warning": "WARNING: service items which matched will be cleaned up",
        "role": role,
        "host": host,
        "items": ",".join(items),
    }
    return Prompt(PROMPT_CLEAN_SERVICE, data).build()


def prompt_collect_service() -> str:
    return Prompt(yellow(PROMPT_COLLECT_SERVICE) + DEFAULT_CONFIRM_PROMPT).build()


def _topology_change_prompt(warning: bool, operation: str) -> str:
    text = DEFAULT_CONFIRM_PROMPT
    if warning:
        text = yellow(PROMPT_TOPOLOGY_CHANGE_NOTICE) + DEFAULT_CONFIRM_PROMPT
    return Prompt(text, {"operation": operation}).build()


def prompt_scale_out(warning: bool) -> str:
    return _topology_change_prompt(warning, "scale out cluster")


def prompt_migrate(warning: bool) -> str:
    return _topology_change_prompt(warning, "migrate services")


def prompt_cancel_operation(operation: str) -> str:
    return Prompt(red(PROMPT_CANCEL_OPERATION), {"operation": operation}).build()