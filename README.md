# curvedeploy

Building blocks for deploying and operating Curve block-storage (CurveBS) and
file-system (CurveFS) clusters: a concurrent task runner, parsers for the
output of container and iSCSI tools, the key/value rewriting used when
syncing client configuration files, and fixed-width tables for the terminal.

The package has no dependencies outside the standard library.

## What is inside

- `curvedeploy.task`: a `Task` is a named list of steps, each an object with
  an `execute(ctx)` method, run in order. A step may raise `SkipTask` to end
  its task as skipped rather than failed. Each run gets a fresh context from
  the task's `context_factory` (by default a `TaskContext` holding only the
  SSH configuration), which is closed afterwards.
- `curvedeploy.monitor`: `Monitor` records the outcome of each task under a
  progress-bar id; `sum(bid)` counts successes, skips and errors and
  `get(bid)` reduces them to a `Status` (`OK`, `SKIP` or `ERROR`).
- `curvedeploy.executor`: `Tasks` runs many tasks in threads with bounded
  concurrency, configured by an `ExecOption` (`concurrency`,
  `skip_error`, `silent_main_bar`, `silent_sub_bar`). Tasks sharing a parent
  id share one progress line. When all tasks are done it prints a summary
  with `[OK]`, `[SKIP]` or `[ERROR]` per line and re-raises the last real
  error any task raised.
- `curvedeploy.bs_targets`: `parse_targets` reads `tgtadm ... --op show`
  output into `Target` records; `check_tgtd_status` raises
  `TargetDaemonError` unless the target daemon container is up.
- `curvedeploy.bs_format`: `parse_format_status` works out how far a
  chunkfile-pool format has come from `df` and `docker ps` output;
  `device_container_name` names the formatting container.
- `curvedeploy.fs_mount`: `parse_mount_status`, `check_mount_point`,
  `check_mounted` and `mount_point_container_name` for client mount points.
- `curvedeploy.service_status`: `make_service_status` builds a
  `ServiceStatus`, marking removed containers `Cleaned` and missing ones
  `Losed`.
- `curvedeploy.mutate`: config-line mutators (`make_client_mutate`,
  `make_curvebs_mutate`, `make_tools_mutate`, `make_nebd_mutate`), the FUSE
  mount command line (`fuse_mount_command`) and the NEBD bind mounts
  (`nebd_volumes`).
- `curvedeploy.tui.table`: `fixed_format`, `format_title`, `cut_column`,
  `DecoratedMessage`, the colour helpers `green`, `red`, `yellow`, `blue`,
  `trim_container_id`, `trim_plugin_description` and `confirm_yes`.
- `curvedeploy.tui.prompt`: `Prompt` templates with `{{.name}}`
  placeholders and the ready-made confirmation texts (`prompt_remove_cluster`,
  `prompt_stop_service`, `prompt_clean_service`, `prompt_collect_service`,
  `prompt_scale_out`, `prompt_migrate`, `prompt_cancel_operation`).
- `curvedeploy.tui.listings`: `format_audit_logs`, `format_clusters`,
  `format_plugins`, `format_targets`.
- `curvedeploy.tui.status`: `format_format_status`, `merge_statuses` and
  `format_service_status`.

## Examples

Aligning a table (every cell is padded to its column's width):

```python
from curvedeploy.tui.table import fixed_format, format_title

title, rule = format_title(["Host", "Role"])
rows = [title, rule, ["10.0.0.1", "mds"], ["10.0.0.2", "metaserver"]]
print(fixed_format(rows, 2), end="")
```

```
Host      Role
----      ----
10.0.0.1  mds
10.0.0.2  metaserver
```

Running tasks:

```python
from curvedeploy.executor import ExecOption, Tasks
from curvedeploy.task import Task

class Echo:
    def execute(self, ctx):
        print("running")

tasks = Tasks()
for host in ("10.0.0.1", "10.0.0.2"):
    task = Task("Echo", f"host={host}")
    task.add_step(Echo())
    tasks.add_task(task)
tasks.execute(ExecOption(concurrency=2))
```

Rewriting a config line; keys are looked up lower-cased:

```python
from curvedeploy.mutate import make_client_mutate

mutate = make_client_mutate({"mds.listen.addr": "10.0.0.1:6700"}, "=")
mutate("mds.listen.addr=127.0.0.1:6700", "mds.listen.addr", "127.0.0.1:6700")
# 'mds.listen.addr=10.0.0.1:6700'
```

Reading the targets served by an iSCSI target daemon:

```python
from curvedeploy.bs_targets import parse_targets

for target in parse_targets(tgtadm_output, "10.0.0.1"):
    print(target.tid, target.name, target.store, target.portal)
```

Targets without a backing store show `-` as their store, and the portal is
the host on the default iSCSI port 3260.

## What it does not do

- There is no command-line program; everything is a library call.
- Tasks do not connect to hosts by themselves: the default `TaskContext`
  only carries the SSH configuration, and steps that run commands over SSH
  or in containers have to be supplied by the caller.
- It does not build container creation commands, restart policies,
  chunkserver arguments or crontab entries for cluster services.
- It does not upgrade itself or upload support bundles.
- It keeps no storage of clusters, services or audit logs; the listing
  functions format records the caller passes in.