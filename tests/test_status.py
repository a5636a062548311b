from curvedeploy.bs_format import FormatStatus
from curvedeploy.service_status import ServiceStatus
from curvedeploy.tui.status import (
    format_format_status,
    format_service_status,
    merge_statuses,
)
from curvedeploy.tui.table import red


def _rows(output):
    lines = output.split("\n")
    assert lines[-1] == ""
    return lines[:-1]


def _service(sid, parent, role, status, log_dir, key, replica="1/3", host="h1"):
    return ServiceStatus(
        id=sid,
        parent_id=parent,
        role=role,
        host=host,
        replica=replica,
        container_id="c" + sid,
        status=status,
        log_dir=log_dir,
        data_dir=log_dir.replace("log", "data"),
        sorted_key=key,
    )


def test_format_status_sorted_by_host_then_device():
    statuses = [
        FormatStatus("h2", "/dev/sda", "/data/a", "10/90", "Formatting"),
        FormatStatus("h1", "/dev/sdb", "/data/b", "90/90", "Done"),
        FormatStatus("h1", "/dev/sda", "/data/c", "0/90", "Mounting"),
    ]
    rows = _rows(format_format_status(statuses))
    assert "MountPoint" in rows[0]
    assert rows[2].startswith("h1") and "/dev/sda" in rows[2]
    assert rows[3].startswith("h1") and "/dev/sdb" in rows[3]
    assert rows[4].startswith("h2")
    assert len({len(row) for row in rows}) == 1


def test_merge_replicas_running():
    statuses = [
        _service(str(i), "p", "chunkserver", "Up 2 hours", f"/data/log/{i}", str(i))
        for i in range(3)
    ]
    merged = merge_statuses(statuses)
    assert len(merged) == 1
    row = merged[0]
    assert row.id == "<replica>"
    assert row.container_id == "<replica>"
    assert row.status == "RUNNING"
    assert row.replica == "3/3"
    assert row.log_dir == "/data/log/{0...2}"


def test_merge_mixed_status_is_abnormal():
    statuses = [
        _service("a", "p", "mds", "Up 1 hour", "/l/a", "a", replica="1/2"),
        _service("b", "p", "mds", "Exited (1)", "/l/b", "b", replica="1/2"),
    ]
    assert merge_statuses(statuses)[0].status == "ABNORMAL"


def test_merge_all_exited_is_stopped():
    statuses = [
        _service("a", "p", "mds", "Exited (0)", "/l/a", "a", replica="1/2"),
        _service("b", "p", "mds", "Exited (1)", "/l/b", "b", replica="1/2"),
    ]
    assert merge_statuses(statuses)[0].status == "STOPPED"


def test_merge_single_keeps_values():
    single = _service("abc", "p", "etcd", "Up 3 days", "/l/x", "k", replica="1/1")
    merged = merge_statuses([single])
    assert merged[0].id == "abc"
    assert merged[0].status == "Up 3 days"
    assert merged[0].log_dir == "/l/x"
    assert merged[0].replica == "1/1"


def test_merge_separate_parents():
    statuses = [
        _service("a", "p1", "mds", "Up", "/l/a", "a", replica="1/1"),
        _service("b", "p2", "mds", "Up", "/l/b", "b", replica="1/1"),
    ]
    merged = merge_statuses(statuses)
    assert [row.id for row in merged] == ["a", "b"]


def test_service_status_ordered_by_role_and_cut_dirs():
    statuses = [
        _service("m1", "pm", "mds", "Up", "/logs/mds", "m1", replica="1/1"),
        _service("e1", "pe", "etcd", "", "/logs/etcd", "e1", replica="1/1"),
    ]
    output = format_service_status(statuses, False, True)
    rows = _rows(output)
    assert "Log Dir" not in rows[0]
    assert "Data Dir" not in rows[0]
    assert "/logs/mds" not in output
    assert rows[2].startswith("e1")
    assert rows[3].startswith("m1")


def test_service_status_verbose_shows_dirs_and_decorates():
    statuses = [
        _service("e1", "pe", "etcd", "Losed", "/logs/etcd", "e1", replica="1/1"),
    ]
    output = format_service_status(statuses, True, False)
    rows = _rows(output)
    assert "Log Dir" in rows[0]
    assert "Data Dir" in rows[0]
    assert "/logs/etcd" in rows[2]
    assert red("Losed") in rows[2]