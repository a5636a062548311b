import pytest

from curvedeploy.bs_targets import (
    DEFAULT_TGTD_LISTEN_PORT,
    Target,
    TargetDaemonError,
    check_tgtd_status,
    parse_targets,
)

SAMPLE = "\n".join(
    [
        "Target 3: iqn.2022-02.com.example:curve.demo/test03",
        "    System information:",
        "    LUN information:",
        "        LUN: 0",
        "            Type: controller",
        "        LUN: 1",
        "            Backing store path: cbd:pool//test03_demo_",
        "Target 5: iqn.2022-02.com.example:curve.demo/test05",
        "    LUN information:",
        "        LUN: 0",
        "",
    ]
)


def test_parse_sample():
    targets = parse_targets(SAMPLE, "10.0.0.1")
    assert targets[0] == Target(
        tid="3",
        name="iqn.2022-02.com.example:curve.demo/test03",
        store="cbd:pool//test03_demo_",
        portal=f"10.0.0.1:{DEFAULT_TGTD_LISTEN_PORT}",
    )


def test_target_without_store_gets_dash():
    targets = parse_targets(SAMPLE, "10.0.0.1")
    assert [t.tid for t in targets] == ["3", "5"]
    assert targets[1].store == "-"


def test_portal_uses_default_port():
    targets = parse_targets(SAMPLE, "host1")
    assert all(t.portal == "host1:3260" for t in targets)


def test_empty_output():
    assert parse_targets("", "host1") == []


def test_duplicate_tid_replaced():
    output = "Target 1: first\nTarget 1: second\n"
    targets = parse_targets(output, "h")
    assert [t.name for t in targets] == ["second"]


def test_non_cbd_store_ignored():
    output = "Target 1: t\n    Backing store path: /dev/sdb\n"
    assert parse_targets(output, "h")[0].store == "-"


def test_store_before_target_raises():
    with pytest.raises(ValueError):
        parse_targets("Backing store path: cbd:pool//x_y_\n", "h")


def test_tgtd_running():
    assert check_tgtd_status("abcdef Up 2 hours") == "abcdef"


@pytest.mark.parametrize("output", ["", "abcdef", "abcdef Exited (0) 1 hour ago"])
def test_tgtd_not_running(output):
    with pytest.raises(TargetDaemonError, match="Target daemon not running"):
        check_tgtd_status(output)