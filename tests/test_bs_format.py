import string

import pytest

from curvedeploy.bs_format import (
    FormatStatus,
    FormatStatusError,
    device_container_name,
    parse_format_status,
)


def _parse(device_usage, container_status="", usage_percent=90):
    return parse_format_status(
        "host1", "/dev/sdb", "/data/chunkserver0", usage_percent,
        device_usage, container_status,
    )


def test_zero_usage_is_mounting():
    result = _parse("Use%\n  0%\n", "Up 3 minutes")
    assert result.status == "Mounting"


def test_running_container_is_formatting():
    result = _parse("Use%\n 40%\n", "Up 3 minutes")
    assert result.status == "Formatting"


def test_below_target_without_container_is_pulling_image():
    result = _parse("Use%\n 40%\n", "")
    assert result.status == "Pulling image"


def test_reached_target_is_done():
    result = _parse("Use%\n 90%\n", "", usage_percent=90)
    assert result.status == "Done"


def test_formatted_column_combines_usage_and_target():
    result = _parse("Use%\n 40%\n", "", usage_percent=90)
    assert result.formatted == "40/90"


def test_fields_are_carried_through():
    result = _parse("Use%\n 90%\n")
    assert result == FormatStatus(
        host="host1",
        device="/dev/sdb",
        mount_point="/data/chunkserver0",
        formatted=result.formatted,
        status="Done",
    )
    assert result.key == "host1:/dev/sdb"


def test_empty_usage_is_an_error():
    with pytest.raises(FormatStatusError):
        _parse("")


def test_usage_without_second_line_is_an_error():
    with pytest.raises(FormatStatusError):
        _parse("Use%")


def test_non_numeric_usage_is_an_error():
    with pytest.raises(FormatStatusError):
        _parse("Use%\n abc%\n")


def test_container_name_is_md5_hex():
    name = device_container_name("/dev/sdb")
    assert len(name) == 32
    assert set(name) <= set(string.hexdigits.lower())


def test_container_name_is_deterministic_and_distinct():
    assert device_container_name("/dev/sdb") == device_container_name("/dev/sdb")
    assert device_container_name("/dev/sdb") != device_container_name("/dev/sdc")