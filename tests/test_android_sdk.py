from pathlib import Path

import pytest

from latest_zipalign.exceptions import ConfigurationError, DiscoveryError
from latest_zipalign.utils import android_sdk
from latest_zipalign.utils.android_sdk import (
    get_android_home,
    get_latest_tool,
    get_zipalign,
    tool_file_name,
)


def test_android_home_from_environment():
    assert get_android_home({"ANDROID_HOME": "/opt/sdk"}) == Path("/opt/sdk")


@pytest.mark.parametrize("environ", [{}, {"ANDROID_HOME": ""}, {"ANDROID_HOME": "  "}])
def test_missing_android_home_raises_configuration_error(environ):
    with pytest.raises(ConfigurationError) as exc_info:
        get_android_home(environ)

    assert str(exc_info.value) == "Failed to get ANDROID_HOME env"


def test_android_sdk_root_is_not_a_fallback():
    with pytest.raises(ConfigurationError):
        get_android_home({"ANDROID_SDK_ROOT": "/opt/sdk"})


def test_missing_android_home_does_not_touch_filesystem(monkeypatch):
    monkeypatch.delenv("ANDROID_HOME", raising=False)

    def _fail(*args, **kwargs):
        raise AssertionError("filesystem accessed")

    monkeypatch.setattr(android_sdk, "locate", _fail)

    with pytest.raises(ConfigurationError):
        get_zipalign()


def test_get_zipalign_uses_android_home(make_sdk, monkeypatch):
    root = make_sdk("33.0.2", "34.0.0")
    monkeypatch.setenv("ANDROID_HOME", str(root))

    assert get_zipalign() == root / "build-tools" / "34.0.0" / "zipalign"


def test_get_latest_tool_with_explicit_root(make_sdk):
    root = make_sdk("30.0.0")
    with pytest.raises(DiscoveryError):
        get_latest_tool("aapt2", root)


@pytest.mark.parametrize(
    ("system", "tool", "expected"),
    [
        ("Linux", "zipalign", "zipalign"),
        ("Darwin", "apksigner", "apksigner"),
        ("Windows", "zipalign", "zipalign.exe"),
        ("Windows", "apksigner", "apksigner.bat"),
        ("Windows", "zipalign.exe", "zipalign.exe"),
    ],
)
def test_tool_file_name(monkeypatch, system, tool, expected):
    monkeypatch.setattr(android_sdk.platform, "system", lambda: system)
    assert tool_file_name(tool) == expected
