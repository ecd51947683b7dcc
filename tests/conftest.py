"""Shared fixtures: fake SDK trees and a quiet console."""

from collections.abc import Callable
from pathlib import Path

import pytest

from latest_zipalign.utils.output import console


@pytest.fixture(autouse=True)
def reset_console():
    """Leave the global console non-verbose after each test."""
    yield
    console.set_verbose(False)


@pytest.fixture
def make_sdk(tmp_path: Path) -> Callable[..., Path]:
    """Create an SDK root with build-tools/<version>/<tool> files.

    Each entry may be a bare version ("30.0.3") or a relative path under
    build-tools ("a/30.0.3") for nested layouts.
    """

    def _make(*versions: str, tool: str = "zipalign") -> Path:
        root = tmp_path / "sdk"
        (root / "build-tools").mkdir(parents=True, exist_ok=True)
        for version in versions:
            version_dir = root / "build-tools" / version
            version_dir.mkdir(parents=True, exist_ok=True)
            (version_dir / tool).write_text("#!/bin/sh\n")
        return root

    return _make
