"""Shared test fixtures and configuration."""

import tempfile
from pathlib import Path

import pytest


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def mock_repo_root(temp_dir):
    """Create a mock git repository root directory."""
    git_dir = temp_dir / ".git"
    git_dir.mkdir()
    return temp_dir


@pytest.fixture
def global_config_dir(temp_dir, mocker):
    """Point the global config directory at a temporary location."""
    config_dir = temp_dir / ".dchlog-global"
    mocker.patch("dchlog.global_config._CONFIG_DIR", config_dir)
    return config_dir


@pytest.fixture
def sample_git_log():
    """Sample `git log --first-parent --format=full` output with two commits."""
    return """commit a1b2c3d4e5f60718293a4b5c6d7e8f9012345678
Author: Scott Moser <smoser@x.com>
Commit: Scott Moser <smoser@x.com>

    fix the thing

commit 5d4c3b2a1f0e9d8c7b6a5f4e3d2c1b0a9f8e7d6c
Author: Jane Doe <jane@x.com>
Commit: Scott Moser <smoser@x.com>

    add feature X with a much longer description that will not fit on one single eighty column line at all

    The feature is described here in more detail.

    LP: #99999
"""


@pytest.fixture
def sample_changelog():
    """Sample debian/changelog with an SRU placeholder in the top stanza."""
    return """cloud-init (23.1.1-0ubuntu1~22.04.1) jammy; urgency=medium

  * New upstream bugfix release. (LP: #XXXXXX)

 -- Chad Smith <chad.smith@canonical.com>  Wed, 01 Mar 2023 10:00:00 -0700

cloud-init (22.4.2-0ubuntu1~22.04.1) jammy; urgency=medium

  * Fix a crash. (LP: #1998765)

 -- Chad Smith <chad.smith@canonical.com>  Wed, 01 Feb 2023 10:00:00 -0700
"""
