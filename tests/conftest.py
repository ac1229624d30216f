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
def sample_status_report():
    """Porcelain -z status: one add, one modify, one delete, one rename."""
    return (
        b"A  assets/new.bin\x00"
        b"M  assets/logo.png\x00"
        b"D  notes/old.txt\x00"
        b"R  docs/guide.md\x00docs/intro.md\x00"
    )


@pytest.fixture
def sample_numstat_report():
    """Numstat -z matching sample_status_report."""
    return (
        b"-\t-\tassets/new.bin\x00"
        b"-\t-\tassets/logo.png\x00"
        b"0\t12\tnotes/old.txt\x00"
        b"2\t1\t\x00docs/intro.md\x00docs/guide.md\x00"
    )


@pytest.fixture
def sample_diff():
    """Sample staged diff with one modified file."""
    return """diff --git a/existing_file.py b/existing_file.py
index 1234567..abcdefg 100644
--- a/existing_file.py
+++ b/existing_file.py
@@ -1,5 +1,8 @@
 def main():
-    print("old")
+    print("new")
+
+def helper():
+    return True
"""
