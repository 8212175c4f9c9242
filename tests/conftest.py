"""Shared fixtures for chunkpack tests."""

import pytest

CSTYLE_SOURCE = """int add(int a, int b) {
    return a + b;
}

int sub(int a, int b) {
    return a - b;
}"""

PYTHON_SOURCE = """import os

def load(path):
    return open(path).read()

class Store:
    def get(self, key):
        return key
"""

MARKDOWN_SOURCE = """# Title
Intro paragraph.

## Usage
Run it."""

LOG_SOURCE = """2024-03-01 10:00:00 INFO service starting
  loading config
[2024-03-01 10:00:01] ERROR connection refused
Traceback (most recent call last):
  File "app.py", line 3
10:00:02 retry scheduled"""

PRETTY_JSON = """{
  "name": "demo",
  "tags": ["a", "b"]
}
[
  1,
  2
]"""


@pytest.fixture
def source_tree(tmp_path):
    """A folder with code, docs, hidden files, build output and a binary."""
    root = tmp_path / "project"
    (root / "src").mkdir(parents=True)
    (root / "docs").mkdir()
    (root / ".git").mkdir()
    (root / "node_modules").mkdir()

    (root / "src" / "math.c").write_text(CSTYLE_SOURCE)
    (root / "src" / "store.py").write_text(PYTHON_SOURCE)
    (root / "docs" / "README.md").write_text(MARKDOWN_SOURCE)
    (root / ".git" / "config.txt").write_text("[core]")
    (root / "node_modules" / "lib.js").write_text("function x() {}")
    (root / ".env.txt").write_text("SECRET=1")
    (root / "logo.png").write_bytes(b"not really a png")
    (root / "blob.txt").write_bytes(b"\x00\x01\x02binary")
    return root
