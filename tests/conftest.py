"""Pytest configuration and fixtures."""

from pathlib import Path

import pytest

from import_inspector.scanners import Scanner


class FakeClassifier:
    """Core classifier answering from a fixed table."""

    def __init__(self, releases):
        self.releases = dict(releases)

    def first_release(self, name):
        return self.releases.get(name)


class FakeScanner(Scanner):
    """Returns canned results keyed by file name."""

    name = "fake"

    def __init__(self, results):
        super().__init__()
        self.results = results
        self.calls = []

    def list_modules(self, path):
        self.calls.append(path)
        result = self.results[Path(path).name]
        if isinstance(result, Exception):
            raise result
        return list(result)


@pytest.fixture
def core_classifier():
    """Knows ``os`` and ``asyncio`` as standard library modules."""
    return FakeClassifier({"os": "2.6", "asyncio": "3.4"})


@pytest.fixture
def scenario_files(tmp_path):
    """app.py imports os, asyncio, mypkg.sub; worker.py imports mypkg.sub, requests."""
    app = tmp_path / "app.py"
    worker = tmp_path / "worker.py"
    app.write_text("import os\nimport asyncio\nimport mypkg.sub\n")
    worker.write_text("import mypkg.sub\nimport requests\n")
    return [str(app), str(worker)]


@pytest.fixture
def scenario_scanner():
    return FakeScanner({
        "app.py": ["os", "asyncio", "mypkg.sub"],
        "worker.py": ["mypkg.sub", ("requests", ">=2.31")],
    })
