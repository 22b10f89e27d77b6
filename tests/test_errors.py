"""Tests for errors.py — diagnostic messages."""

from import_inspector.errors import (
    FileUnreadableError,
    InspectorError,
    ScanFailureError,
    ScannerUnavailableError,
)


class TestMessages:
    def test_unreadable(self):
        assert str(FileUnreadableError("x.py")) == "Failed to open file 'x.py' for reading"

    def test_scan_failure(self):
        err = ScanFailureError("x.py", SyntaxError("bad"))
        assert str(err) == "Failed to scan file 'x.py': bad"

    def test_scanner_unavailable_lists_hints(self):
        err = ScannerUnavailableError(["packaging (pip install packaging)"])
        assert str(err) == (
            "No usable file scanner module found; exiting...\n"
            "Install one of:\n"
            "  packaging (pip install packaging)"
        )

    def test_scanner_unavailable_without_hints(self):
        assert str(ScannerUnavailableError()) == "No usable file scanner module found; exiting..."

    def test_common_base(self):
        for err in (FileUnreadableError("x"), ScannerUnavailableError()):
            assert isinstance(err, InspectorError)
