"""Tests for the data models."""

import pytest

from import_inspector.models import Classification, ModuleRecord, OutputMode


class TestModuleRecord:
    def test_defaults(self):
        rec = ModuleRecord(name="requests")
        assert rec.name == "requests"
        assert rec.version is None

    def test_coerce_bare_name(self):
        assert ModuleRecord.coerce("os.path") == ModuleRecord(name="os.path")

    def test_coerce_pair(self):
        rec = ModuleRecord.coerce(("requests", ">=2.31"))
        assert rec.name == "requests"
        assert rec.version == ">=2.31"

    def test_coerce_pair_empty_version(self):
        assert ModuleRecord.coerce(("yaml", "")).version is None

    def test_coerce_record_passthrough(self):
        rec = ModuleRecord(name="json", version="1")
        assert ModuleRecord.coerce(rec) is rec

    def test_coerce_rejects_garbage(self):
        with pytest.raises((TypeError, ValueError)):
            ModuleRecord.coerce(("a", "b", "c"))


class TestEnums:
    def test_classification_values(self):
        assert {c.value for c in Classification} == {"core", "external", "unknown"}

    def test_only_verbose_is_per_file(self):
        assert not OutputMode.verbose.is_batch
        for mode in (OutputMode.list, OutputMode.null, OutputMode.json, OutputMode.manifest):
            assert mode.is_batch
