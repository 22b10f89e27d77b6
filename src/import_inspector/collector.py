"""Per-file scanning and accumulation of module records."""

import logging
import os
from pathlib import Path
from typing import Callable, Iterable, Optional, Union

from import_inspector.corelist import CoreClassifier
from import_inspector.errors import FileUnreadableError, ScanFailureError
from import_inspector.models import ModuleRecord
from import_inspector.scanners import Scanner

logger = logging.getLogger(__name__)

FileCallback = Callable[[str, list[ModuleRecord]], None]


class ModuleCollector:
    """Runs one scanner over many files and keeps every record in order.

    Records are appended file by file; duplicates across files are kept.
    With ``exclude_core`` the whole list is re-filtered after every file.
    ``on_file`` receives each file's own records as soon as it is scanned,
    ``on_error`` receives one diagnostic line per skipped file.
    """

    def __init__(
        self,
        scanner: Scanner,
        classifier: Optional[CoreClassifier] = None,
        exclude_core: bool = False,
        on_file: Optional[FileCallback] = None,
        on_error: Optional[Callable[[str], None]] = None,
    ) -> None:
        self.scanner = scanner
        self.classifier = classifier
        self.exclude_core = exclude_core
        self.records: list[ModuleRecord] = []
        self._on_file = on_file
        self._on_error = on_error or (lambda _: None)

    def collect(self, paths: Iterable[Union[str, Path]]) -> list[ModuleRecord]:
        """Scan ``paths`` in order and return the accumulated records."""
        for path in paths:
            try:
                self.collect_file(path)
            except (FileUnreadableError, ScanFailureError) as e:
                self._on_error(str(e))
        return self.records

    def collect_file(self, path: Union[str, Path]) -> list[ModuleRecord]:
        """Scan one file, append its records and return them."""
        path = str(path)
        if not os.path.isfile(path) or not os.access(path, os.R_OK):
            raise FileUnreadableError(path)
        try:
            found = self.scanner.list_modules(path)
        except Exception as e:
            raise ScanFailureError(path, e) from e

        increment = [ModuleRecord.coerce(item) for item in found]
        self.records.extend(increment)
        if self.exclude_core:
            increment = self._without_core(increment)
            self.records = self._without_core(self.records)
        logger.debug("%s: %d module(s)", path, len(increment))

        if self._on_file is not None:
            self._on_file(path, increment)
        return increment

    def _without_core(self, records: list[ModuleRecord]) -> list[ModuleRecord]:
        if self.classifier is None:
            return records
        return [r for r in records if not self.classifier.first_release(r.name)]
