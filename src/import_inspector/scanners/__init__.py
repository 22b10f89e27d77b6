"""Scanner providers and their selection by preference order."""

import logging
from typing import Iterable

from import_inspector.errors import ScannerUnavailableError
from import_inspector.scanners.ast_scanner import AstScanner
from import_inspector.scanners.base import Scanner
from import_inspector.scanners.script_metadata import ScriptMetadataScanner

logger = logging.getLogger(__name__)

SCANNERS: dict[str, type[Scanner]] = {
    ScriptMetadataScanner.name: ScriptMetadataScanner,
    AstScanner.name: AstScanner,
}


def select_scanner(names: Iterable[str], encoding: str = "utf-8") -> Scanner:
    """Construct the first available scanner from ``names``.

    Raises ``ScannerUnavailableError`` naming what to install when none of
    them can be constructed.
    """
    hints: list[str] = []
    for name in names:
        cls = SCANNERS.get(name)
        if cls is None:
            logger.warning("Unknown scanner %r (known: %s)", name, ", ".join(SCANNERS))
            continue
        try:
            scanner = cls(encoding=encoding)
        except ScannerUnavailableError:
            logger.debug("Scanner %r is not available", name)
            hints.append(cls.install_hint)
            continue
        logger.debug("Using scanner %r", name)
        return scanner
    raise ScannerUnavailableError(hints or [c.install_hint for c in SCANNERS.values()])


__all__ = ["SCANNERS", "AstScanner", "Scanner", "ScriptMetadataScanner", "select_scanner"]
