"""Import detection enriched with inline script metadata versions.

Files may carry a ``# /// script`` block whose TOML ``dependencies`` list
pins requirements. Imports whose top-level package matches a declared
requirement are reported with that requirement's version specifier.
"""

import ast
import logging
import re
import tomllib
from pathlib import Path
from typing import Union

from import_inspector.errors import ScannerUnavailableError
from import_inspector.models import ModuleRecord
from import_inspector.scanners.ast_scanner import AstScanner
from import_inspector.scanners.base import ScanResult

logger = logging.getLogger(__name__)

_BLOCK_RE = re.compile(
    r"(?m)^# /// (?P<type>[a-zA-Z0-9-]+)$\s(?P<content>(^#(| .*)$\s)+)^# ///$"
)


class ScriptMetadataScanner(AstScanner):
    """AST scan plus versions from the ``script`` metadata block."""

    name = "script-metadata"
    install_hint = "packaging (pip install packaging)"

    def __init__(self, encoding: str = "utf-8") -> None:
        super().__init__(encoding)
        try:
            from packaging.requirements import InvalidRequirement, Requirement
            from packaging.utils import canonicalize_name
        except ImportError as e:
            raise ScannerUnavailableError([self.install_hint]) from e
        self._requirement = Requirement
        self._invalid_requirement = InvalidRequirement
        self._canonicalize = canonicalize_name

    def list_modules(self, path: Union[str, Path]) -> ScanResult:
        source = self.read_source(path)
        names = self.names_in_tree(ast.parse(source, filename=str(path)))
        pins = self.declared_versions(source)
        records: ScanResult = []
        for name in names:
            top = self._canonicalize(name.split(".")[0])
            records.append(ModuleRecord(name=name, version=pins.get(top)))
        return records

    def declared_versions(self, source: str) -> dict[str, str]:
        """Map canonical requirement name to its specifier, e.g. ``>=2.31``."""
        metadata = read_script_metadata(source)
        pins: dict[str, str] = {}
        deps = metadata.get("dependencies", [])
        if not isinstance(deps, list):
            logger.debug("Ignoring non-list dependencies %r", deps)
            return pins
        for dep in deps:
            if not isinstance(dep, str):
                logger.debug("Ignoring non-string requirement %r", dep)
                continue
            try:
                req = self._requirement(dep)
            except self._invalid_requirement:
                logger.debug("Ignoring invalid requirement %r", dep)
                continue
            if req.specifier:
                pins.setdefault(self._canonicalize(req.name), str(req.specifier))
        return pins


def read_script_metadata(source: str) -> dict:
    """Return the parsed ``script`` block, or an empty dict if there is none.

    More than one ``script`` block is an error.
    """
    matches = [m for m in _BLOCK_RE.finditer(source) if m.group("type") == "script"]
    if len(matches) > 1:
        raise ValueError("Multiple script metadata blocks found")
    if not matches:
        return {}
    content = "".join(
        line[2:] if line.startswith("# ") else line[1:]
        for line in matches[0].group("content").splitlines(keepends=True)
    )
    return tomllib.loads(content)
