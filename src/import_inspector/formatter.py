"""Rendering of collected module records."""

import json
from typing import Optional

from import_inspector.corelist import ECOSYSTEM, CoreClassifier, classify
from import_inspector.models import Classification, ModuleRecord, OutputMode


def select_mode(
    list_: bool = False,
    null: bool = False,
    json_: bool = False,
    manifest: bool = False,
) -> OutputMode:
    """Pick the output mode; list > null > json > manifest > verbose."""
    if list_:
        return OutputMode.list
    if null:
        return OutputMode.null
    if json_:
        return OutputMode.json
    if manifest:
        return OutputMode.manifest
    return OutputMode.verbose


class Formatter:
    """Turns module records into text for one process run.

    The list, null and JSON modes share one set of names already printed,
    so a name is never emitted twice by the same formatter.
    """

    def __init__(self, classifier: Optional[CoreClassifier] = None) -> None:
        self.classifier = classifier
        self._seen: set[str] = set()

    # ── Per-file report ───────────────────────────────────────────────────

    def file_report(self, path: str, records: list[ModuleRecord]) -> str:
        """Header, one line per module, and the core/external tally."""
        lines = [f"Modules required by {path}:"]
        core = extern = 0
        for record in sorted(records, key=lambda r: r.name):
            kind = classify(record.name, self.classifier)
            note = ""
            if kind is Classification.core:
                core += 1
                note = f" (first released with {ECOSYSTEM} {self._first_release(record.name)})"
            elif kind is Classification.external:
                extern += 1
            lines.append(f" - {record.name}{note}")
        lines.append(f"{core} module(s) in core, {extern} external module(s)")
        return "\n".join(lines) + "\n\n"

    def _first_release(self, name: str) -> Optional[str]:
        return self.classifier.first_release(name) if self.classifier else None

    # ── Batch modes ───────────────────────────────────────────────────────

    def _unseen_names(self, records: list[ModuleRecord]) -> list[str]:
        names: list[str] = []
        for name in sorted(r.name for r in records):
            if name in self._seen:
                continue
            self._seen.add(name)
            names.append(name)
        return names

    def name_list(self, records: list[ModuleRecord], sep: str = "\n") -> str:
        return "".join(name + sep for name in self._unseen_names(records))

    def json_list(self, records: list[ModuleRecord]) -> str:
        return json.dumps(self._unseen_names(records), indent=2) + "\n"

    @staticmethod
    def manifest(records: list[ModuleRecord]) -> str:
        """``requires`` lines in record order, duplicates kept."""
        lines = []
        for record in records:
            if record.version:
                lines.append(f"requires '{record.name}', '{record.version}';\n")
            else:
                lines.append(f"requires '{record.name}';\n")
        return "".join(lines)

    def render(self, mode: OutputMode, records: list[ModuleRecord]) -> str:
        """Render ``records`` in a batch ``mode``."""
        if mode is OutputMode.list:
            return self.name_list(records, "\n")
        if mode is OutputMode.null:
            return self.name_list(records, "\0")
        if mode is OutputMode.json:
            return self.json_list(records)
        if mode is OutputMode.manifest:
            return self.manifest(records)
        raise ValueError(f"{mode.value} output is rendered per file")
