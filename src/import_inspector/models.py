"""Data models for import-inspector."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel


class ModuleRecord(BaseModel):
    """One module declared by a scanned file."""

    name: str
    version: Optional[str] = None

    @classmethod
    def coerce(cls, item: "ModuleRecord | str | tuple") -> "ModuleRecord":
        """Normalize scanner output (bare name, pair, or record) to a record."""
        if isinstance(item, ModuleRecord):
            return item
        if isinstance(item, str):
            return cls(name=item)
        name, version = item
        return cls(name=name, version=version or None)


class Classification(str, Enum):
    """Where a module comes from, as far as the core classifier can tell."""

    core = "core"
    external = "external"
    unknown = "unknown"


class OutputMode(str, Enum):
    """Rendering mode of the collected module list."""

    verbose = "verbose"
    list = "list"
    null = "null"
    json = "json"
    manifest = "manifest"

    @property
    def is_batch(self) -> bool:
        """True if the mode renders once, after every file is scanned."""
        return self is not OutputMode.verbose
