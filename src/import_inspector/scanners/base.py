"""Common interface of the file scanners."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import ClassVar, Union

from import_inspector.models import ModuleRecord

ScanResult = list[Union[ModuleRecord, str]]


class Scanner(ABC):
    """Lists the modules a source file declares, without executing it.

    Subclasses raise ``ScannerUnavailableError`` from ``__init__`` when the
    library they delegate to is not installed.
    """

    name: ClassVar[str] = ""
    install_hint: ClassVar[str] = ""

    def __init__(self, encoding: str = "utf-8") -> None:
        self.encoding = encoding

    def read_source(self, path: Union[str, Path]) -> str:
        return Path(path).read_text(encoding=self.encoding)

    @abstractmethod
    def list_modules(self, path: Union[str, Path]) -> ScanResult:
        """Module names (or records carrying a version) found in ``path``."""
