"""Import detection with the standard library ``ast`` parser."""

import ast
from pathlib import Path
from typing import Optional, Union

from import_inspector.scanners.base import Scanner, ScanResult

_DYNAMIC_LOADERS = {"import_module", "__import__"}


class AstScanner(Scanner):
    """Parses the file and reports ``import`` / ``from ... import`` targets.

    Relative imports are skipped. ``importlib.import_module("x")`` and
    ``__import__("x")`` count when their first argument is a string literal;
    computed names are out of reach of a static scan.
    """

    name = "ast"
    install_hint = "ast (standard library, always available)"

    def list_modules(self, path: Union[str, Path]) -> ScanResult:
        tree = ast.parse(self.read_source(path), filename=str(path))
        return self.names_in_tree(tree)

    def names_in_tree(self, tree: ast.AST) -> list[str]:
        """Module names in source order, each reported once."""
        found: list[tuple[int, int, str]] = []
        for node in ast.walk(tree):
            name = _imported_name(node)
            if isinstance(node, ast.Import):
                for alias in node.names:
                    found.append((node.lineno, node.col_offset, alias.name))
            elif name:
                found.append((node.lineno, node.col_offset, name))

        names: list[str] = []
        for _, _, name in sorted(found, key=lambda f: (f[0], f[1])):
            if name not in names:
                names.append(name)
        return names


def _imported_name(node: ast.AST) -> Optional[str]:
    if isinstance(node, ast.ImportFrom):
        if node.level == 0 and node.module:
            return node.module
        return None
    if isinstance(node, ast.Call) and node.args:
        func = node.func
        func_name = func.attr if isinstance(func, ast.Attribute) else getattr(func, "id", None)
        arg = node.args[0]
        if (
            func_name in _DYNAMIC_LOADERS
            and isinstance(arg, ast.Constant)
            and isinstance(arg.value, str)
            and arg.value
            and not arg.value.startswith(".")
        ):
            return arg.value
    return None
