"""Import Inspector — static listing of the modules a source file imports.

Scans Python files without running them and reports the modules they use,
as a per-file report, a plain or JSON list, or a dependency manifest.
"""

__version__ = "1.1.0"
