"""Standard-library membership lookup backed by ``stdlib-list``."""

import logging
from typing import Optional

from import_inspector.errors import ClassifierUnavailableError
from import_inspector.models import Classification

logger = logging.getLogger(__name__)

ECOSYSTEM = "Python"

# Oldest first. Releases the installed stdlib-list has no data for are skipped.
RELEASES = (
    "2.6", "2.7",
    "3.0", "3.1", "3.2", "3.3", "3.4", "3.5", "3.6", "3.7",
    "3.8", "3.9", "3.10", "3.11", "3.12", "3.13", "3.14",
)


class CoreClassifier:
    """Answers "which Python release first shipped this module?"."""

    def __init__(self, releases: tuple[str, ...] = RELEASES) -> None:
        try:
            import stdlib_list
        except ImportError as e:
            raise ClassifierUnavailableError("stdlib-list is not installed") from e
        self._stdlib_list = stdlib_list.stdlib_list
        self._releases = releases
        self._first_seen: Optional[dict[str, str]] = None

    def _index(self) -> dict[str, str]:
        if self._first_seen is None:
            first_seen: dict[str, str] = {}
            for release in self._releases:
                try:
                    modules = self._stdlib_list(release)
                except ValueError:
                    logger.debug("No stdlib data for Python %s", release)
                    continue
                for module in modules:
                    first_seen.setdefault(module, release)
            self._first_seen = first_seen
        return self._first_seen

    def first_release(self, name: str) -> Optional[str]:
        """Release tag for ``name`` or its closest listed parent package."""
        index = self._index()
        parts = name.split(".")
        while parts:
            release = index.get(".".join(parts))
            if release:
                return release
            parts.pop()
        return None


def load_classifier() -> Optional[CoreClassifier]:
    """Return a classifier, or None when ``stdlib-list`` cannot be loaded."""
    try:
        classifier = CoreClassifier()
    except ClassifierUnavailableError:
        logger.info("Core module classifier unavailable; modules are reported as external")
        return None
    return classifier


def classify(name: str, classifier: Optional[CoreClassifier]) -> Classification:
    """Core if a release tag is known, external only when there is no classifier."""
    if classifier is None:
        return Classification.external
    if classifier.first_release(name):
        return Classification.core
    return Classification.unknown
