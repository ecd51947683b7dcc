"""Models for build tool candidates and the running selection."""

from dataclasses import dataclass, field
from pathlib import Path

from pydantic import BaseModel

from latest_zipalign.utils.version import VersionKey, parse_version


class CandidatePath(BaseModel):
    """A discovered path to a build tool binary."""

    full_path: Path
    """Path to the tool file (e.g., .../build-tools/34.0.0/zipalign)."""

    version_dir: str
    """Name of the immediate parent directory (e.g., 34.0.0)."""

    @classmethod
    def from_path(cls, path: Path) -> "CandidatePath":
        """Build a candidate from a matched tool path."""
        return cls(full_path=path, version_dir=path.parent.name)

    @property
    def version_key(self) -> VersionKey:
        """Get the comparable key of the version directory."""
        return parse_version(self.version_dir)


@dataclass
class SelectionState:
    """Running best candidate during a single scan."""

    best_version: str | None = None
    best_path: Path | None = None
    _best_key: VersionKey | None = field(default=None, init=False, repr=False)

    def consider(self, candidate: CandidatePath) -> bool:
        """Offer a candidate to the selection.

        The first candidate always becomes the baseline. Later candidates
        replace it when their version is greater than or equal to the
        current best, so on a tie the later candidate wins.

        Returns:
            True if the candidate became the new best.
        """
        key = candidate.version_key
        if self._best_key is not None and key < self._best_key:
            return False

        self.best_version = candidate.version_dir
        self.best_path = candidate.full_path
        self._best_key = key
        return True
