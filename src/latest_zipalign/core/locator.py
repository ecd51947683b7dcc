"""Locate the newest build tool binary under an SDK build-tools tree."""

from pathlib import Path

from latest_zipalign.exceptions import DiscoveryError, SelectionError
from latest_zipalign.models.candidate import CandidatePath, SelectionState
from latest_zipalign.utils.output import console

BUILD_TOOLS_DIR = "build-tools"
DEFAULT_TOOL = "zipalign"


class VersionedToolLocator:
    """Finds the tool file under the highest version directory."""

    def __init__(self, root: Path, tool_name: str = DEFAULT_TOOL):
        """Initialize the locator.

        Args:
            root: SDK root directory (contains build-tools/).
            tool_name: Literal file name of the tool (e.g., "zipalign").
        """
        self.root = Path(root)
        self.tool_name = tool_name

    @property
    def search_dir(self) -> Path:
        """Directory searched for version subdirectories."""
        return self.root / BUILD_TOOLS_DIR

    def candidates(self) -> list[CandidatePath]:
        """Enumerate every tool file under build-tools/, sorted by path.

        Returns:
            Candidates in enumeration order.
        """
        matches = sorted(
            (p for p in self.search_dir.glob(f"**/{self.tool_name}") if p.is_file()),
            key=str,
        )
        return [CandidatePath.from_path(p) for p in matches]

    def select(self, candidates: list[CandidatePath]) -> CandidatePath:
        """Pick the candidate with the highest version directory.

        Args:
            candidates: Candidates in enumeration order.

        Returns:
            The selected candidate. Ties go to the later candidate.

        Raises:
            DiscoveryError: If there are no candidates.
            SelectionError: If no candidate was recorded as the best.
        """
        if not candidates:
            raise DiscoveryError(self.tool_name, self.search_dir)

        state = SelectionState()
        for candidate in candidates:
            console.print_debug(f"candidate {candidate.version_dir}: {candidate.full_path}")
            if state.consider(candidate):
                console.print_debug(f"best is now {state.best_version}")

        if state.best_path is None or state.best_version is None:
            raise SelectionError(self.tool_name)

        return CandidatePath(full_path=state.best_path, version_dir=state.best_version)

    def locate(self) -> Path:
        """Find the path of the newest tool binary.

        Raises:
            DiscoveryError: If no tool files were found.
            SelectionError: If no best candidate could be selected.
        """
        return self.select(self.candidates()).full_path


def locate(root: Path, tool_name: str = DEFAULT_TOOL) -> Path:
    """Find the newest ``tool_name`` under ``root/build-tools/``."""
    return VersionedToolLocator(root, tool_name).locate()
