"""Archive extraction for WASM build archives.

The archive is unpacked into a scratch directory, the ``jswasm`` folder
is located wherever it is nested, and its files are copied into the
destination. The scratch directory is removed on every path.
"""

import shutil
import tempfile
import zipfile
from dataclasses import dataclass, field
from pathlib import Path

from jswasm_fetch.constants import DEFAULT_TARGET_DIR_NAME
from jswasm_fetch.exceptions import ExtractionError
from jswasm_fetch.logger import get_logger

logger = get_logger(__name__)

TEMP_DIR_PREFIX = "jswasm-fetch-extract-"


@dataclass(slots=True, frozen=True)
class ExtractionResult:
    """Outcome of a successful extraction.

    Attributes:
        source_dir: Archive-relative path of the located directory
        output_dir: Directory the files were copied into
        files: Copied file paths, sorted by name

    """

    source_dir: Path
    output_dir: Path
    files: list[Path] = field(default_factory=list)


def find_directory(root: Path, name: str) -> Path | None:
    """Find the first directory called ``name`` below ``root``.

    Pre-order depth-first and iterative: a subtree is exhausted before its
    next sibling is visited. Children are visited in sorted order so the
    result does not depend on filesystem listing order. Symlinked
    directories are not followed, and resolved paths are remembered so a
    directory is never walked twice.

    Args:
        root: Directory to search from (not itself a candidate)
        name: Exact directory name to match

    Returns:
        Path of the match, or None

    """
    stack = [root]
    visited: set[Path] = set()

    while stack:
        current = stack.pop()
        if current != root and current.name == name:
            return current

        resolved = current.resolve()
        if resolved in visited:
            continue
        visited.add(resolved)

        try:
            children = sorted(
                (
                    child
                    for child in current.iterdir()
                    if child.is_dir() and not child.is_symlink()
                ),
                key=lambda p: p.name,
            )
        except OSError as e:
            logger.debug("Cannot list %s: %s", current, e)
            continue

        # Reverse so the alphabetically first child is popped first.
        stack.extend(reversed(children))

    return None


class ArchiveExtractor:
    """Extract one named directory out of a zip archive."""

    def __init__(self, target_dir_name: str = DEFAULT_TARGET_DIR_NAME) -> None:
        """Initialize extractor.

        Args:
            target_dir_name: Directory to locate inside the archive; also
                the name of the output subdirectory

        """
        self.target_dir_name = target_dir_name

    def extract(
        self, archive: Path, destination: Path
    ) -> ExtractionResult | None:
        """Copy the target directory's files out of ``archive``.

        Only regular files directly inside the located directory are
        copied; existing files at the destination are overwritten.

        Args:
            archive: Path to the zip archive
            destination: Output root; files land in
                ``destination / target_dir_name``

        Returns:
            ExtractionResult, or None when the archive has no such directory

        Raises:
            ExtractionError: If the archive is missing or corrupt

        """
        scratch = Path(tempfile.mkdtemp(prefix=TEMP_DIR_PREFIX))
        try:
            self._unpack(archive, scratch)

            found = find_directory(scratch, self.target_dir_name)
            if found is None:
                logger.debug(
                    "No '%s' directory in %s", self.target_dir_name, archive
                )
                return None

            output_dir = destination / self.target_dir_name
            output_dir.mkdir(parents=True, exist_ok=True)

            copied = []
            for entry in sorted(found.iterdir(), key=lambda p: p.name):
                if not entry.is_file() or entry.is_symlink():
                    continue
                target = output_dir / entry.name
                shutil.copy2(entry, target)
                copied.append(target)

            logger.debug(
                "Copied %d files from %s to %s",
                len(copied),
                found.relative_to(scratch),
                output_dir,
            )
            return ExtractionResult(
                source_dir=found.relative_to(scratch),
                output_dir=output_dir,
                files=copied,
            )
        finally:
            shutil.rmtree(scratch, ignore_errors=True)

    @staticmethod
    def _unpack(archive: Path, scratch: Path) -> None:
        try:
            with zipfile.ZipFile(archive) as zf:
                zf.extractall(scratch)
        except zipfile.BadZipFile as e:
            msg = f"{archive.name} is not a valid zip archive: {e}"
            raise ExtractionError(msg) from e
        except FileNotFoundError as e:
            msg = f"archive not found: {archive}"
            raise ExtractionError(msg) from e
