"""Temporary staging directory for the deployable bundle"""

import json
import logging
import shutil
import tempfile
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..api.exceptions import StagingError
from ..constants import DATA_DIR, DATA_FILES, STAGING_DIR_PREFIX

logger = logging.getLogger(__name__)


class StagingArea:
    """Owns a uniquely named temporary directory for one deployment run

    Usable as a context manager; the directory is removed on exit
    unless ``keep`` is set.

    Example:
        with StagingArea() as staging:
            staging.populate(Path("trip-planner"))
            staging.bootstrap_data()
    """

    def __init__(self, keep: bool = False, base_dir: Optional[Path] = None):
        self.keep = keep
        self.base_dir = base_dir
        self._path: Optional[Path] = None

    @property
    def path(self) -> Path:
        if self._path is None:
            raise StagingError("Staging directory has not been created")
        return self._path

    @property
    def exists(self) -> bool:
        return self._path is not None and self._path.exists()

    def create(self) -> Path:
        """Allocate a fresh temporary directory"""
        self._path = Path(tempfile.mkdtemp(
            prefix=STAGING_DIR_PREFIX,
            dir=str(self.base_dir) if self.base_dir else None
        ))
        logger.info("Created staging directory %s", self._path)
        return self._path

    def populate(self, source_dir: Path) -> Path:
        """Copy the application source tree into the staging directory

        Raises:
            StagingError: If the source tree is missing or cannot be copied
        """
        source_dir = Path(source_dir)
        if not source_dir.is_dir():
            raise StagingError(f"Application source directory not found: {source_dir}")

        try:
            shutil.copytree(source_dir, self.path, dirs_exist_ok=True,
                            ignore=shutil.ignore_patterns(".git"))
        except (OSError, shutil.Error) as e:
            raise StagingError(f"Failed to copy {source_dir} to {self.path}: {e}") from e

        logger.debug("Copied %s into %s", source_dir, self.path)
        return self.path

    def bootstrap_data(self, files: Optional[Dict[str, Any]] = None) -> List[Path]:
        """Write placeholder data files, overwriting existing ones

        Args:
            files: Mapping of file name to JSON literal (defaults to DATA_FILES)

        Returns:
            Paths of the written files

        Raises:
            StagingError: If a data file cannot be written
        """
        files = DATA_FILES if files is None else files
        data_dir = self.path / DATA_DIR

        written = []
        try:
            data_dir.mkdir(parents=True, exist_ok=True)
            for name, literal in files.items():
                target = data_dir / name
                target.write_text(json.dumps(literal) + "\n", encoding="utf-8")
                written.append(target)
        except OSError as e:
            raise StagingError(f"Failed to write data files in {data_dir}: {e}") from e

        return written

    def cleanup(self) -> bool:
        """Remove the staging directory

        Returns:
            True if the directory no longer exists
        """
        if self._path is None:
            return True

        if self.keep:
            logger.info("Keeping staging directory %s", self._path)
            return False

        shutil.rmtree(self._path, ignore_errors=True)
        removed = not self._path.exists()
        if removed:
            logger.info("Removed staging directory %s", self._path)
        else:
            logger.warning("Could not fully remove staging directory %s", self._path)
        return removed

    def __enter__(self) -> 'StagingArea':
        self.create()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.cleanup()
