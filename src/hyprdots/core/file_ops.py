"""Backup and atomic replacement of config files."""

import logging
import os
import shutil
import tempfile
from datetime import datetime
from pathlib import Path

from hyprdots.core.errors import BackupError, ConfigWriteError

logger = logging.getLogger(__name__)

BACKUP_STAMP_FORMAT = "%Y%m%d-%H%M%S"


def backup_path_for(config_path: Path, backup_dir: Path, stamp: datetime, attempt: int = 0) -> Path:
    """Backup file name for a config file at a point in time.

    The first backup in a given second is `<name>.<stamp>.bak`; later ones in
    the same second get a `-1`, `-2`, ... suffix.
    """
    suffix = "" if attempt == 0 else f"-{attempt}"
    return backup_dir / f"{config_path.name}.{stamp.strftime(BACKUP_STAMP_FORMAT)}{suffix}.bak"


def write_backup(content: bytes, config_path: Path, backup_dir: Path, stamp: datetime) -> Path:
    """Write `content` as a new timestamped backup of `config_path`.

    Existing backups are never overwritten or removed.

    Raises:
        BackupError: If the backup directory or file cannot be written
    """
    try:
        backup_dir.mkdir(parents=True, exist_ok=True)
        attempt = 0
        while True:
            candidate = backup_path_for(config_path, backup_dir, stamp, attempt)
            try:
                with open(candidate, "xb") as f:
                    f.write(content)
            except FileExistsError:
                attempt += 1
                continue
            logger.debug("Backed up %s to %s", config_path, candidate)
            return candidate
    except OSError as e:
        raise BackupError(config_path, backup_dir, e) from e


def atomic_write(path: Path, content: bytes) -> None:
    """Replace `path` with `content` so readers see either old or new bytes.

    Writes a temporary file next to `path`, fsyncs it, copies the original
    file mode and renames it over `path`. On any failure the temporary file
    is removed and `path` is left untouched.

    Raises:
        ConfigWriteError: If any step fails
    """
    tmp_path: Path | None = None
    try:
        fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
        tmp_path = Path(tmp_name)
        with os.fdopen(fd, "wb") as f:
            f.write(content)
            f.flush()
            os.fsync(f.fileno())
        if path.exists():
            shutil.copymode(path, tmp_path)
        os.replace(tmp_path, path)
    except OSError as e:
        if tmp_path is not None:
            tmp_path.unlink(missing_ok=True)
        raise ConfigWriteError(path, e) from e
    logger.debug("Wrote %d bytes to %s", len(content), path)
