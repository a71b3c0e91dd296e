"""Gateway: filesystem template store — implements TemplateStore port."""

from __future__ import annotations

import contextlib
import logging
import os
import stat
import tempfile
from datetime import datetime, timezone
from pathlib import Path

from office_template_sync.l1_entities.artifact import LocalArtifact
from office_template_sync.l1_entities.errors import DirectoryCreationError, LocalStateError, WriteError

log = logging.getLogger('ots.fs')


def current_umask() -> int:
    mask = os.umask(0)
    os.umask(mask)
    return mask


def replacement_mode(path: Path) -> int:
    """Permission bits for a file written at *path*: the existing file's, else what a plain open() would give."""
    try:
        return stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        return 0o666 & ~current_umask()


class FileTemplateStore:
    """Reads and writes local template copies on the real filesystem."""

    def ensure_directory(self, directory: Path) -> None:
        try:
            if directory.is_dir():
                return
            if directory.exists():
                raise DirectoryCreationError(f'{directory} exists and is not a directory')
            directory.mkdir(parents=True, exist_ok=True)
        except (FileExistsError, NotADirectoryError) as e:
            raise DirectoryCreationError(f'{directory}: a parent path is not a directory') from e
        except OSError as e:
            raise DirectoryCreationError(f'Cannot create {directory}: {e.strerror or e}') from e
        log.info('Created template directory %s', directory)

    def inspect(self, path: Path) -> LocalArtifact:
        try:
            st = path.stat()
        except FileNotFoundError:
            return LocalArtifact(path=path, exists=False)
        except OSError as e:
            raise LocalStateError(f'Cannot inspect {path}: {e.strerror or e}') from e
        if not stat.S_ISREG(st.st_mode):
            return LocalArtifact(path=path, exists=False)
        return LocalArtifact(
            path=path,
            exists=True,
            modified_time=datetime.fromtimestamp(st.st_mtime, tz=timezone.utc),
        )

    def read_bytes(self, path: Path) -> bytes:
        return path.read_bytes()

    def write_atomic(self, path: Path, data: bytes) -> None:
        tmp_name = None
        try:
            mode = replacement_mode(path)
            fd, tmp_name = tempfile.mkstemp(prefix=f'.{path.name}.', suffix='.part', dir=path.parent)
            with os.fdopen(fd, 'wb') as f:
                f.write(data)
                f.flush()
                os.fsync(f.fileno())
            os.chmod(tmp_name, mode)
            os.replace(tmp_name, path)
        except OSError as e:
            if tmp_name is not None:
                with contextlib.suppress(FileNotFoundError):
                    os.unlink(tmp_name)
            raise WriteError(f'Cannot write {path}: {e.strerror or e}') from e
        log.debug('Wrote %d bytes to %s', len(data), path)
