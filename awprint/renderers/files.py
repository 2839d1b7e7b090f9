"""
Renderers for open files, file paths and directories, with 'ls -l' style details.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import io
import logging
import os
import stat

from datetime import datetime
from pathlib import Path

# Local ----------------------------------------------------------------------------------------------------------------
from ..categories import Category
from ..utils import safe_repr
from .base import BaseRenderer

logger = logging.getLogger(__name__)

LS_TIME_FORMAT = "%b %d %H:%M"


# Classes --------------------------------------------------------------------------------------------------------------

class FileRenderer(BaseRenderer):
    """
    Render an open file object or a path, followed by its listing line::

        <_io.TextIOWrapper name='notes.txt' mode='r' encoding='UTF-8'>
        -rw-r--r--   1        120 Oct 17 10:42 notes.txt

    Paths are stat'ed here rather than when classified; a directory path is handed
    to DirRenderer.
    """

    def path(self) -> Path:
        if isinstance(self.value, io.IOBase):
            return Path(os.fsdecode(self.value.name))
        return Path(self.value)

    def render(self) -> str:
        if isinstance(self.value, Path) and _is_dir(self.value):
            return DirRenderer(self.formatter, self.value).render()

        text = safe_repr(self.value)
        try:
            text = f"{text}\n{ls_line(self.path())}"
        except OSError as exc:
            logger.debug("Can not stat %s: %s", text, exc)
        return self.colorize(text, Category.FILE)


class DirRenderer(BaseRenderer):
    """Render a directory path followed by one listing line per entry, sorted by name."""

    def render(self) -> str:
        path = Path(self.value)
        lines = [safe_repr(self.value)]
        try:
            entries = sorted(path.iterdir(), key=lambda p: p.name)
        except OSError as exc:
            logger.debug("Can not list %s: %s", path, exc)
            entries = []

        for entry in entries:
            try:
                lines.append(ls_line(entry))
            except OSError as exc:
                logger.debug("Can not stat %s: %s", entry, exc)
        return self.colorize("\n".join(lines), Category.DIR)


# Methods --------------------------------------------------------------------------------------------------------------

def ls_line(path: Path) -> str:
    """
    Return an 'ls -lF' style line: mode, links, size, mtime and name with type suffix.

    Raises:
        OSError: If path can not be stat'ed.
    """
    st = path.lstat()
    mode = st.st_mode
    if stat.S_ISDIR(mode):
        suffix = "/"
    elif stat.S_ISLNK(mode):
        suffix = "@"
    elif stat.S_ISREG(mode) and mode & (stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH):
        suffix = "*"
    else:
        suffix = ""

    mtime = datetime.fromtimestamp(st.st_mtime).strftime(LS_TIME_FORMAT)
    return f"{stat.filemode(mode)} {st.st_nlink:>3} {st.st_size:>10} {mtime} {path.name}{suffix}"


# Private Methods ------------------------------------------------------------------------------------------------------

def _is_dir(path: Path) -> bool:
    try:
        return path.is_dir()
    except OSError:
        return False
