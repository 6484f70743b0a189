import os
import shutil

from .context import ctx
from .misc import (
    CopyError,
    CreateTargetError,
    DeleteSourceError,
    MetadataError,
    ModifiedTimeError,
    OpenSourceError,
    del_file,
)


class SourceEntry:
    """Snapshot of one source directory entry, taken at enumeration."""

    def __init__(self, name, path, is_dir=False, size=None, mtime=None):
        self.name = name
        self.path = path
        self.is_dir = is_dir
        self.size = size
        self.mtime = mtime
        self.error = None

    def __repr__(self):
        return f"SourceEntry({self.name!r})"

    def check(self):
        """Raise the error captured while reading the metadata, if any."""
        if self.error is not None:
            raise self.error

    @classmethod
    def from_dir_entry(cls, dir_entry: os.DirEntry):
        entry = cls(dir_entry.name, dir_entry.path)
        try:
            entry.is_dir = dir_entry.is_dir()
        except OSError as e:
            entry.error = MetadataError(dir_entry.path, e)
            return entry
        if entry.is_dir:
            return entry
        try:
            st = dir_entry.stat()
        except OSError as e:
            entry.error = ModifiedTimeError(dir_entry.path, e)
            return entry
        entry.size = st.st_size
        entry.mtime = st.st_mtime
        return entry


class FileReader:
    @staticmethod
    def transfer(source, destination, move=False, trash=False):
        """Copy ``source`` to ``destination``; with ``move`` delete the source
        once the copy is complete. A failed delete leaves both copies."""
        FileReader.copy(source, destination)
        if move:
            try:
                del_file(source, trash=trash)
            except OSError as e:
                raise DeleteSourceError(source, e) from e

    @staticmethod
    def copy(source, destination):
        try:
            fi = open(source, "rb")
        except OSError as e:
            raise OpenSourceError(source, e) from e
        with fi:
            try:
                fo = open(destination, "wb")
            except OSError as e:
                raise CreateTargetError(destination, e) from e
            with fo:
                try:
                    while chunk := fi.read(ctx.chunk_size):
                        fo.write(chunk)
                except OSError as e:
                    raise CopyError(source, e) from e
        try:
            # keep mtime so a rerun over the target lands on the same day
            shutil.copystat(source, destination)
        except OSError as e:
            raise CopyError(source, e) from e
