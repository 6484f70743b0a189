import os
from pathlib import Path

import send2trash


class RunError(Exception):
    """Fatal for the whole run: nothing can be processed."""


class SourceDirError(RunError):
    def __init__(self, path, cause):
        super().__init__(f"failed reading source dir {path}: {cause}")
        self.path = path
        self.cause = cause


class TargetDirError(RunError):
    def __init__(self, path, cause):
        super().__init__(f"failed creating target dir {path}: {cause}")
        self.path = path
        self.cause = cause


class TransferError(Exception):
    """Failure of a single entry. Never aborts the run."""

    stage = "processing entry"

    def __init__(self, path, cause):
        super().__init__(f"failed {self.stage}: {cause}")
        self.path = path
        self.cause = cause


class MetadataError(TransferError):
    stage = "getting file metadata"


class ModifiedTimeError(TransferError):
    stage = "getting mtime"


class TimestampConversionError(TransferError):
    stage = "converting mtime to a UTC date"


class CreateDirectoryError(TransferError):
    stage = "creating target directory"


class DestinationMetadataError(TransferError):
    stage = "getting target file metadata"


class OpenSourceError(TransferError):
    stage = "opening source file"


class CreateTargetError(TransferError):
    stage = "creating target file"


class CopyError(TransferError):
    stage = "copying data"


class DeleteSourceError(TransferError):
    stage = "deleting source file"


def del_file(file_path, trash: bool = False):
    # errors propagate: a failed delete must be reported for the entry
    if trash:
        send2trash.send2trash(str(file_path))
    else:
        os.unlink(file_path)


def to_abs(path) -> Path:
    return Path(path).resolve()
