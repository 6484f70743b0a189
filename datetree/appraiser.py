import enum
import os
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Tuple

from . import logger
from .cache import DirCache
from .misc import (
    CreateDirectoryError,
    DestinationMetadataError,
    TimestampConversionError,
)
from .reader import SourceEntry


class Action(enum.Enum):
    SKIP_IS_DIR = "skip-is-dir"
    SKIP_EXISTS = "skip-exists"
    TRANSFER = "transfer"


def date_segments(mtime: float) -> Tuple[str, str, str]:
    """UTC (year, zero-padded month, zero-padded day) of a timestamp."""
    dt = datetime.fromtimestamp(mtime, tz=timezone.utc)
    return str(dt.year), f"{dt.month:02}", f"{dt.day:02}"


class Appraiser:
    def __init__(self, target, dir_cache: DirCache, force: bool = False):
        self.target = Path(target)
        self.dir_cache = dir_cache
        self.force = force

    def classify(self, entry: SourceEntry) -> Tuple[Optional[Path], Action]:
        entry.check()
        if entry.is_dir:
            return None, Action.SKIP_IS_DIR

        try:
            segments = date_segments(entry.mtime)
        except (OverflowError, OSError, ValueError, TypeError) as e:
            raise TimestampConversionError(entry.path, e) from e

        try:
            directory = self.dir_cache.ensure_created(segments)
        except OSError as e:
            raise CreateDirectoryError(self.target.joinpath(*segments), e) from e

        destination = directory / entry.name
        if self.force:
            return destination, Action.TRANSFER

        try:
            st = os.stat(destination)
        except FileNotFoundError:
            return destination, Action.TRANSFER
        except OSError as e:
            raise DestinationMetadataError(destination, e) from e

        # equal size is taken as "already transferred"; content is not compared
        if st.st_size == entry.size:
            logger.debug(f"exists {destination}", size=st.st_size)
            return destination, Action.SKIP_EXISTS
        logger.debug(
            f"size differs {destination}", source=entry.size, target=st.st_size
        )
        return destination, Action.TRANSFER
