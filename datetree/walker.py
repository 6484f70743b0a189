import os
from typing import List

from . import logger
from .misc import SourceDirError, to_abs
from .reader import SourceEntry


class Walker:
    def scan(self, dir_name) -> List[SourceEntry]:
        """List the direct entries of ``dir_name`` exactly once.

        Subdirectories are returned as entries (to be skipped), never
        descended into. Failing to list the directory is fatal.
        """
        resolved_dir = to_abs(dir_name)
        logger.info(f"reading source directory {resolved_dir}")
        try:
            with os.scandir(resolved_dir) as it:
                entries = [SourceEntry.from_dir_entry(e) for e in it]
        except OSError as e:
            raise SourceDirError(resolved_dir, e) from e
        logger.debug(f"found {len(entries)} entries")
        return entries
