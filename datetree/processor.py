from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import Callable, List, Optional

from . import logger
from .appraiser import Action, Appraiser
from .cache import DirCache
from .context import RunContext, ctx
from .misc import TargetDirError
from .reader import FileReader, SourceEntry
from .report import Outcome, Result
from .walker import Walker

SKIPS = {
    Action.SKIP_IS_DIR: Outcome.SKIPPED_IS_DIR,
    Action.SKIP_EXISTS: Outcome.SKIPPED_EXISTS,
}


class Processor:
    def __init__(
        self,
        source,
        target,
        context: Optional[RunContext] = None,
        on_progress: Optional[Callable[[Result], None]] = None,
    ):
        self.source = Path(source)
        self.target = Path(target)
        self.ctx = context or ctx
        self.on_progress = on_progress or (lambda result: None)

    def run(self) -> List[Result]:
        """Process every entry of the source directory once.

        Returns one Result per entry, in completion order.
        """
        return self.dispatch(self.prepare())

    def prepare(self) -> List[SourceEntry]:
        # errors here are fatal for the run
        try:
            self.target.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise TargetDirError(self.target, e) from e
        return Walker().scan(self.source)

    def dispatch(self, entries: List[SourceEntry]) -> List[Result]:
        # one cache per run, shared by all workers
        appraiser = Appraiser(self.target, DirCache(self.target), force=self.ctx.force)

        workers = max(1, self.ctx.workers)
        logger.info(f"processing {len(entries)} entries with {workers} workers")
        results = []
        with ThreadPoolExecutor(max_workers=workers) as executor:
            futures = [
                executor.submit(self.process, appraiser, entry) for entry in entries
            ]
            for future in as_completed(futures):
                result = future.result()
                results.append(result)
                self.on_progress(result)
        return results

    def process(self, appraiser: Appraiser, entry: SourceEntry) -> Result:
        try:
            destination, action = appraiser.classify(entry)
            if action in SKIPS:
                logger.debug(f"skip {entry.name}", reason=action.value)
                return Result(entry, SKIPS[action], destination)

            if self.ctx.dry_run:
                verb = "move" if self.ctx.move else "copy"
                logger.info(f"dry-run: would {verb} {entry.path} -> {destination}")
            else:
                FileReader.transfer(
                    entry.path,
                    destination,
                    move=self.ctx.move,
                    trash=self.ctx.trash,
                )
                logger.debug(f"{entry.path} -> {destination}")
            return Result(entry, Outcome.TRANSFERRED, destination)
        except Exception as e:
            # one entry never aborts its siblings
            logger.debug(f"failed {entry.name}: {e}")
            return Result(entry, Outcome.FAILED, error=e)
