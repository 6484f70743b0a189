import enum
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

from . import logger
from .reader import SourceEntry


class Outcome(enum.Enum):
    TRANSFERRED = "transferred"
    SKIPPED_IS_DIR = "skipped-is-dir"
    SKIPPED_EXISTS = "skipped-exists"
    FAILED = "failed"

    @property
    def skipped(self):
        return self in (Outcome.SKIPPED_IS_DIR, Outcome.SKIPPED_EXISTS)


@dataclass
class Result:
    entry: SourceEntry
    outcome: Outcome
    destination: Optional[Path] = None
    error: Optional[Exception] = None


@dataclass
class Report:
    transferred: int = 0
    skipped: int = 0
    failures: List[Tuple[str, str]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures

    @property
    def exit_code(self) -> int:
        return 0 if self.ok else 1

    def render(self):
        logger.info(
            "done",
            transferred=self.transferred,
            skipped=self.skipped,
            failed=len(self.failures),
        )
        if self.failures:
            logger.error(f"{len(self.failures)} entries failed:")
            for name, detail in self.failures:
                logger.failure(name, detail)


def aggregate(results: Iterable[Result]) -> Report:
    report = Report()
    for result in results:
        if result.outcome is Outcome.FAILED:
            report.failures.append((result.entry.name, str(result.error)))
        elif result.outcome.skipped:
            report.skipped += 1
        else:
            report.transferred += 1
    report.failures.sort()
    return report
