import os
from dataclasses import dataclass, field


def default_workers() -> int:
    return os.cpu_count() or 1


@dataclass
class RunContext:
    verbose: bool = False
    dry_run: bool = False
    move: bool = False
    force: bool = False
    trash: bool = False
    workers: int = field(default_factory=default_workers)

    # copy buffer
    chunk_size: int = 64 * 1024  # 64KB chunks


ctx = RunContext()
