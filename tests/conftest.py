import os
from datetime import datetime, timezone

import pytest

from datetree.context import ctx

JULY_4 = datetime(2023, 7, 4, 10, 0, 0, tzinfo=timezone.utc).timestamp()


def make_file(directory, name, content=b"content", mtime=JULY_4):
    """Creates a file with a fixed modification time."""
    path = directory / name
    path.write_bytes(content)
    os.utime(path, (mtime, mtime))
    return path


@pytest.fixture
def source(tmp_path):
    """Flat source directory, cleaned up with tmp_path."""
    root = tmp_path / "source"
    root.mkdir()
    yield root


@pytest.fixture
def target(tmp_path):
    """Target directory path; not created, the processor creates it."""
    yield tmp_path / "target"


@pytest.fixture
def mixed_source(source):
    """Files spread over several days plus a subdirectory."""
    make_file(source, "a.jpg", b"aaa")
    make_file(source, "b.jpg", b"bbbb")
    make_file(
        source,
        "new_year.txt",
        b"party",
        mtime=datetime(2024, 1, 1, 0, 0, 1, tzinfo=timezone.utc).timestamp(),
    )
    make_file(
        source,
        "old.txt",
        b"old content",
        mtime=datetime(1999, 12, 31, 23, 59, 59, tzinfo=timezone.utc).timestamp(),
    )
    subdir = source / "nested"
    subdir.mkdir()
    make_file(subdir, "inner.txt", b"never touched")
    yield source


@pytest.fixture
def reset_ctx():
    """Reset context to defaults before and after test."""
    original = {
        "verbose": ctx.verbose,
        "dry_run": ctx.dry_run,
        "move": ctx.move,
        "force": ctx.force,
        "trash": ctx.trash,
        "workers": ctx.workers,
        "chunk_size": ctx.chunk_size,
    }

    ctx.verbose = False
    ctx.dry_run = False
    ctx.move = False
    ctx.force = False
    ctx.trash = False
    ctx.workers = 4
    ctx.chunk_size = 64 * 1024

    yield ctx

    for k, v in original.items():
        setattr(ctx, k, v)
