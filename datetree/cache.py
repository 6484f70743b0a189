import os
import threading
from concurrent.futures import Future
from pathlib import Path, PurePath
from typing import Iterable, Union

from . import logger

Segments = Union[str, PurePath, Iterable[str]]


class DirNode(dict):
    """One directory known to exist on disk, keyed by child segment."""

    def __init__(self, path: Path):
        super().__init__()
        self.path = path
        self.lock = threading.Lock()
        # segment -> Future resolved once the child directory is on disk
        self.pending = {}


def split(segments: Segments):
    if isinstance(segments, (str, PurePath)):
        path = PurePath(segments)
        if path.is_absolute():
            raise ValueError(f"invalid path component: {path.anchor!r}")
        segments = path.parts
    parts = []
    for part in segments:
        part = str(part)
        if part in ("", ".", "..") or os.sep in part or (
            os.altsep and os.altsep in part
        ):
            raise ValueError(f"invalid path component: {part!r}")
        parts.append(part)
    return parts


def mkdir(path: Path):
    try:
        os.mkdir(path)
    except FileExistsError:
        if not os.path.isdir(path):
            raise
        logger.debug(f"already exists {path}")
    else:
        logger.debug(f"created {path}")


class DirCache:
    """Memoizes directories created under ``root``.

    Safe to share between threads. Each node guards its own children; the
    lock is never held while a child directory is being created. The first
    caller for a missing segment publishes a Future, the others wait on it,
    so every segment is created at most once per run.

    The root itself is confirmed (or created) by the first ``ensure_created``
    call; until then ``root`` is None.
    """

    def __init__(self, root):
        self.path = Path(root)
        self.root = None
        self._root_lock = threading.Lock()

    def ensure_created(self, segments: Segments) -> Path:
        parts = split(segments)
        node = self._confirm_root()
        for part in parts:
            node = self._child(node, part)
        return node.path

    def known(self, segments: Segments) -> bool:
        node = self.root
        for part in split(segments):
            if node is None:
                return False
            with node.lock:
                node = node.get(part)
        return node is not None

    __contains__ = known

    def _confirm_root(self) -> DirNode:
        if self.root is not None:
            return self.root
        with self._root_lock:
            if self.root is None:
                if not os.path.isdir(self.path):
                    self.path.mkdir(parents=True, exist_ok=True)
                    logger.debug(f"created root {self.path}")
                self.root = DirNode(self.path)
        return self.root

    def _child(self, node: DirNode, part: str) -> DirNode:
        with node.lock:
            child = node.get(part)
            if child is not None:
                return child
            waiter = node.pending.get(part)
            if waiter is None:
                owner = node.pending[part] = Future()
        if waiter is not None:
            # created (or failed) by a concurrent caller
            return waiter.result()

        path = node.path / part
        try:
            mkdir(path)
        except BaseException as e:
            # waiters must never be left blocked on an unresolved Future
            with node.lock:
                del node.pending[part]
            owner.set_exception(e)
            raise

        child = DirNode(path)
        with node.lock:
            node[part] = child
            del node.pending[part]
        owner.set_result(child)
        return child
