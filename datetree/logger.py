import threading

import clickclick as cc

from .context import ctx

# workers log concurrently; keep each line whole
_echo_lock = threading.Lock()


def parameterized(func):
    def wrapper(msg, **kwargs):
        if kwargs:
            params = " ".join([f"{k}={v}" for (k, v) in sorted(kwargs.items())])
            msg = f"{msg} {params}"
        with _echo_lock:
            func(msg)

    return wrapper


@parameterized
def debug(msg):
    if ctx.verbose:
        cc.secho(msg, fg="bright_black", bold=False)


@parameterized
def info(msg):
    cc.info(msg)


@parameterized
def error(msg):
    cc.error(msg)


@parameterized
def warning(msg):
    cc.warning(msg)


@parameterized
def ok(msg):
    cc.ok(msg)


def failure(name, detail):
    """One indented line of the final failure list: entry name and error."""
    error(f"\t{name}: {detail}")
