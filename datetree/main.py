"""
datetree /path/to/flat /path/to/sorted
datetree --dry-run /path/to/flat /path/to/sorted --mv
datetree /path/to/flat /path/to/sorted --mv --trash --workers 4
"""

import logging

import click

from . import logger
from .context import ctx, default_workers
from .misc import RunError
from .processor import Processor
from .report import aggregate


@click.command()
@click.option("-v", "--verbose", is_flag=True, default=False)
@click.option("--dry-run", is_flag=True, default=False, help="dry run")
@click.argument("source", type=click.Path(exists=True, file_okay=False))
@click.argument("target", type=click.Path(file_okay=False))
@click.option("--mv", is_flag=True, default=False, help="move instead of copy")
@click.option(
    "--force",
    is_flag=True,
    default=False,
    help="overwrite existing files even if the size matches",
)
@click.option(
    "--workers",
    "-w",
    type=click.IntRange(min=1),
    default=default_workers,
    show_default="cpu count",
    help="number of worker threads",
)
@click.option(
    "--trash",
    is_flag=True,
    default=False,
    help="with --mv, move sources to trash instead of deleting them",
)
def cli(verbose, dry_run, source, target, mv, force, workers, trash):
    """Sort files of SOURCE into TARGET/YYYY/MM/DD by modification date (UTC)."""
    ctx.verbose = verbose
    ctx.dry_run = dry_run
    ctx.move = mv
    ctx.force = force
    ctx.workers = workers
    ctx.trash = trash

    if verbose:
        loglevel = logging.DEBUG
    else:
        loglevel = logging.INFO
    fmt = "'%(asctime)s %(levelname)s [%(filename)s:%(lineno)s - %(funcName)10s()]  %(message)s"
    logging.basicConfig(format=fmt, datefmt="%m/%d/%Y %I:%M:%S %p", level=loglevel)

    if trash and not mv:
        logger.warning("--trash has no effect without --mv")

    processor = Processor(source, target)
    try:
        entries = processor.prepare()
    except RunError as e:
        raise click.ClickException(str(e))

    with click.progressbar(length=len(entries), label="sorting") as bar:
        processor.on_progress = lambda result: bar.update(1)
        results = processor.dispatch(entries)

    report = aggregate(results)
    report.render()
    if not report.ok:
        raise click.ClickException(f"{len(report.failures)} entries failed")


if __name__ == "__main__":
    cli()
