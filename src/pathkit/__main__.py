"""CLI entry point for pathkit.

Prints the results of the pure path algorithms so they can be
checked from a shell. Logging goes to stderr; results go to stdout.
"""

from pathlib import Path

import click

from pathkit import __version__
from pathkit.config.models import Config

config_option = click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, path_type=Path),
    help="Path to configuration file",
)


def _load(config: Path | None) -> Config:
    from pathkit.config.loader import load_config
    from pathkit.utils.logging import configure_logging

    cfg = load_config(config)
    configure_logging(cfg.logging)
    return cfg


@click.group()
@click.version_option(version=__version__)
def cli() -> None:
    """pathkit path manipulation tools.

    Split, join and normalize paths using os.path style rules
    with a configurable separator.
    """
    pass


@cli.command()
@click.argument("paths", nargs=-1, required=True)
@config_option
def normpath(paths: tuple[str, ...], config: Path | None) -> None:
    """Normalize each PATH."""
    from pathkit.paths.algorithms import normpath as _normpath

    cfg = _load(config)
    for path in paths:
        click.echo(_normpath(path, policy=cfg.paths))


@cli.command()
@click.argument("path")
@config_option
def split(path: str, config: Path | None) -> None:
    """Print the directory and name of PATH, tab separated."""
    from pathkit.paths.algorithms import split as _split

    cfg = _load(config)
    head, tail = _split(path, policy=cfg.paths)
    click.echo(f"{head}\t{tail}")


@cli.command()
@click.argument("path")
@config_option
def splitext(path: str, config: Path | None) -> None:
    """Print the root and extension of PATH, tab separated."""
    from pathkit.paths.algorithms import splitext as _splitext

    _load(config)
    root, ext = _splitext(path)
    click.echo(f"{root}\t{ext}")


@cli.command()
@click.argument("path")
@config_option
def abspath(path: str, config: Path | None) -> None:
    """Resolve PATH against the working directory."""
    from pathkit.paths.local import Path as FsPath

    cfg = _load(config)
    click.echo(FsPath(path, policy=cfg.paths).absolute())


@cli.command()
@click.argument("path")
@config_option
def parts(path: str, config: Path | None) -> None:
    """Print the components of PATH, one per line."""
    from pathkit.paths.pure import PurePath

    cfg = _load(config)
    for part in PurePath(path, policy=cfg.paths).parts:
        click.echo(part)


@cli.command()
@click.argument("segments", nargs=-1, required=True)
@config_option
def join(segments: tuple[str, ...], config: Path | None) -> None:
    """Join SEGMENTS into one path."""
    from pathkit.paths.algorithms import join as _join

    cfg = _load(config)
    click.echo(_join(segments, policy=cfg.paths))


@cli.command()
@config_option
def tempdir(config: Path | None) -> None:
    """Print the directory used for temporary files."""
    from pathkit.services.tempdir import gettempdir

    cfg = _load(config)
    click.echo(gettempdir(cfg.tempdir))


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
