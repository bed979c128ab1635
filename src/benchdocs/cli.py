from pathlib import Path
from typing import Callable, Optional

import git.exc
import typer
import yaml

from .changelog.github import ChangelogDownloadError
from .config import Settings, load_settings
from .logging import get_logger
from .runner import DocumentationRunner, MissingTokenError
from .versions import VersionHistoryError, load_version_history

app = typer.Typer(help="benchdocs – changelog and documentation site builder", no_args_is_help=True)

DEFAULT_CONFIG = Path("build") / "docs.yml"

RootOption = typer.Option(None, "--root", "-r", file_okay=False, help="Repository root directory (default: from the settings file, else the current directory)")
ConfigOption = typer.Option(None, "--config", "-c", dir_okay=False, help="Settings file (default: <root>/build/docs.yml)")
StableOption = typer.Option(False, "--stable", help="Build docs for a stable release (dated footer)")
CurrentVersionOption = typer.Option(None, "--current-version", help="Override the version being prepared")


def _load_settings(
    root: Optional[Path],
    config: Optional[Path],
    stable: bool,
    current_version: Optional[str],
) -> Settings:
    config_path = config if config is not None else (root or Path(".")) / DEFAULT_CONFIG
    overrides = {
        "root_dir": root,
        "stable": True if stable else None,
        "current_version": current_version,
    }
    if config_path.exists():
        return load_settings(config_path, **overrides)
    if config is not None:
        raise ValueError(f"Settings file does not exist: {config_path}")
    return Settings(
        root_dir=root or Path("."),
        stable=stable,
        current_version=current_version or "",
    )


def _run(
    step: Callable[[DocumentationRunner], int],
    root: Optional[Path],
    config: Optional[Path],
    stable: bool,
    current_version: Optional[str],
) -> None:
    logger = get_logger(__name__)

    try:
        settings = _load_settings(root, config, stable, current_version)
        history = load_version_history(
            settings.resolve_versions_file(),
            settings.current_version,
            settings.first_commit,
        )
    except (ValueError, yaml.YAMLError, VersionHistoryError) as exc:
        logger.error(f"Invalid build configuration: {exc}")
        raise typer.Exit(code=2) from exc

    runner = DocumentationRunner(settings, history)
    try:
        count = step(runner)
    except MissingTokenError as exc:
        logger.error(str(exc))
        raise typer.Exit(code=1) from exc
    except ChangelogDownloadError as exc:
        logger.error(f"Failed to download changelog: {exc}")
        raise typer.Exit(code=1) from exc
    except git.exc.GitCommandError as exc:
        logger.error(f"Failed to check out changelog details: {exc}")
        raise typer.Exit(code=1) from exc
    except ValueError as exc:
        logger.error(f"Invalid documentation input: {exc}")
        raise typer.Exit(code=2) from exc

    typer.echo(f"Done: {count} files written under {settings.root_dir}")


@app.command()
def update(
    depth: int = typer.Option(-1, "--depth", help="0: all stable versions, N: last N stable versions, <0: current only"),
    root: Optional[Path] = RootOption,
    config: Optional[Path] = ConfigOption,
    stable: bool = StableOption,
    current_version: Optional[str] = CurrentVersionOption,
) -> None:
    """Refresh the current footer and download changelog details from GitHub."""
    _run(lambda runner: len(runner.update(depth=depth)), root, config, stable, current_version)


@app.command()
def prepare(
    root: Optional[Path] = RootOption,
    config: Optional[Path] = ConfigOption,
    stable: bool = StableOption,
    current_version: Optional[str] = CurrentVersionOption,
) -> None:
    """Assemble release pages, changelog index, full changelog and table of contents."""
    _run(lambda runner: len(runner.prepare()), root, config, stable, current_version)


@app.command()
def build(
    root: Optional[Path] = RootOption,
    config: Optional[Path] = ConfigOption,
    stable: bool = StableOption,
    current_version: Optional[str] = CurrentVersionOption,
) -> None:
    """Build the documentation site and write redirect stubs."""
    _run(lambda runner: len(runner.build()), root, config, stable, current_version)


@app.command(name="all")
def run_all(
    depth: int = typer.Option(-1, "--depth", help="0: all stable versions, N: last N stable versions, <0: current only"),
    root: Optional[Path] = RootOption,
    config: Optional[Path] = ConfigOption,
    stable: bool = StableOption,
    current_version: Optional[str] = CurrentVersionOption,
) -> None:
    """Run update, prepare and build in sequence."""
    def steps(runner: DocumentationRunner) -> int:
        written = runner.update(depth=depth)
        written += runner.prepare()
        written += runner.build()
        return len(written)

    _run(steps, root, config, stable, current_version)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
