"""
Command line interface for the changelog_generator tool.

This module defines the ``main`` function which is used as the entry
point when executing the ``generate-changelog`` command. It runs the
pipeline once: look up the latest tag, read the commits since that tag,
parse and render them, and merge the new section into the changelog.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import click

from changelog_generator import __version__
from changelog_generator.changelog.merger import merge_section
from changelog_generator.changelog.renderer import render_section
from changelog_generator.config.loader import ConfigError, load_config
from changelog_generator.grouping.commit_parser import parse_commits
from changelog_generator.vcs.git_client import GitClient, GitError

# Create a module-level logger. Attach a null handler and disable
# propagation to avoid logging errors when the root logger's stream is
# closed (such as during unit tests). When logging is configured by
# the CLI, root handlers will be added and messages will propagate.
logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())
    logger.propagate = False


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------
EXIT_SUCCESS = 0
EXIT_GENERIC_ERROR = 1
EXIT_INVALID_USAGE = 2
EXIT_NO_REPO = 3
EXIT_VCS_FAILURE = 4
EXIT_CONFIG_ERROR = 5


# ---------------------------------------------------------------------------
# Status display utilities
# ---------------------------------------------------------------------------

def print_info(message: str, indent: int = 0):
    """Print an info message."""
    prefix = "  " * indent
    click.echo(f"{prefix}ℹ {message}", err=False)


def print_success(message: str, indent: int = 0):
    """Print a success message."""
    prefix = "  " * indent
    click.echo(f"{prefix}✓ {message}", err=False)


def print_warning(message: str, indent: int = 0):
    """Print a warning message."""
    prefix = "  " * indent
    click.echo(f"{prefix}⚠ {message}", err=False)


def print_error(message: str, indent: int = 0):
    """Print an error message."""
    prefix = "  " * indent
    click.echo(f"{prefix}✗ {message}", err=True)


def set_package_logging(enabled: bool) -> None:
    """Route the package's module loggers to the root handlers, or not.

    Module loggers start with propagation disabled so the library stays
    silent. Only ``--verbose`` turns it on; otherwise the console shows the
    CLI's own status lines and nothing else.
    """
    for name, obj in list(logging.root.manager.loggerDict.items()):
        if name.split(".")[0] == "changelog_generator" and isinstance(obj, logging.Logger):
            obj.propagate = enabled


def _plural(count: int, word: str) -> str:
    return f"{count} {word}{'s' if count != 1 else ''}"


# ---------------------------------------------------------------------------
# Core functionality
# ---------------------------------------------------------------------------

def detect_repo(start_dir: Path) -> Path:
    """Return the root of the Git repository containing ``start_dir``.

    Raises
    ------
    click.exceptions.Exit
        With code EXIT_NO_REPO if no repository is found.
    """
    repo_root = GitClient.find_repo_root(start_dir)
    if repo_root is None:
        print_error("No Git repository found in current directory or parent directories.")
        raise click.exceptions.Exit(EXIT_NO_REPO)
    logger.debug("Found Git repository at: %s", repo_root)
    return repo_root


@click.command()
@click.option(
    "--changelog",
    "changelog",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Changelog file to update (default: CHANGELOG.md in the current directory).",
)
@click.option("--dry-run", is_flag=True, help="Print the new section without writing the changelog.")
@click.option("--verbose", is_flag=True, help="Enable verbose (debug) output.")
@click.version_option(version=__version__, prog_name="generate-changelog")
def main(changelog: Optional[Path], dry_run: bool, verbose: bool) -> None:
    """📝 Generate a changelog section from the commits since the last tag.

    Commits following the Conventional Commits style (feat, fix, docs, ...)
    are grouped by type; everything else is listed under "Other Changes".
    """
    # Configure logging. Use force=True to ensure handlers are reconfigured
    # on subsequent invocations (important for tests).
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
        force=True,
    )
    set_package_logging(verbose)

    ctx = click.get_current_context(silent=True)

    try:
        cwd = Path.cwd()
        repo_root = detect_repo(cwd)

        try:
            config = load_config(repo_root)
        except ConfigError as exc:
            print_error(f"Configuration error: {exc}")
            raise click.exceptions.Exit(EXIT_CONFIG_ERROR)

        client = GitClient(repo_root)

        try:
            last_tag = client.latest_tag()
            click.echo(f"🔍 Last tag: {last_tag or 'None (Initial commit)'}")
            commits = client.commits_since(last_tag)
        except GitError as exc:
            print_error(f"Error reading git log: {exc}")
            raise click.exceptions.Exit(EXIT_VCS_FAILURE)

        click.echo(f"📝 Found {_plural(len(commits), 'commit')} since last tag")

        if not commits:
            print_info("No commits found. Nothing to update.")
            raise click.exceptions.Exit(EXIT_SUCCESS)

        section = render_section(parse_commits(commits), label=config["unreleased_label"])
        changelog_path = changelog if changelog is not None else cwd / config["changelog_file"]

        result = merge_section(
            section,
            changelog_path,
            title=config["title"],
            description=config["description"],
            write=not dry_run,
        )

        if result.duplicate:
            print_warning("An entry for today already exists.")
            print_warning(
                "Please manually review duplications if running multiple times a day.",
                indent=1,
            )

        if dry_run:
            click.echo("")
            click.echo(section, nl=False)
            print_info(f"Dry run: {changelog_path} was not modified")
        elif result.created:
            print_success(f"Changelog created at {changelog_path}")
        else:
            print_success(f"Changelog updated at {changelog_path}")

        raise click.exceptions.Exit(EXIT_SUCCESS)

    except click.exceptions.Exit:
        # Click uses its own Exit exception; re-raise to let Click handle it
        raise
    except Exception as exc:
        # Filesystem and other unexpected failures are fatal
        logging.exception("Unhandled error: %s", exc)
        print_error(f"Unexpected error: {exc}")
        ctx.exit(EXIT_GENERIC_ERROR)
