# src/cli.py
import logging
from pathlib import Path
from typing import List, Optional

import typer

from googlehosts.hosts.backup_helper import restore_latest_backup
from googlehosts.hosts.config import BACKUP_DIR, HOSTS_PATH, V4_SOURCE_PATH, V6_SOURCE_PATH
from googlehosts.hosts.hosts_manager import InvalidOperationError, manage_hosts, parse_operations
from googlehosts.hosts.section_editor import MalformedSectionError
from googlehosts.logging_setup import setup_logging

logger = logging.getLogger("googlehosts.cli")

# One command, no subcommands: the action tokens are plain arguments so that
# `google-hosts update-v4 remove-v6` works in any order.

cli = typer.Typer(add_completion=False, help="Maintain the GoogleHosts sections of the system hosts file.")


def _usage(ctx: typer.Context) -> str:
    prog = ctx.find_root().info_name or "google-hosts"
    return f"Usage: {prog} [update-v4 | update-v6 | remove-v4 | remove-v6]"


@cli.command()
def main(
    ctx: typer.Context,
    actions: Optional[List[str]] = typer.Argument(
        None, help="Any of update-v4, update-v6, remove-v4, remove-v6.", show_default=False
    ),
    hosts_file: Path = typer.Option(HOSTS_PATH, "--hosts-file", help="Hosts file to edit."),
    v4_source: Path = typer.Option(V4_SOURCE_PATH, "--v4-source", help="File with the IPv4 entries."),
    v6_source: Path = typer.Option(V6_SOURCE_PATH, "--v6-source", help="File with the IPv6 entries."),
    backup: bool = typer.Option(False, "--backup", help="Back up the hosts file before writing."),
    backup_dir: Path = typer.Option(BACKUP_DIR, "--backup-dir", help="Where backups are kept."),
    restore: bool = typer.Option(False, "--restore", help="Restore the latest backup and exit."),
    dry_run: bool = typer.Option(False, "--dry-run", help="Print the result instead of writing it."),
    no_atomic: bool = typer.Option(False, "--no-atomic", help="Overwrite in place instead of rename."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging on stderr."),
) -> None:
    """Update or remove the IPv4/IPv6 GoogleHosts sections."""
    setup_logging("DEBUG" if verbose else "WARNING")
    tokens = actions or []

    if restore:
        if tokens:
            typer.echo("--restore cannot be combined with other actions", err=True)
            raise typer.Exit(code=2)
        try:
            restored = restore_latest_backup(hosts_file, backup_dir)
        except OSError as exc:
            logger.error("Restore failed: %s", exc)
            typer.echo(f"Error: {exc}", err=True)
            raise typer.Exit(code=1)
        if restored is None:
            typer.echo(f"No backups found in {backup_dir}", err=True)
            raise typer.Exit(code=1)
        typer.echo(f"✅ Restored {hosts_file} from {restored}")
        return

    if not tokens:
        typer.echo(_usage(ctx), err=True)
        return

    try:
        operations = parse_operations(tokens)
    except InvalidOperationError as exc:
        typer.echo(str(exc), err=True)
        typer.echo(_usage(ctx), err=True)
        return

    try:
        result = manage_hosts(
            operations,
            hosts_path=hosts_file,
            v4_path=v4_source,
            v6_path=v6_source,
            backup_dir=backup_dir if backup else None,
            dry_run=dry_run,
            atomic=not no_atomic,
        )
    except (OSError, UnicodeDecodeError, MalformedSectionError) as exc:
        # Undecodable input counts as an unreadable file.
        logger.error("Editing %s failed: %s", hosts_file, exc)
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1)

    if dry_run:
        for line in result:
            typer.echo(line)
        return
    typer.echo(f"✅ {hosts_file}: {', '.join(op.value for op in operations)}")


if __name__ == "__main__":
    cli()
