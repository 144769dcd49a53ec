"""finpro demo-snapshot: write the demonstration dataset to a file."""

from __future__ import annotations

import click


@click.command("demo-snapshot")
@click.argument("path", default="snapshot.yaml", type=click.Path(dir_okay=False))
def demo_snapshot(path: str) -> None:
    """Write the demonstration snapshot as YAML or JSON (by extension)."""
    from finpro.core.exceptions import FileIOError
    from finpro.financial.snapshot import DEMO_SNAPSHOT, save_snapshot

    try:
        save_snapshot(DEMO_SNAPSHOT, path)
    except FileIOError as e:
        raise click.ClickException(str(e)) from e
    click.echo(f"Wrote demo snapshot to {path}")
