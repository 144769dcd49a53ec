"""finpro CLI entry point."""

import click

from finpro import __version__


@click.group()
@click.version_option(version=__version__, package_name="finpro")
@click.option("--config", "config_file", type=click.Path(dir_okay=False), default=None, help="YAML or JSON config file.")
@click.option("--log-level", default=None, help="Override the configured log level (DEBUG, INFO, WARNING...).")
@click.pass_context
def main(ctx: click.Context, config_file: str | None, log_level: str | None) -> None:
    """Finpro: portfolio analytics for your personal-finance dashboard."""
    from finpro.core.cli.common import init_logging, load_config

    config = load_config(config_file)
    init_logging(config, log_level)
    ctx.obj = config


from .demo_cmd import demo_snapshot
from .project_cmd import project
from .report_cmd import report

main.add_command(report)
main.add_command(project)
main.add_command(demo_snapshot)
