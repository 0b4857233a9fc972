"""
Unified CLI entrypoint for the inRiver packager
Uses click for modular subcommands
"""
import sys

import click
from tabulate import tabulate

from inriver_packager.core.config_parsing import ConfigParser, DEFAULT_SETTINGS
from inriver_packager.core.logging import LOG_LEVELS, LoggingManager
from inriver_packager.modules.host_command import ConsoleReporter, DirectorySelection, PackageCommand
from inriver_packager.modules.packaging import NOTHING_TO_PACK, MISSING_DEBUG_DIR, Packager


@click.group()
@click.option('--config', 'config_path', type=click.Path(exists=True, dir_okay=False),
              default=None, help='YAML, INI or JSON settings file')
@click.option('--log-level', default=None, type=click.Choice(LOG_LEVELS, case_sensitive=False),
              help='Minimum level written to the console and log file')
@click.option('--log-file', default=None, type=click.Path(dir_okay=False), help='Also write logs to this file')
@click.pass_context
def cli(ctx, config_path, log_level, log_file):
    """inRiver packager CLI group."""
    settings = dict(DEFAULT_SETTINGS)
    if config_path:
        try:
            settings = ConfigParser(config_path).settings()
        except (ValueError, OSError) as e:
            raise click.BadParameter(str(e), param_hint='--config')
    if log_level:
        settings['log_level'] = log_level
    if log_file:
        settings['log_file'] = log_file
    manager = LoggingManager(str(settings['log_level']), settings['log_file'])
    manager.setup()
    ctx.obj = manager


@cli.command()
@click.argument('project')
@click.pass_obj
def package(manager, project):
    """Zip the bin/Debug output of PROJECT (a project file or its folder)."""
    command = PackageCommand(DirectorySelection(project), ConsoleReporter(), logger=manager)
    outcome = command.execute()
    if not outcome.ok:
        sys.exit(1)


@cli.command()
@click.argument('project')
@click.pass_obj
def files(manager, project):
    """List the files PROJECT's package would contain."""
    project_path = DirectorySelection(project).current_project_path()
    if project_path is None:
        raise click.BadParameter(f"{project} is not a project", param_hint='PROJECT')
    packager = Packager(manager)
    request = packager.prepare(project_path)
    if not request.output_directory.is_dir():
        click.echo(MISSING_DEBUG_DIR)
        return
    collected = packager.collect_files(request.output_directory)
    if not collected:
        click.echo(NOTHING_TO_PACK)
        return
    table_data = [[p.name, p.suffix.lower(), p.stat().st_size] for p in collected]
    click.echo(tabulate(table_data, headers=["File", "Type", "Bytes"], tablefmt="github"))
    click.echo(f"Archive: {request.zip_path}")


if __name__ == '__main__':
    cli()
