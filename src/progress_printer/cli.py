"""Command-line interface for progress-printer."""
import click
import logging
import sys
import time
from pathlib import Path
from progress_printer.config import Config, ConfigError
from progress_printer.factory import printers
from progress_printer.formatting import format_duration
from progress_printer.printer import DEFAULT_EVERY


@click.group()
@click.option('--verbose', '-v', is_flag=True, help='Log debug messages to stderr')
def main(verbose):
    """Print the progress of long-running work."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)


@main.command()
@click.argument('file', type=click.File('r'), default='-')
@click.option('--total', type=click.IntRange(min=0), help='Expected number of lines')
@click.option('--every', type=click.IntRange(min=1), help=f'Print every N lines (default {DEFAULT_EVERY})')
@click.option('--name', help='Label prefixed to every line')
@click.option('--config', type=click.Path(exists=True), help='YAML file with printer defaults')
def count(file, total, every, name, config):
    """Count lines of FILE (default stdin), reporting progress."""
    try:
        options = Config.from_file(Path(config)).printer_options() if config else {}
    except ConfigError as e:
        click.echo(f"ERROR: {e}", err=True)
        sys.exit(1)

    # Command-line options win over the config file
    if every is not None:
        options['every'] = every
    if name is not None:
        options['name'] = name

    printer = printers.create(total=total, **options)
    try:
        for _ in printer.track(file):
            pass
    except KeyboardInterrupt:
        click.echo("\nCounting interrupted by user", err=True)
        sys.exit(1)


@main.command()
@click.argument('seconds', type=click.FloatRange(min=0))
def duration(seconds):
    """Format SECONDS as a compact duration such as 1h2m3s."""
    click.echo(format_duration(seconds))


@main.command()
@click.option('--total', type=click.IntRange(min=0), default=250, help='Number of steps')
@click.option('--every', type=click.IntRange(min=1), default=DEFAULT_EVERY, help='Print every N steps')
@click.option('--name', default='Counting', help='Label prefixed to every line')
@click.option('--delay', type=click.FloatRange(min=0), default=0.0, help='Seconds to sleep per step')
def demo(total, every, name, delay):
    """Simulate a loop to show what the output looks like."""
    def work(printer):
        for _ in range(total):
            if delay:
                time.sleep(delay)
            printer.increment()

    printers.wrap(work, total=total, every=every, name=name)


if __name__ == '__main__':
    main()
