import click
from . import __version__
from .commands import *
from .usage import show_usage

PASSTHROUGH_OPTIONS = {"--help", "--version"}


class SearchGroup(click.Group):
    """Command group that answers misuse with the short usage text and exit status 1."""

    def parse_args(self, ctx, args):
        if args and args[0] in PASSTHROUGH_OPTIONS:
            return super().parse_args(ctx, args)
        if len(args) < 2 or args[0] not in self.commands:
            show_usage(ctx)
            ctx.exit(1)
        return super().parse_args(ctx, args)


@click.group(cls=SearchGroup, name="sg")
@click.version_option(version=__version__, prog_name="gemsearch")
def cli():
    """Search RubyGems from the command line."""

cli.add_command(search)

if __name__ == '__main__':
    try:
        cli()
    except Exception as e:
        click.echo(f"An unexpected error occurred: {e}", err=True)
        click.echo("Please report this issue to the gemsearch developers.", err=True)
