import click


def show_usage(ctx):
    """Print the short usage text on stdout."""
    click.echo(f"Usage of {ctx.info_name}:")
    click.echo(f"    {ctx.info_name} search gem [gem ...]")
    click.echo(f"Run '{ctx.info_name} search --help' for the search options.")
