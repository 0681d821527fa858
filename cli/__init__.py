import click


from cli.import_receipts import import_receipts


@click.group()
@click.version_option(version="0.1.0")
@click.pass_context
def cli(ctx):
    pass


# Legacy receipts export
cli.add_command(import_receipts, "import_receipts")
