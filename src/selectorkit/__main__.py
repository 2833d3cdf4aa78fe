from selectorkit.cli.main import cli

cli()
