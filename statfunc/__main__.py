from .cli import cli_app

cli_app(prog_name="statfunc")
