import logging
import typer
from typing import Optional
from typing_extensions import Annotated

from . import incbeta, normal, students_t
from .error import StatFuncError

logger = logging.getLogger(__name__)

## negative numbers are arguments, not options
NUMERIC = {"ignore_unknown_options": True}

cli_app = typer.Typer(help="statfunc: Beta, normal and Student's-t special functions",no_args_is_help=True,add_completion=False)

def report(fn, *args, **kwargs):
	try:
		value = fn(*args, **kwargs)
	except StatFuncError as e:
		logger.debug('%s%r failed: %s', fn.__name__, args, e)
		typer.echo(f'Error: {e}', err=True)
		raise typer.Exit(code=1)
	typer.echo(repr(value))

@cli_app.callback()
def main(
		verbose: Annotated[bool, typer.Option("--verbose","-v",help="Debug logging")] = False,
	):
	if verbose:
		logging.basicConfig(level=logging.DEBUG, format='%(levelname)s %(name)s: %(message)s')

@cli_app.command(help="Log of the Beta function, ln B(p,q)", context_settings=NUMERIC)
def lbeta(
		p: Annotated[float, typer.Argument(help="Shape parameter p > 0")],
		q: Annotated[float, typer.Argument(help="Shape parameter q > 0")],
	):
	report(incbeta.lbeta, p, q)

@cli_app.command(help="Beta function, B(p,q)", context_settings=NUMERIC)
def beta(
		p: Annotated[float, typer.Argument(help="Shape parameter p > 0")],
		q: Annotated[float, typer.Argument(help="Shape parameter q > 0")],
	):
	report(incbeta.beta, p, q)

@cli_app.command(help="Incomplete Beta function ratio, I_x(p,q)", context_settings=NUMERIC)
def betain(
		p: Annotated[float, typer.Argument(help="Shape parameter p > 0")],
		q: Annotated[float, typer.Argument(help="Shape parameter q > 0")],
		x: Annotated[float, typer.Argument(help="Argument in [0,1]")],
		lnbeta: Annotated[Optional[float], typer.Option(help="Precomputed ln B(p,q); trusted as given", rich_help_panel="Options")] = None,
		max_iter: Annotated[Optional[int], typer.Option(help="Hard iteration ceiling (default scales with p, q and x)", rich_help_panel="Options", min=1)] = None,
	):
	report(incbeta.betain, p, q, x, lnbeta, max_iter)

@cli_app.command(help="Standard normal CDF", context_settings=NUMERIC)
def pnorm(
		z: Annotated[float, typer.Argument(help="Quantile")],
		upper: Annotated[bool, typer.Option("--upper",help="Upper tail, P(Z > z)", rich_help_panel="Options")] = False,
	):
	report(normal.pnorm, z, not upper)

@cli_app.command(help="Student's-t density", context_settings=NUMERIC)
def dt(
		t: Annotated[float, typer.Argument(help="Quantile")],
		v: Annotated[float, typer.Argument(help="Degrees of freedom > 0")],
		log: Annotated[bool, typer.Option("--log",help="Log density", rich_help_panel="Options")] = False,
	):
	report(students_t.ldt if log else students_t.dt, t, v)

@cli_app.command(help="Student's-t CDF", context_settings=NUMERIC)
def pt(
		t: Annotated[float, typer.Argument(help="Quantile")],
		v: Annotated[float, typer.Argument(help="Degrees of freedom > 0")],
	):
	report(students_t.pt, t, v)

if __name__ == "__main__":
	cli_app()
