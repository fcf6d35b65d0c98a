import warnings
warnings.filterwarnings("ignore", category=UserWarning, module="numba")

import logging
import numba as nb
from math import log,exp,fabs,lgamma,nan,inf

from .error import InvalidBetaParameters, InvalidProbability, ConvergenceError

logger = logging.getLogger(__name__)

'''
Algorithm AS 63: The incomplete Beta integral
KL Majumder, GP Bhattacharjee, Applied Statistics 22(3), 1973, pp. 409-411

The series is summed on whichever tail keeps the argument on the stable side,
using Soper's reduction formula, and rescaled once in log space at the end.
'''

ACCURACY = 1.0e-14
MAX_ITERATIONS = 1000000
## the default ceiling grows with the work the series needs, roughly 32/cx terms
WORK_SCALE = 64.
CEILING_CAP = 4.0e18

## regimes of the Soper reduction index ns
DESCENDING = 1 ## ns > 0 : temp = qq - ai, ratio xx/cx
PIVOT = 0      ## ns == 0: temp = qq - ai, ratio switches to xx
ASCENDING = -1 ## ns < 0 : temp = psq, psq grows by one each step


def check_beta_params(p, q):
	if not (0.0 < p < inf and 0.0 < q < inf):
		raise InvalidBetaParameters()

@nb.njit(cache=True)
def _lbeta(p, q):
	return lgamma(p) + lgamma(q) - lgamma(p+q)

@nb.njit(cache=True)
def soper_regime(ns):
	if ns > 0:
		return DESCENDING
	elif ns == 0:
		return PIVOT
	return ASCENDING

@nb.njit(cache=True)
def _betain(p, q, x, lnbeta, max_iter, scaled):
	'''
	x strictly inside (0,1), p,q > 0. Returns (value, converged, iterations)

	With scaled, max_iter is only a floor and the ceiling is raised to
	WORK_SCALE*(p+q+1)/cx, so slowly converging but convergent series finish.
	'''

	## change tail if necessary
	psq = p + q
	if p < psq*x:
		xx = 1. - x
		cx = x
		pp = q
		qq = p
		flip = True
	else:
		xx = x
		cx = 1. - x
		pp = p
		qq = q
		flip = False

	term = 1.
	ai = 1.
	value = 1.
	ns = int(qq + cx*psq)
	rx = xx/cx

	if scaled:
		limit = min(WORK_SCALE*(psq+1.)/cx, CEILING_CAP)
		if limit > max_iter:
			max_iter = int(limit)

	## Soper reduction formula
	for iteration in range(1, max_iter+1):
		regime = soper_regime(ns)
		if regime == ASCENDING:
			temp = psq
			psq += 1.
		else:
			temp = qq - ai
			if regime == PIVOT:
				rx = xx

		term *= temp*rx/(pp+ai)
		value += term
		err = fabs(term)

		if err <= ACCURACY and err <= ACCURACY*value:
			value *= exp(pp*log(xx) + (qq-1.)*log(cx) - lnbeta)/pp
			if flip:
				value = 1. - value
			return value, True, iteration

		ai += 1.
		ns -= 1

	return nan, False, max_iter


def lbeta(p, q):
	"""ln B(p,q) = lgamma(p) + lgamma(q) - lgamma(p+q)"""
	p = float(p)
	q = float(q)
	check_beta_params(p, q)
	return _lbeta(p, q)

def beta(p, q):
	"""B(p,q)"""
	return exp(lbeta(p, q))

def betain(p, q, x, lnbeta=None, max_iter=None):
	"""Incomplete Beta function ratio I_x(p,q).

	Args:
		p, q: shape parameters, both > 0
		x: argument in [0,1]
		lnbeta: ln B(p,q). Computed when None; a supplied value is assumed to be correct.
		max_iter: hard iteration ceiling. When None the ceiling scales with p+q and
			the distance of the working tail from 1, never below MAX_ITERATIONS.

	Raises:
		InvalidBetaParameters, InvalidProbability, ConvergenceError
	"""
	p = float(p)
	q = float(q)
	x = float(x)
	check_beta_params(p, q)
	if not (0.0 <= x <= 1.0):
		raise InvalidProbability()
	if x == 0.0 or x == 1.0:
		return x

	if lnbeta is None:
		lnbeta = _lbeta(p, q)
	if max_iter is None:
		value, converged, iterations = _betain(p, q, x, float(lnbeta), int(MAX_ITERATIONS), True)
	else:
		value, converged, iterations = _betain(p, q, x, float(lnbeta), int(max_iter), False)
	if not converged:
		logger.warning('betain(%r, %r, %r) did not converge in %d iterations', p, q, x, iterations)
		raise ConvergenceError(p, q, x, iterations)

	logger.debug('betain(%r, %r, %r): %s tail, %d iterations', p, q, x, 'upper' if p < (p+q)*x else 'lower', iterations)
	return value

## three or four argument form, same as betain
beta_inc = betain
