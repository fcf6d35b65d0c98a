import warnings
warnings.filterwarnings("ignore", category=UserWarning, module="numba")

import logging
import numba as nb
from math import log,exp,lgamma,isnan,nan,inf,pi

from .incbeta import lbeta, betain
from .error import InvalidStudentsTParameter

logger = logging.getLogger(__name__)


def check_students_t_param(v):
	if not 0.0 < v < inf:
		raise InvalidStudentsTParameter()

@nb.njit(cache=True)
def _ldt(t, v, konst):
	return konst - 0.5*(v+1.)*log(1. + t*t/v)

def _pt(t, v, lnbeta):
	if isnan(t):
		return nan
	x = v/(v + t*t)
	z = 0.5*betain(0.5*v, 0.5, x, lnbeta)
	if t < 0.:
		return z
	return 1. - z


class StudentsT(object):
	"""Student's t distribution with v degrees of freedom.

	ln B(v/2,1/2) and the log normalizing constant are computed once here, so
	repeated dt/ldt/pt queries for the same v skip the log-gamma calls.
	Instances are read-only.
	"""
	__slots__ = ('_v', '_konst', '_lnbeta')

	def __init__(self, v):
		v = float(v)
		check_students_t_param(v)
		lnbeta = lbeta(0.5*v, 0.5)
		object.__setattr__(self, '_v', v)
		object.__setattr__(self, '_lnbeta', lnbeta)
		object.__setattr__(self, '_konst', -(0.5*log(v) + lnbeta))
		logger.debug('StudentsT(v=%r): lnbeta=%r konst=%r', v, self._lnbeta, self._konst)

	def __setattr__(self, name, value):
		raise AttributeError(f'{type(self).__name__} is read-only')

	@property
	def v(self):
		return self._v

	@property
	def konst(self):
		return self._konst

	@property
	def lnbeta(self):
		return self._lnbeta

	def ldt(self, t):
		"""log density at t"""
		return _ldt(float(t), self._v, self._konst)

	def dt(self, t):
		"""density at t"""
		return exp(self.ldt(t))

	def pt(self, t):
		"""P(T <= t)"""
		return _pt(float(t), self._v, self._lnbeta)

	def __repr__(self):
		return f'StudentsT(v={self._v!r})'

	def __eq__(self, other):
		if not isinstance(other, StudentsT):
			return NotImplemented
		return self._v == other._v

	def __hash__(self):
		return hash((StudentsT, self._v))


## One-off versions; constants are recomputed on every call

def ldt(t, v):
	v = float(v)
	check_students_t_param(v)
	konst = lgamma(0.5*(v+1.)) - lgamma(0.5*v) - 0.5*log(v*pi)
	return _ldt(float(t), v, konst)

def dt(t, v):
	return exp(ldt(t, v))

def pt(t, v):
	v = float(v)
	check_students_t_param(v)
	return _pt(float(t), v, None)
