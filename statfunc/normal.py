import warnings
warnings.filterwarnings("ignore", category=UserWarning, module="numba")

import numpy as np
import numba as nb
from math import exp,fabs,isinf,isnan

'''
Standard normal CDF

Rational Chebyshev approximations of W. J. Cody,
"Rational Chebyshev approximations for the error function",
Math. Comp. 23 (1969), pp. 631-638; arranged as in R's pnorm.

Three regions in |x|: a rational in x^2 near the centre, a rational in |x| out
to sqrt(32), and an asymptotic rational in 1/x^2 for the far tails.
'''

SPLIT = 0.67448975
M_SQRT_32 = 5.656854249492381
M_1_SQRT_2PI = 0.3989422804014327
EPS = np.finfo(np.float64).eps*0.5

## Region C is representable only on [LOWER_CUTOFF, UPPER_CUTOFF) for the lower tail
## (mirrored for the upper tail); outside it the tail probability underflows
LOWER_CUTOFF = -37.5193
UPPER_CUTOFF = 8.2924

## |x| <= SPLIT; (numerator, denominator) pairs in x^2
A = 0.065682337918207449113
AB = np.array([
	[2.2352520354606839287, 47.20258190468824187],
	[161.02823106855587881, 976.09855173777669322],
	[1067.6894854603709582, 10260.932208618978205],
	[18154.981253343561249, 45507.789335026729956],
])

## SPLIT < |x| <= sqrt(32); pairs in |x|
C = 1.0765576773720192317e-8
CD = np.array([
	[0.39894151208813466764, 22.266688044328115691],
	[8.8831497943883759412, 235.38790178262499861],
	[93.506656132177855979, 1519.377599407554805],
	[597.27027639480026226, 6485.558298266760755],
	[2494.5375852903726711, 18615.571640885098091],
	[6848.1904505362823326, 34900.952721145977266],
	[11602.651437647350124, 38912.003286093271411],
	[9842.7148383839780218, 19685.429676859990727],
])

## |x| > sqrt(32); pairs in 1/x^2
P = 0.02307344176494017303
PQ = np.array([
	[0.21589853405795699, 1.28426009614491121],
	[0.1274011611602473639, 0.468238212480865118],
	[0.022235277870649807, 0.0659881378689285515],
	[0.001421619193227893466, 0.00378239633202758244],
	[2.9112874951168792e-5, 7.29751555083966205e-5],
])


@nb.njit(cache=True)
def do_del(x, temp):
	## x = xsq + (x - xsq) with xsq holding four fractional bits, so
	## exp(-x^2/2) = exp(-xsq^2/2)*exp(-del/2) without squaring away precision
	xsq = np.trunc(x*16.)/16.
	dl = (x-xsq)*(x+xsq)
	return exp(-xsq*xsq/2. - dl/2.)*temp

@nb.njit(cache=True)
def swap_tail(x, p, lower_tail):
	if x < 0.:
		if lower_tail:
			return p
		return 1. - p
	if lower_tail:
		return 1. - p
	return p

@nb.njit(cache=True)
def horner(seed, coefs, z):
	## (num, den) over all but the last coefficient pair
	xnum = seed*z
	xden = z
	for i in range(coefs.shape[0]-1):
		xnum = (xnum + coefs[i,0])*z
		xden = (xden + coefs[i,1])*z
	return xnum, xden

@nb.njit(cache=True)
def _pnorm(x, lower_tail):
	y = fabs(x)

	if y <= SPLIT:
		if y > EPS:
			xnum, xden = horner(A, AB, x*x)
		else:
			xnum = 0.
			xden = 0.
		temp = x*(xnum + AB[3,0])/(xden + AB[3,1])
		if lower_tail:
			return 0.5 + temp
		return 0.5 - temp

	elif y <= M_SQRT_32:
		xnum, xden = horner(C, CD, y)
		temp = (xnum + CD[7,0])/(xden + CD[7,1])
		return swap_tail(x, do_del(y, temp), lower_tail)

	elif (lower_tail and LOWER_CUTOFF <= x < UPPER_CUTOFF) or (not lower_tail and -UPPER_CUTOFF <= x < -LOWER_CUTOFF):
		xsq = 1./(x*x)
		xnum, xden = horner(P, PQ, xsq)
		temp = (M_1_SQRT_2PI - xsq*(xnum + PQ[4,0])/(xden + PQ[4,1]))/y
		return swap_tail(x, do_del(x, temp), lower_tail)

	return swap_tail(x, 0., lower_tail)

@nb.njit(cache=True)
def _pnorm_total(z, lower_tail):
	if isinf(z):
		if z < 0.:
			return 0. if lower_tail else 1.
		return 1. if lower_tail else 0.
	if isnan(z):
		return z
	return _pnorm(z, lower_tail)


def pnorm(z, lower_tail=True):
	"""Standard normal CDF, P(Z <= z), or P(Z > z) when lower_tail is False.

	Defined for every double: +/-inf map to 0 or 1, NaN comes back as NaN.
	"""
	return _pnorm_total(float(z), bool(lower_tail))
