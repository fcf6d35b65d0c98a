class StatFuncError(ValueError):
	"""Base class for everything statfunc raises."""
	message = 'Invalid argument'

	def __init__(self, message=None):
		super().__init__(self.message if message is None else message)

class InvalidBetaParameters(StatFuncError):
	message = 'Invalid parameters for beta function (alpha and beta must be > 0)'

class InvalidProbability(StatFuncError):
	message = 'Invalid probability parameter (must be between 0 and 1)'

class InvalidStudentsTParameter(StatFuncError):
	message = 'Invalid degrees of freedom parameter for Students-t distribution (must be > 0)'

class ConvergenceError(StatFuncError, ArithmeticError):
	"""The incomplete beta series did not converge within the iteration ceiling."""
	message = 'Incomplete beta series failed to converge'

	def __init__(self, p, q, x, iterations, message=None):
		self.p = p
		self.q = q
		self.x = x
		self.iterations = iterations
		if message is None:
			message = f'{self.message}: p={p!r}, q={q!r}, x={x!r} after {iterations} iterations'
		super().__init__(message)
