"""
statfunc - log-beta, incomplete beta ratio, normal CDF and Student's-t functions
"""

__title__ = "statfunc"
__version__ = "0.2.0"
__description__ = "statfunc - double precision statistical special functions (beta, normal, Student's-t)."
__author__ = "Simon C Heath"
__license__ = "LGPLv3"
__url__ = "https://github.com/statfunc/statfunc"

import logging
logging.getLogger(__name__).addHandler(logging.NullHandler())

from .error import StatFuncError, InvalidBetaParameters, InvalidProbability, InvalidStudentsTParameter, ConvergenceError
from .incbeta import lbeta, beta, betain, beta_inc
from .normal import pnorm
from .students_t import StudentsT, dt, ldt, pt
