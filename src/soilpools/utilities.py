""" Logic tests for floating point numbers and other misc helpers """

import math

__author__  = "Martin De Kauwe"
__version__ = "1.0 (09.03.2011)"
__email__   = "mdekauwe@gmail.com"


class Bunch(object):
    """ group a few variables together

    advantage is that it avoids the need for dictionary syntax, taken from the
    python cookbook; although nothing to guard against python reserved words

    >>> run = Bunch(pools=df, one_pool=df1, proxy_turnover_time=tau)
    """
    def __init__(self, **kwds):
        self.__dict__.update(kwds)

    def __repr__(self):
        return "Bunch(%s)" % ", ".join(sorted(self.__dict__))


def float_eq(arg1, arg2, tol=1E-14):
    """arg1 == arg2"""
    return math.fabs(arg1 - arg2) < tol + tol * math.fabs(arg2)

def float_lt(arg1, arg2, tol=1E-14):
    """arg1 < arg2"""
    return arg2 - arg1 > math.fabs(arg1) * tol

def float_le(arg1, arg2, tol=1E-14):
    """arg1 <= arg2"""
    return not float_gt(arg1, arg2, tol)

def float_gt(arg1, arg2, tol=1E-14):
    """arg1 > arg2"""
    return arg1 - arg2 > math.fabs(arg1) * tol
