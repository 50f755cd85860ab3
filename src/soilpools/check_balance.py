#!/usr/bin/env python
""" Check the models are balancing carbon """

import math
import sys

from soilpools.errors import ConservationViolationError
from soilpools.utilities import float_eq

__author__  = "Martin De Kauwe"
__version__ = "1.0 (01.07.2013)"
__email__   = "mdekauwe@gmail.com"

EPS = sys.float_info.epsilon

# rounding allowance per derivative, in units of the gross decay flux
ROUNDING_ULPS = 8.0


def check_carbon_balance(time, inputs, derivs, rel_tol, scale=0.0):
    """ Every unit of carbon entering must either be respired or stored.

    dCO2/dt + sum(dPools/dt) == u(t), which holds by construction, so a
    failure here means the derivative calculation or the parameter set has
    been corrupted rather than anything about the model itself. Zero-input
    (incubation) evaluations can't be checked against a relative tolerance
    and are skipped.

    The error is taken relative to u(t). Each pool derivative also carries
    rounding error of the order of its own outflow, which can swamp a small
    input (e.g. the trough of a seasonal cycle), so an error within a few
    ulps of the gross decay flux is let through as well.

    Parameters:
    -----------
    time : float
        simulation time of the evaluation
    inputs : float
        carbon input u(t)
    derivs : array
        [dCO2/dt, dPool_1/dt, ..., dPool_n/dt]
    rel_tol : float
        relative tolerance on the balance
    scale : float
        gross decay flux, sum of |outflow| over the pools
    """
    if float_eq(inputs, 0.0):
        return
    outflow = math.fsum(derivs)
    error = math.fabs(inputs - outflow)
    rel_error = error / math.fabs(inputs)
    slack = ROUNDING_ULPS * EPS * len(derivs) * math.fabs(scale)
    if rel_error > rel_tol and error > slack:
        raise ConservationViolationError(time, inputs, outflow, rel_error,
                                         rel_tol)
