""" Right-hand sides of the one-pool and n-pool linear decay models.

Both follow the calling convention of scipy's initial value solvers,
f(t, y, parms) -> dy/dt, with the state ordered

    y = [cumulative respiration, pool_1, ..., pool_n]

They hold no state and don't modify their arguments, so the integrator can
call them at any time, any number of times, in any order.

A flat dictionary of named parameters is accepted in place of a parameter
set, it is validated (and the matrices built) on every call though, so
build the parameter set once when integrating.
"""

import numpy as np

from soilpools.check_balance import check_carbon_balance
from soilpools.constants import ONE_POOL_REL_TOL, POOL_REL_TOL
from soilpools.parameters import OnePoolParams, PoolModelParams

__author__  = "Martin De Kauwe"
__version__ = "1.0 (17.10.2026)"
__email__   = "mdekauwe@gmail.com"


def one_pool_ode(t, y, parms, rel_tol=ONE_POOL_REL_TOL):
    """ One-pool first order soil carbon model with linear decay

        dCO2/dt  = C / tau
        dC/dt    = u(t) - C / tau

    Parameters:
    -----------
    t : float
        time
    y : array
        [cumulative respiration, soil carbon]
    parms : OnePoolParams or dictionary
        turnover time and input source
    rel_tol : float
        relative tolerance of the mass-balance check, which is only applied
        to static (time invariant) non-zero inputs

    Returns:
    --------
    dydt : array
        [respiration rate, change in soil carbon]
    """
    if not isinstance(parms, OnePoolParams):
        parms = OnePoolParams.from_dict(parms)
    if rel_tol is None:
        rel_tol = ONE_POOL_REL_TOL

    soil = y[1]
    u = parms.inputs(t)
    decay = soil / parms.turnover_time
    dydt = np.array([decay, u - decay])

    if parms.inputs.is_static:
        check_carbon_balance(t, u, dydt, rel_tol, scale=abs(decay))

    return dydt

def pool_ode(t, y, parms, rel_tol=POOL_REL_TOL):
    """ n-pool first order soil carbon model with linear decay

        flux      = A K C
        dC/dt     = u(t) b - flux
        dCO2/dt   = sum(flux)

    The columns of A pass part of each pool's decay on to other pools, so
    summing the net outflows over the pools leaves just what is respired.

    Parameters:
    -----------
    t : float
        time
    y : array
        [cumulative respiration, pool_1, ..., pool_n]
    parms : PoolModelParams or dictionary
        pool turnover times, transfers, allocation and input source. A
        dictionary is read with the five-pool names.
    rel_tol : float
        relative tolerance of the mass-balance check

    Returns:
    --------
    dydt : array
        [respiration rate, change in pool_1, ..., change in pool_n]
    """
    if not isinstance(parms, PoolModelParams):
        parms = PoolModelParams.from_dict(parms)
    if rel_tol is None:
        rel_tol = POOL_REL_TOL

    pools = np.asarray(y[1:], dtype=float)
    if pools.shape != (parms.n_pools,):
        raise ValueError("State has %d pools, the model has %d" %
                         (pools.size, parms.n_pools))

    u = parms.inputs(t)
    flux = np.dot(parms.system_matrix, pools)

    dydt = np.empty(parms.n_pools + 1)
    dydt[0] = flux.sum()
    dydt[1:] = u * parms.allocation - flux

    gross = np.sum(np.abs(np.diag(parms.decay_matrix) * pools))
    check_carbon_balance(t, u, dydt, rel_tol, scale=gross)

    return dydt

def model_ode(parms):
    """ RHS matching a parameter set """
    if isinstance(parms, OnePoolParams):
        return one_pool_ode
    return pool_ode
