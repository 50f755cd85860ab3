""" Equilibrium pool sizes under a constant (or time-averaged) input.

n pools  : solve (A K) C = u b, a direct linear solve rather than inverting
           A K.
one pool : C = u * turnover_time

A K is invertible whenever A has a unit diagonal, non-positive off-diagonals
and every column passes on less than all of its decay. That is a
precondition of the parameter set, it isn't proven here; a numerically
degenerate system raises SingularSystemError instead of returning garbage.
"""

import logging
import numpy as np

from soilpools.errors import SingularSystemError
from soilpools.parameters import OnePoolParams

__author__  = "Martin De Kauwe"
__version__ = "1.0 (17.10.2026)"
__email__   = "mdekauwe@gmail.com"

logger = logging.getLogger(__name__)

# beyond this condition number the solve is numerically meaningless
MAX_CONDITION = 1.0 / np.finfo(float).eps


def solve_linear_steady_state(K, A, b, inputs, params=None):
    """ Solve (A K) C = u b for the steady-state pools.

    Parameters:
    -----------
    K : array, (n, n)
        decay matrix
    A : array, (n, n)
        transfer matrix
    b : array, (n,)
        allocation vector
    inputs : float
        constant, or time-averaged, input rate u
    params : dictionary, optional
        named parameters, attached to any error for diagnosis

    Returns:
    --------
    pools : array, (n,)
        steady-state pool sizes
    """
    return _solve(np.dot(A, K), inputs * np.asarray(b, dtype=float), params)

def pool_steady_state(params, inputs=None):
    """ Steady-state pools of an n-pool model.

    Parameters:
    -----------
    params : PoolModelParams
        model parameters
    inputs : float, optional
        input rate, defaults to the mean of the parameter set's input source

    Returns:
    --------
    pools : array, (n,)
        steady-state pool sizes, in pool order
    """
    if inputs is None:
        inputs = params.inputs.mean
    pools = _solve(params.system_matrix, inputs * params.allocation, params)
    logger.debug("Steady state for u=%g: %s", inputs,
                 ", ".join("%s=%g" % kv for kv in zip(params.pools, pools)))
    return pools

def one_pool_steady_state(params, inputs=None):
    """ Steady state of the one-pool model, C = u * turnover time """
    if inputs is None:
        inputs = params.inputs.mean
    return np.array([inputs * params.turnover_time])

def steady_state(params, inputs=None):
    """ Steady-state pool sizes of either model, in pool order """
    if isinstance(params, OnePoolParams):
        return one_pool_steady_state(params, inputs)
    return pool_steady_state(params, inputs)

def initial_state(params, inputs=None):
    """ State vector [cumulative respiration, pools...] seeded at steady state

    Cumulative respiration always starts from zero.
    """
    return np.concatenate(([0.0], steady_state(params, inputs)))

def _solve(matrix, rhs, params):
    diagnostics = params.to_dict() if hasattr(params, 'to_dict') else params

    with np.errstate(divide='ignore', invalid='ignore'):
        cond = np.linalg.cond(matrix)
    if (not np.isfinite(cond) or cond > MAX_CONDITION or
            np.linalg.matrix_rank(matrix) < matrix.shape[0]):
        raise SingularSystemError("Transfer-decay matrix is singular "
                                  "(condition number %g), check transfers "
                                  "for closed loops" % cond, diagnostics)
    try:
        pools = np.linalg.solve(matrix, rhs)
    except np.linalg.LinAlgError as e:
        raise SingularSystemError("Steady-state solve failed: %s" % e,
                                  diagnostics)
    if not np.all(np.isfinite(pools)):
        raise SingularSystemError("Steady-state solve gave non-finite pools",
                                  diagnostics)
    return pools
