""" Reduce an n-pool model to an equivalent one-pool model.

The proxy turnover time is

    tau_proxy = sum((A K)^-1 b)

the total steady-state carbon per unit input. A one-pool model with
turnoverTime = tau_proxy and the same input u therefore holds exactly the
same total carbon at steady state as the full model, u * tau_proxy. The
transients differ: the full model relaxes along the decay modes of A K
(its eigenvalues), the proxy along a single exponential.
"""

import numpy as np

from soilpools.constants import FIVE_POOLS
from soilpools.matrices import build_matrices
from soilpools.parameters import OnePoolParams, PoolModelParams
from soilpools.steady_state import pool_steady_state, solve_linear_steady_state

__author__  = "Martin De Kauwe"
__version__ = "1.0 (17.10.2026)"
__email__   = "mdekauwe@gmail.com"


def proxy_turnover_time(params, pools=FIVE_POOLS):
    """ Aggregate turnover time of an n-pool model.

    Parameters:
    -----------
    params : PoolModelParams or dictionary
        n-pool parameter set, or the flat mapping of named parameters
    pools : sequence of strings
        pool names, only used when params is a mapping

    Returns:
    --------
    tau : float
        total steady-state carbon per unit input [time]
    """
    if isinstance(params, PoolModelParams):
        return float(np.sum(pool_steady_state(params, inputs=1.0)))

    K, A, b = build_matrices(params, pools)
    return float(np.sum(solve_linear_steady_state(K, A, b, 1.0,
                                                  params=params)))

def proxy_decay_rate(params, pools=FIVE_POOLS):
    """ 1 / tau_proxy """
    return 1.0 / proxy_turnover_time(params, pools)

def proxy_params(params):
    """ One-pool stand-in for an n-pool parameter set, same input source """
    return OnePoolParams(proxy_turnover_time(params), params.inputs)

def decay_modes(params):
    """ Eigenvalues of A K, slowest mode first.

    With no transfers between pools these are just the pool decay rates.
    Real for the usual donor-controlled pool structures; returned complex
    only if some mode oscillates.
    """
    modes = np.linalg.eigvals(params.system_matrix)
    if np.allclose(modes.imag, 0.0):
        modes = modes.real
    return np.sort_complex(modes) if np.iscomplexobj(modes) else np.sort(modes)

def characteristic_times(params):
    """ Relaxation timescales of the transient, 1 / Re(mode), longest first """
    return 1.0 / np.real(decay_modes(params))
