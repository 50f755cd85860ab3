""" Build the linear pool-transfer system from named parameters.

For n pools ordered fastest to slowest decay the model is

    dC/dt = u(t) b - A K C

K : decay matrix, diagonal of 1 / turnover time
A : transfer matrix, unit diagonal and A[i, j] = -(fraction of the carbon
    decaying out of pool j that moves into pool i). What a column doesn't
    pass on (1 - sum of its fractions) is respired as CO2.
b : allocation vector, the fraction of the input entering each pool.

Named parameters follow the convention

    turnoverTime_<pool>, input_to_<pool>, <from>_to_<to>
"""

import numpy as np

from soilpools.errors import MissingParameterError
from soilpools.constants import FIVE_POOLS

__author__  = "Martin De Kauwe"
__version__ = "1.0 (17.10.2026)"
__email__   = "mdekauwe@gmail.com"


def turnover_key(pool):
    return "turnoverTime_%s" % pool

def allocation_key(pool):
    return "input_to_%s" % pool

def transfer_key(source, sink):
    return "%s_to_%s" % (source, sink)

def required_keys(pools=FIVE_POOLS):
    """ Every named parameter an n-pool model needs, in a stable order """
    keys = [turnover_key(p) for p in pools]
    keys += [allocation_key(p) for p in pools]
    keys += [transfer_key(src, dst) for src in pools for dst in pools
             if src != dst]
    return keys

def check_keys(parms, keys):
    """ Raise MissingParameterError listing all keys absent from parms """
    missing = [key for key in keys if key not in parms or parms[key] is None]
    if missing:
        raise MissingParameterError(missing)

def build_decay_matrix(turnover_times):
    """ Diagonal matrix of decay rates, k = 1 / tau

    Parameters:
    -----------
    turnover_times : sequence of floats
        turnover time of each pool, in pool order

    Returns:
    --------
    K : array, (n, n)
        decay matrix
    """
    return np.diag(1.0 / np.asarray(turnover_times, dtype=float))

def build_transfer_matrix(pools, transfers):
    """ Transfer matrix A

    Parameters:
    -----------
    pools : sequence of strings
        pool names, in matrix order
    transfers : dictionary
        (source, sink) -> fraction of the decay of source passed to sink.
        Pairs that aren't listed don't exchange carbon.

    Returns:
    --------
    A : array, (n, n)
        unit diagonal, non-positive off-diagonal entries
    """
    n = len(pools)
    A = np.eye(n)
    for j, source in enumerate(pools):
        for i, sink in enumerate(pools):
            if i != j:
                A[i, j] = -transfers.get((source, sink), 0.0)
    return A

def build_allocation_vector(allocation):
    """ Column of input allocation fractions, in pool order """
    return np.asarray(allocation, dtype=float).reshape(-1)

def build_matrices(parms, pools=FIVE_POOLS):
    """ Construct K, A and b from a flat mapping of named parameters.

    Pure construction, values aren't range checked here (see
    PoolModelParams for the validated route).

    Parameters:
    -----------
    parms : dictionary
        turnoverTime_<pool>, input_to_<pool> and <from>_to_<to> for every
        ordered pair of distinct pools
    pools : sequence of strings
        pool names, fastest decaying first

    Returns:
    --------
    K : array, (n, n)
        decay matrix
    A : array, (n, n)
        transfer matrix
    b : array, (n,)
        allocation vector
    """
    check_keys(parms, required_keys(pools))

    K = build_decay_matrix([float(parms[turnover_key(p)]) for p in pools])
    transfers = dict(((src, dst), float(parms[transfer_key(src, dst)]))
                     for src in pools for dst in pools if src != dst)
    A = build_transfer_matrix(pools, transfers)
    b = build_allocation_vector([float(parms[allocation_key(p)])
                                 for p in pools])
    return K, A, b
