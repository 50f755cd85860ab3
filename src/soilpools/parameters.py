""" Parameter sets for the one-pool and n-pool models.

A parameter set is checked once, when it is built, and is not changed after
that. The matrices of the n-pool system are built at the same time and kept
read-only, so the RHS evaluators can use them on every call without
rebuilding or re-checking anything. To run the same model under a different
input regime build a new set with replace_inputs().

Both sets can be made from, and flattened back to, the flat mapping of named
parameters used by the config and CSV readers (see matrices.py for the key
convention).
"""

import math
import numpy as np

from soilpools.constants import FIVE_POOLS, ONE_POOL, ALLOCATION_TOL
from soilpools.errors import MissingParameterError
from soilpools.inputs import InputSource, ConstantInput, make_input_source
from soilpools.matrices import (turnover_key, allocation_key, transfer_key,
                                required_keys, check_keys, build_decay_matrix,
                                build_transfer_matrix, build_allocation_vector)
from soilpools.utilities import float_lt, float_gt, float_le

__author__  = "Martin De Kauwe"
__version__ = "1.0 (17.10.2026)"
__email__   = "mdekauwe@gmail.com"


class OnePoolParams(object):
    """ One-pool model: dC/dt = u(t) - C / turnover_time """

    pools = (ONE_POOL,)

    def __init__(self, turnover_time, inputs):
        """
        Parameters
        ----------
        turnover_time : float
            mean residence time of carbon in the pool
        inputs : InputSource or float
            carbon input function, a number is taken as a constant input
        """
        self.turnover_time = _positive('turnoverTime', turnover_time)
        self.inputs = _as_input_source(inputs)

    @classmethod
    def from_dict(cls, parms):
        """ Build from named parameters: 'turnoverTime' plus the input keys
        (see inputs.make_input_source) """
        check_keys(parms, ['turnoverTime'])
        return cls(parms['turnoverTime'], make_input_source(parms))

    def to_dict(self):
        parms = {'turnoverTime': self.turnover_time}
        parms.update(self.inputs.to_dict())
        return parms

    def replace_inputs(self, inputs):
        return OnePoolParams(self.turnover_time, inputs)

    @property
    def decay_rate(self):
        return 1.0 / self.turnover_time

    def __repr__(self):
        return "OnePoolParams(turnover_time=%r, inputs=%r)" % \
                    (self.turnover_time, self.inputs)


class PoolModelParams(object):
    """ n-pool model: dC/dt = u(t) b - A K C

    Attributes
    ----------
    pools : tuple of strings
        pool names, fastest decaying first
    turnover_times : array
        turnover time of each pool
    allocation : array
        allocation vector, b
    transfers : dictionary
        (source, sink) -> transfer fraction, non-zero pairs only
    decay_matrix : array
        K
    transfer_matrix : array
        A
    system_matrix : array
        A K, the linear outflow operator
    respired_fractions : array
        fraction of each pool's decay lost as CO2
    inputs : InputSource
        carbon input function, u(t)
    """
    def __init__(self, pools, turnover_times, allocation, transfers=None,
                 inputs=0.0):
        """
        Parameters
        ----------
        pools : sequence of strings
            pool names, fastest decaying first
        turnover_times : dictionary or sequence
            pool -> turnover time, or values in pool order
        allocation : dictionary or sequence
            pool -> fraction of inputs entering the pool, or values in pool
            order. Must sum to one.
        transfers : dictionary, optional
            (source, sink) -> fraction of the decay of source passed to sink.
            Pairs that aren't listed don't exchange carbon.
        inputs : InputSource or float
            carbon input function, a number is taken as a constant input
        """
        self.pools = tuple(pools)
        if not self.pools:
            raise ValueError("A pool model needs at least one pool")
        if len(set(self.pools)) != len(self.pools):
            raise ValueError("Pool names must be unique: %s" % (self.pools,))

        taus = _per_pool(self.pools, turnover_times, turnover_key)
        self.turnover_times = np.array([_positive(turnover_key(p), tau)
                                        for p, tau in zip(self.pools, taus)])

        fracs = _per_pool(self.pools, allocation, allocation_key)
        self.allocation = build_allocation_vector(
                                [_fraction(allocation_key(p), f)
                                 for p, f in zip(self.pools, fracs)])
        total = self.allocation.sum()
        if math.fabs(total - 1.0) > ALLOCATION_TOL:
            raise ValueError("Input allocation fractions must sum to 1, not "
                             "%.10g" % total)

        self.transfers = {}
        for (source, sink), frac in (transfers or {}).items():
            if source not in self.pools or sink not in self.pools:
                raise ValueError("Transfer between unknown pools: %s -> %s" %
                                 (source, sink))
            if source == sink:
                raise ValueError("A pool can't transfer to itself: %s" %
                                 source)
            frac = _fraction(transfer_key(source, sink), frac)
            if float_gt(frac, 0.0):
                self.transfers[(source, sink)] = frac

        outgoing = np.zeros(len(self.pools))
        for (source, sink), frac in self.transfers.items():
            outgoing[self.pools.index(source)] += frac
        for pool, total in zip(self.pools, outgoing):
            if float_gt(total, 1.0, tol=1E-12):
                raise ValueError("Transfers out of %s sum to %.10g, more "
                                 "than its decay" % (pool, total))
        self.respired_fractions = np.clip(1.0 - outgoing, 0.0, 1.0)

        self.inputs = _as_input_source(inputs)

        self.decay_matrix = build_decay_matrix(self.turnover_times)
        self.transfer_matrix = build_transfer_matrix(self.pools,
                                                     self.transfers)
        self.system_matrix = np.dot(self.transfer_matrix, self.decay_matrix)

        for arr in (self.turnover_times, self.allocation,
                    self.respired_fractions, self.decay_matrix,
                    self.transfer_matrix, self.system_matrix):
            arr.setflags(write=False)

    @classmethod
    def from_dict(cls, parms, pools=FIVE_POOLS):
        """ Build from a flat mapping of named parameters.

        Every turnoverTime_<pool>, input_to_<pool> and <from>_to_<to> key
        must be present, along with the input keys (see
        inputs.make_input_source).

        Parameters:
        -----------
        parms : dictionary
            named parameters
        pools : sequence of strings
            pool names, fastest decaying first

        Returns:
        --------
        params : PoolModelParams
        """
        pools = tuple(pools)
        check_keys(parms, required_keys(pools))
        turnover_times = [parms[turnover_key(p)] for p in pools]
        allocation = [parms[allocation_key(p)] for p in pools]
        transfers = dict(((src, dst), parms[transfer_key(src, dst)])
                         for src in pools for dst in pools if src != dst)
        return cls(pools, turnover_times, allocation, transfers,
                   make_input_source(parms))

    def to_dict(self):
        """ Flatten back to named parameters, every pool pair included """
        parms = {}
        for i, pool in enumerate(self.pools):
            parms[turnover_key(pool)] = float(self.turnover_times[i])
            parms[allocation_key(pool)] = float(self.allocation[i])
        for src in self.pools:
            for dst in self.pools:
                if src != dst:
                    parms[transfer_key(src, dst)] = \
                        self.transfers.get((src, dst), 0.0)
        parms.update(self.inputs.to_dict())
        return parms

    def replace_inputs(self, inputs):
        return PoolModelParams(self.pools, self.turnover_times,
                               self.allocation, self.transfers, inputs)

    @property
    def n_pools(self):
        return len(self.pools)

    def __repr__(self):
        return "PoolModelParams(pools=%r, inputs=%r)" % (self.pools,
                                                          self.inputs)


def _as_input_source(inputs):
    if isinstance(inputs, InputSource):
        return inputs
    if callable(inputs):
        raise ValueError("Inputs must be an InputSource or a number, wrap "
                         "custom functions in an InputSource subclass")
    return ConstantInput(inputs)

def _per_pool(pools, values, key_fn):
    """ values in pool order, from either a dict or a sequence """
    if isinstance(values, dict):
        missing = [key_fn(p) for p in pools if values.get(p) is None]
        if missing:
            raise MissingParameterError(missing)
        return [values[p] for p in pools]
    values = list(np.asarray(values, dtype=float).reshape(-1))
    if len(values) != len(pools):
        raise ValueError("Expected %d values, one per pool, got %d" %
                         (len(pools), len(values)))
    return values

def _positive(name, value):
    value = float(value)
    if not (float_gt(value, 0.0) and math.isfinite(value)):
        raise ValueError("%s must be positive and finite: %g" % (name, value))
    return value

def _fraction(name, value):
    value = float(value)
    if math.isnan(value) or float_lt(value, 0.0) or not float_le(value, 1.0):
        raise ValueError("%s must be a fraction between 0 and 1: %g" %
                         (name, value))
    return value
