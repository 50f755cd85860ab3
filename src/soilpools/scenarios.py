""" Run the pool models through input scenarios and tabulate the results.

A run is a straight pipeline: parameters -> initial state (usually the
steady state under the baseline input) -> ODE integration -> trajectory
table. Nothing is shared between runs, every run gets its own parameter set.

Typical scenarios
-----------------
* spin-up     : constant inputs from empty pools towards steady state
* incubation  : seeded at steady state, inputs switched off (ZeroInput)
* seasonal    : seeded at steady state, SeasonalInput around the same mean
* regime shift: seeded at steady state, StepShiftInput changes the inputs
                part way through

compare_models runs an n-pool model and its one-pool proxy side by side from
the same starting carbon.
"""

import logging
import numpy as np
import pandas as pd
from scipy.integrate import solve_ivp

from soilpools.aggregate import proxy_params
from soilpools.constants import SOLVER_RTOL, SOLVER_ATOL
from soilpools.ode import model_ode
from soilpools.steady_state import initial_state
from soilpools.utilities import Bunch

__author__  = "Martin De Kauwe"
__version__ = "1.0 (17.10.2026)"
__email__   = "mdekauwe@gmail.com"

logger = logging.getLogger(__name__)


def simulate(params, times, y0=None, inputs=None, rel_tol=None,
             rtol=SOLVER_RTOL, atol=SOLVER_ATOL):
    """ Integrate a model over a time grid.

    Parameters:
    -----------
    params : OnePoolParams or PoolModelParams
        model parameters, the input source is the baseline regime
    times : array
        strictly increasing output times, the first is the start time
    y0 : array, optional
        initial [cumulative respiration, pools...], or just the pools. The
        default is the steady state under the mean baseline input.
    inputs : InputSource, optional
        input source to run under, defaults to the baseline one
    rel_tol : float, optional
        relative tolerance of the RHS mass-balance check
    rtol, atol : float
        integrator tolerances

    Returns:
    --------
    table : DataFrame
        one row per output time, see trajectory_table
    """
    times = _check_times(times)
    if y0 is None:
        y0 = initial_state(params)
    y0 = _check_state(params, y0)

    run_params = params if inputs is None else params.replace_inputs(inputs)
    logger.info("Running %s under %r from t=%g to t=%g",
                run_params.__class__.__name__, run_params.inputs,
                times[0], times[-1])

    states = integrate(run_params, times, y0, rel_tol=rel_tol, rtol=rtol,
                       atol=atol)
    return trajectory_table(run_params, times, states, rel_tol)

def integrate(params, times, y0, rel_tol=None, rtol=SOLVER_RTOL,
              atol=SOLVER_ATOL):
    """ States at each output time, with LSODA.

    The integration is restarted at every jump in the inputs (e.g. a regime
    shift) so no step straddles a discontinuity.

    Returns:
    --------
    states : array, (n_times, n_pools + 1)
    """
    rhs = model_ode(params)
    states = np.empty((times.size, y0.size))
    states[0] = y0
    if times.size == 1:
        return states

    start, end = times[0], times[-1]
    edges = ([start] +
             sorted(set(float(c) for c in params.inputs.breakpoints
                        if start < c < end)) +
             [end])

    y = y0
    for i in range(len(edges) - 1):
        lo, hi = edges[i], edges[i + 1]
        if hi == end:
            wanted = (times >= lo) & (times <= hi)
        else:
            wanted = (times >= lo) & (times < hi)
        t_eval = np.union1d(times[wanted], [lo, hi])

        sol = solve_ivp(rhs, (lo, hi), y, method="LSODA", t_eval=t_eval,
                        args=(params, rel_tol), rtol=rtol, atol=atol,
                        max_step=params.inputs.max_step)
        if not sol.success:
            raise RuntimeError("Integration failed between t=%g and t=%g: %s"
                               % (lo, hi, sol.message))

        keep = np.isin(sol.t, times[wanted])
        states[wanted] = sol.y.T[keep]
        y = sol.y[:, -1]

    return states

def trajectory_table(params, times, states, rel_tol=None):
    """ Tabulate a run.

    Columns: time, Cumulative_Respiration, one per pool, Total_Carbon,
    Respiration_Rate (instantaneous dCO2/dt) and Input_Rate (u(t)).
    """
    rhs = model_ode(params)
    respiration = np.array([rhs(t, y, params, rel_tol)[0]
                            for t, y in zip(times, states)])
    input_rate = np.array([params.inputs(t) for t in times])

    table = pd.DataFrame(states, columns=(['Cumulative_Respiration'] +
                                          list(params.pools)))
    table.insert(0, 'time', times)
    table['Total_Carbon'] = states[:, 1:].sum(axis=1)
    table['Respiration_Rate'] = respiration
    table['Input_Rate'] = input_rate
    return table

def compare_models(params, times, inputs=None, y0=None, rel_tol=None,
                   rtol=SOLVER_RTOL, atol=SOLVER_ATOL):
    """ Run an n-pool model and its one-pool proxy from the same carbon.

    Both start from the n-pool steady state under the baseline input (or
    y0), the one-pool model holding the total of the pools, which at steady
    state is u * tau_proxy.

    Parameters:
    -----------
    params : PoolModelParams
        n-pool model parameters, the input source is the baseline regime
    times : array
        output times
    inputs : InputSource, optional
        input source to run both models under, defaults to the baseline
    y0 : array, optional
        initial n-pool state, [cumulative respiration, pools...]

    Returns:
    --------
    runs : Bunch
        pools : DataFrame, n-pool trajectory
        one_pool : DataFrame, proxy trajectory
        proxy : OnePoolParams, the proxy parameter set
        proxy_turnover_time : float
    """
    proxy = proxy_params(params)
    if y0 is None:
        y0 = initial_state(params)
    y0 = _check_state(params, y0)
    y0_proxy = np.array([y0[0], y0[1:].sum()])

    logger.info("Comparing %d-pool model with its proxy, tau=%g",
                len(params.pools), proxy.turnover_time)

    pools = simulate(params, times, y0=y0, inputs=inputs, rel_tol=rel_tol,
                     rtol=rtol, atol=atol)
    one_pool = simulate(proxy, times, y0=y0_proxy, inputs=inputs,
                        rel_tol=rel_tol, rtol=rtol, atol=atol)
    return Bunch(pools=pools, one_pool=one_pool, proxy=proxy,
                 proxy_turnover_time=proxy.turnover_time)

def spin_up_pools(params, y0=None, chunk=50.0, tol=5E-03, max_chunks=1000,
                  rel_tol=None, rtol=SOLVER_RTOL, atol=SOLVER_ATOL):
    """ Spin up model pools to equilibrium.

    - Run the model forward in chunks, from empty pools by default, until
      total carbon changes by less than tol over a chunk. Under seasonal
      inputs the chunk must be a whole number of cycles, so every chunk
      ends at the same point in the cycle.

    References:
    ----------
    Adapted from...
    * Murty, D and McMurtrie, R. E. (2000) Ecological Modelling, 134,
      185-205, specifically page 196.

    Returns:
    --------
    spun : Bunch
        time : float, simulation time at the end of the spin up
        state : array, [cumulative respiration, pools...]
        total_carbon : float
        n_chunks : int
    """
    period = getattr(params.inputs, "period", None)
    if period is not None:
        cycles = chunk / period
        if abs(cycles - round(cycles)) > 1E-9 * max(1.0, cycles) or \
           round(cycles) < 1:
            raise ValueError("Spin up chunk (%g) must be a whole number of "
                             "input cycles (period %g)" % (chunk, period))

    if y0 is None:
        y0 = np.zeros(len(params.pools) + 1)
    y = _check_state(params, y0)

    t = 0.0
    prev_total = np.inf
    for n_chunks in range(1, max_chunks + 1):
        states = integrate(params, np.array([t, t + chunk]), y,
                           rel_tol=rel_tol, rtol=rtol, atol=atol)
        y = states[-1]
        t += chunk
        total = y[1:].sum()
        logger.info("Spinup: Total C - %f", total)
        if abs(prev_total - total) < tol:
            return Bunch(time=t, state=y, total_carbon=total,
                         n_chunks=n_chunks)
        prev_total = total

    raise RuntimeError("Spin up didn't converge within %d chunks (total C "
                       "%f)" % (max_chunks, total))

def _check_times(times):
    times = np.asarray(times, dtype=float).reshape(-1)
    if times.size == 0:
        raise ValueError("No output times given")
    if np.any(np.diff(times) <= 0.0):
        raise ValueError("Output times must be strictly increasing")
    return times

def _check_state(params, y0):
    """ full state vector, a pools-only vector gets zero respiration """
    y0 = np.asarray(y0, dtype=float).reshape(-1)
    n = len(params.pools)
    if y0.size == n:
        y0 = np.concatenate(([0.0], y0))
    if y0.size != n + 1:
        raise ValueError("Initial state needs %d values "
                         "[respiration, %s], got %d" %
                         (n + 1, ", ".join(params.pools), y0.size))
    return y0
