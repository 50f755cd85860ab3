""" Linear-decay multi-pool soil carbon models.

A one-pool model, dC/dt = u(t) - C / tau, and an n-pool model,
dC/dt = u(t) b - A K C, plus the reduction of the latter to a one-pool proxy
that holds the same total carbon at steady state.
"""

from soilpools._version import __version__
from soilpools.errors import (MissingParameterError,
                              ConservationViolationError, SingularSystemError)
from soilpools.inputs import (ConstantInput, SeasonalInput, ZeroInput,
                              StepShiftInput, TabulatedInput,
                              make_input_source)
from soilpools.parameters import OnePoolParams, PoolModelParams
from soilpools.matrices import build_matrices
from soilpools.steady_state import (steady_state, pool_steady_state,
                                    one_pool_steady_state, initial_state,
                                    solve_linear_steady_state)
from soilpools.aggregate import (proxy_turnover_time, proxy_decay_rate,
                                 proxy_params, decay_modes)
from soilpools.ode import one_pool_ode, pool_ode
from soilpools.scenarios import simulate, compare_models, spin_up_pools
