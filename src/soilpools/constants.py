"""
A series of constants used throughout the soil pool models.

Module defines a series of constant, e.g.
import soilpools.constants as const
>>>print(const.FIVE_POOLS)
>>>('meta', 'struc', 'fast', 'slow', 'passive')

Pools are ordered from fastest to slowest decay, i.e. the row/column order of
the decay and transfer matrices.
"""

# litter (metabolic, structural) and soil (fast, slow, passive) pools
FIVE_POOLS = ('meta', 'struc', 'fast', 'slow', 'passive')

# column name for the single pool of the one-pool model
ONE_POOL = 'soil'

# relative tolerances of the mass-balance check inside the RHS evaluators
ONE_POOL_REL_TOL = 1E-8
POOL_REL_TOL = 1E-10

# allocation fractions must sum to one within this
ALLOCATION_TOL = 1E-8

# integrator tolerances, passed through to scipy's LSODA
SOLVER_RTOL = 1E-8
SOLVER_ATOL = 1E-10

# one seasonal cycle per year
SEASONAL_PERIOD = 1.0
