"""
Default five-pool model parameters

Read into the model unless the user changes these at runtime with definitions
in the .cfg file. Pools are the two litter pools (metabolic, structural) and
three soil pools (fast, slow, passive), in the spirit of CENTURY.

Units: turnover times in years, inputs in kg C m-2 yr-1, all allocation and
transfer terms are unitless fractions.
"""

from soilpools.constants import FIVE_POOLS
from soilpools.matrices import required_keys

__author__  = "Martin De Kauwe"
__version__ = "1.0 (14.02.2011)"
__email__   = "mdekauwe@gmail.com"

# carbon inputs
input_type           = "constant"  # constant, seasonal, zero, step
ave_inputs           = 0.5         # mean litter input (kg C m-2 yr-1)

# allocation of inputs, litter only
input_to_meta        = 0.6         # fraction of inputs to metabolic litter
input_to_struc       = 0.4         # fraction of inputs to structural litter
input_to_fast        = 0.0
input_to_slow        = 0.0
input_to_passive     = 0.0

# turnover times (yrs)
turnoverTime_meta    = 0.25        # metabolic litter, months
turnoverTime_struc   = 3.0         # structural litter, lignified
turnoverTime_fast    = 5.0         # soil microbes and microbial products
turnoverTime_slow    = 30.0        # resistant plant material, 20-50 yrs
turnoverTime_passive = 500.0       # very resistant to decomp, > 400 yrs

# fraction of each pool's decay passed to another pool, the rest is respired
meta_to_struc        = 0.0
meta_to_fast         = 0.45
meta_to_slow         = 0.0
meta_to_passive      = 0.0
struc_to_meta        = 0.0
struc_to_fast        = 0.3
struc_to_slow        = 0.2
struc_to_passive     = 0.0
fast_to_meta         = 0.0
fast_to_struc        = 0.0
fast_to_slow         = 0.3
fast_to_passive      = 0.05
slow_to_meta         = 0.0
slow_to_struc        = 0.0
slow_to_fast         = 0.4
slow_to_passive      = 0.03
passive_to_meta      = 0.0
passive_to_struc     = 0.0
passive_to_fast      = 0.45
passive_to_slow      = 0.0


def default_parameters():
    """ Named parameter mapping of the module defaults """
    names = ['input_type', 'ave_inputs'] + required_keys(FIVE_POOLS)
    return dict((name, globals()[name]) for name in names)
