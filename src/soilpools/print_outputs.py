""" Write model trajectories and parameter sets to file.

Trajectories go to a delimited text file, one row per output time, stamped
with the package version. Parameter sets are dumped to a .cfg file that
file_parser.initialise_model_data reads back, e.g. so a user can start from
the defaults and change them.
"""

import csv

from configobj import ConfigObj

from soilpools._version import __version__ as package_version
from soilpools.parameters import OnePoolParams

__author__  = "Martin De Kauwe"
__version__ = "1.0 (21.03.2011)"
__email__   = "mdekauwe@gmail.com"

# keys that belong in the [inputs] section rather than [params]
INPUT_KEYS = ('input_type', 'ave_inputs', 'amplitude', 'period', 'phase',
              'cutoff', 'shift_factor')


def write_trajectory(table, fname, delimiter=','):
    """ Print a trajectory table.

    Parameters:
    -----------
    table : DataFrame
        model run, see scenarios.trajectory_table
    fname : string
        output filename, including path
    delimiter : string
        column separator
    """
    try:
        with open(fname, 'w', newline='') as ofp:
            ofp.write("# soilpools version %s\n" % package_version)
            wr = csv.writer(ofp, delimiter=delimiter)
            wr.writerow(list(table.columns))
            for row in table.itertuples(index=False):
                wr.writerow(["%.10g" % value for value in row])
    except IOError:
        raise IOError("Can't open %s file for write" % fname)

def save_parameters(params, fname, rel_tol=None):
    """ Dump a parameter set to a config file.

    Parameters:
    -----------
    params : OnePoolParams or PoolModelParams
        parameter set, tabulated inputs can't be written out
    fname : string
        output filename, including path
    rel_tol : float, optional
        RHS mass-balance tolerance to record under [control]
    """
    if params.inputs.input_type == 'tabulated':
        raise ValueError("Tabulated inputs can't be saved to a config file")

    parms = params.to_dict()

    config = ConfigObj()
    config.filename = fname
    config.initial_comment = ["# soilpools version %s" % package_version]
    if isinstance(params, OnePoolParams):
        config['control'] = {'model': 'one_pool'}
    else:
        config['control'] = {'model': 'pools', 'pools': list(params.pools)}
    if rel_tol is not None:
        config['control']['rel_tol'] = repr(float(rel_tol))
    config['inputs'] = dict((k, _fmt(parms[k])) for k in INPUT_KEYS
                            if k in parms)
    config['params'] = dict((k, _fmt(v)) for k, v in sorted(parms.items())
                            if k not in INPUT_KEYS)
    try:
        config.write()
    except IOError:
        raise IOError("Error writing params file: %s" % fname)

def _fmt(value):
    if isinstance(value, float):
        return repr(value)
    return str(value)
