#!/usr/bin/env python
""" Load model parameters from config files and CSV tables.

Config files (.cfg) have three sections:

[control]
model = pools             # pools or one_pool
pools = meta, struc, fast, slow, passive
rel_tol = 1e-10           # optional, RHS mass-balance tolerance

[inputs]
input_type = seasonal     # constant, seasonal, zero, step
ave_inputs = 0.5
amplitude = 0.25

[params]
turnoverTime_meta = 0.25
meta_to_fast = 0.45
...

and are checked against the configspec below when read. The CSV tables are
a header row of parameter names with one row of values underneath.
"""

import csv

from configobj import ConfigObj, ConfigObjError, flatten_errors
from configobj.validate import Validator

from soilpools.constants import FIVE_POOLS
from soilpools.inputs import TabulatedInput
from soilpools.parameters import OnePoolParams, PoolModelParams

__author__  = "Martin De Kauwe"
__version__ = "1.0 (22.02.2011)"
__email__   = "mdekauwe@gmail.com"


CONFIGSPEC = """
[control]
model = option('pools', 'one_pool', default='pools')
pools = string_list(default=list('meta', 'struc', 'fast', 'slow', 'passive'))
rel_tol = float(min=0, default=None)

[inputs]
input_type = option('constant', 'seasonal', 'zero', 'incubation', 'step', 'regime_shift', default='constant')
ave_inputs = float(min=0, default=None)
amplitude = float(min=0, default=None)
period = float(min=0, default=1.0)
phase = float(default=0.0)
cutoff = float(default=None)
shift_factor = float(min=0, default=None)

[params]
__many__ = float
""".splitlines()


def initialise_model_data(fname):
    """ Load a config file and build the parameter set it describes

    Parameters:
    ----------
    fname : string
        filename of the config file, including path

    Returns:
    --------
    control : dictionary
        model control flags
    params : OnePoolParams or PoolModelParams
        model parameters, including the input source
    """
    R = ReadConfigFile(fname)
    config = R.load_files()
    (control, user_inputs, user_params) = R.get_config_dicts(config)

    parms = dict(user_params)
    parms.update((k, v) for k, v in user_inputs.items() if v is not None)
    if control['model'] == 'one_pool':
        params = OnePoolParams.from_dict(parms)
    else:
        params = PoolModelParams.from_dict(parms, control['pools'])

    return control, params


class ReadConfigFile(object):
    """ Read supplied config file (.cfg/.ini), checked against CONFIGSPEC.

    Return various dictionaries based on defined sections.
    """
    def __init__(self, fname):
        """
        Parameters:
        ----------
        fname : string
            filename of parameter (CFG) file [including path]

        """
        self.config_file = fname

    def load_files(self):
        """ load and validate the config file

        Returns:
        --------
        config : object
            user defined parameter file as an object

        """
        try:
            config = ConfigObj(self.config_file, configspec=CONFIGSPEC,
                               file_error=True)
        except (ConfigObjError, IOError) as e:
            raise IOError('%s' % e)

        result = config.validate(Validator(), preserve_errors=True)
        if result is not True:
            problems = []
            for sections, key, error in flatten_errors(config, result):
                where = "/".join(sections + [key or "(section)"])
                problems.append("%s: %s" % (where, error or "missing"))
            raise IOError("Error reading %s:\n  %s" %
                          (self.config_file, "\n  ".join(problems)))

        return config

    def get_config_dicts(self, config):
        """ Break config dictionary into small dictionaries based on sections.

        Returns:
        --------
        control : dictionary
            model control flags
        inputs : dictionary
            input source settings
        params : dictionary
            named model parameters
        """
        control = dict(config.get('control', {}))
        inputs = dict(config.get('inputs', {}))
        params = dict(config.get('params', {}))
        control.setdefault('model', 'pools')
        control.setdefault('pools', list(FIVE_POOLS))
        control.setdefault('rel_tol', None)

        return (control, inputs, params)


def read_parameter_table(fname, row=0):
    """ Read a one-row CSV table of named parameters.

    Numbers are cast to float, anything else (e.g. input_type) is kept as a
    string, empty or NA cells become None. Columns without a name, such as R
    row names, are skipped.

    Parameters:
    -----------
    fname : string
        filename of the CSV table
    row : int
        which data row to read, for tables holding several parameter sets

    Returns:
    --------
    parms : dictionary
        named parameters
    """
    try:
        with open(fname, 'r', newline='') as f:
            rows = [r for r in csv.reader(f)
                    if r and not r[0].lstrip().startswith("#")]
    except IOError:
        raise IOError('Could not read parameter file: "%s"' % fname)

    if len(rows) < row + 2:
        raise ValueError('Parameter file "%s" has no data row %d' %
                         (fname, row))

    names = [name.strip() for name in rows[0]]
    parms = {}
    for name, value in zip(names, rows[row + 1]):
        if name:
            parms[name] = _cast(value)
    return parms

def load_parameter_table(fname, model='pools', pools=FIVE_POOLS, row=0):
    """ Build a parameter set straight from a CSV parameter table """
    parms = read_parameter_table(fname, row)
    if model == 'one_pool':
        return OnePoolParams.from_dict(parms)
    return PoolModelParams.from_dict(parms, pools)

def read_input_series(fname, time_col='time', value_col='carbon'):
    """ Read a table of inputs over time into a TabulatedInput.

    Column names are matched regardless of case.
    """
    try:
        with open(fname, 'r', newline='') as f:
            rows = [r for r in csv.reader(f)
                    if r and not r[0].lstrip().startswith("#")]
    except IOError:
        raise IOError('Could not read input series: "%s"' % fname)

    if len(rows) < 2:
        raise ValueError('Input series "%s" has no data rows' % fname)

    header = [name.strip().lower() for name in rows[0]]
    try:
        i = header.index(time_col.lower())
        j = header.index(value_col.lower())
    except ValueError:
        raise ValueError('Input series "%s" needs "%s" and "%s" columns' %
                         (fname, time_col, value_col))

    times = [float(r[i]) for r in rows[1:]]
    values = [float(r[j]) for r in rows[1:]]
    return TabulatedInput(times, values)

def _cast(value):
    value = value.strip()
    if value == "" or value.upper() == "NA":
        return None
    try:
        return float(value)
    except ValueError:
        return value
