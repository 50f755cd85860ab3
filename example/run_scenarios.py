#!/usr/bin/env python

"""
Example script of how I would compare the five-pool model with its one-pool
proxy, the numbers are the defaults rather than any particular site.

* Seed both models at the five-pool steady state, then run an incubation
  (inputs switched off), a seasonal cycle and a doubling of inputs.
* The parameter set is written to params/ first, edit that file and rerun to
  try other values.
"""

import os
import sys
import numpy as np

from soilpools import (PoolModelParams, SeasonalInput, ZeroInput,
                       StepShiftInput, compare_models, proxy_turnover_time)
from soilpools.default_params import default_parameters
from soilpools.file_parser import initialise_model_data
from soilpools.print_outputs import save_parameters, write_trajectory

__author__  = "Martin De Kauwe"
__version__ = "1.0 (17.10.2026)"
__email__   = "mdekauwe@gmail.com"


def main(experiment_id, years=100.0, steps_per_yr=12):

    # --- FILE PATHS, DIR NAMES ETC --- #
    param_dir = "params"
    run_dir = "outputs"
    for d in (param_dir, run_dir):
        if not os.path.exists(d):
            os.makedirs(d)

    cfg_fname = os.path.join(param_dir, "%s_five_pool.cfg" % experiment_id)
    if not os.path.exists(cfg_fname):
        save_parameters(PoolModelParams.from_dict(default_parameters()),
                        cfg_fname)
    (control, params) = initialise_model_data(cfg_fname)

    sys.stderr.write("Proxy turnover time: %f yrs\n" %
                     proxy_turnover_time(params))

    times = np.linspace(0.0, years, int(years * steps_per_yr) + 1)
    u = params.inputs.mean
    scenarios = {
        "incubation": ZeroInput(),
        "seasonal": SeasonalInput(u, 0.5 * u),
        "doubling": StepShiftInput(u, 0.1 * years, 2.0),
    }

    # --- RUN THE MODELS --- #
    for name in sorted(scenarios):
        sys.stderr.write("Running %s...\n" % name)
        runs = compare_models(params, times, inputs=scenarios[name],
                              rel_tol=control['rel_tol'])
        for model, table in (("pools", runs.pools),
                             ("one_pool", runs.one_pool)):
            out_fname = os.path.join(run_dir, "%s_%s_%s.csv" %
                                     (experiment_id, name, model))
            write_trajectory(table, out_fname)

        end_pools = runs.pools['Total_Carbon'].iloc[-1]
        end_proxy = runs.one_pool['Total_Carbon'].iloc[-1]
        sys.stderr.write("  Total C after %g yrs - pools: %f, proxy: %f\n" %
                         (years, end_pools, end_proxy))


if __name__ == "__main__":

    experiment_id = "DEFAULT"
    main(experiment_id)
