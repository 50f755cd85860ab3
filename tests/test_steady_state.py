#!/usr/bin/env python

"""
Unit-tests for the steady-state solver and the one-pool proxy reduction.
"""

import unittest
import numpy as np

from soilpools.aggregate import (proxy_turnover_time, proxy_decay_rate,
                                 proxy_params, decay_modes,
                                 characteristic_times)
from soilpools.default_params import default_parameters
from soilpools.errors import SingularSystemError
from soilpools.matrices import build_matrices
from soilpools.ode import pool_ode, one_pool_ode
from soilpools.parameters import OnePoolParams, PoolModelParams
from soilpools.steady_state import (pool_steady_state, one_pool_steady_state,
                                    steady_state, initial_state,
                                    solve_linear_steady_state)

__author__  = "Martin De Kauwe"
__version__ = "1.0 (17.10.2026)"
__email__   = "mdekauwe@gmail.com"


def independent_pools(inputs=1.0):
    """ No transfers, three of the five pools receive inputs """
    parms = default_parameters()
    for key in parms:
        if "_to_" in key and not key.startswith("input_to_"):
            parms[key] = 0.0
    parms.update({'turnoverTime_meta': 3.0, 'turnoverTime_struc': 40.0,
                  'turnoverTime_fast': 200.0, 'input_to_meta': 0.2,
                  'input_to_struc': 0.3, 'input_to_fast': 0.5,
                  'input_to_slow': 0.0, 'input_to_passive': 0.0,
                  'ave_inputs': inputs})
    return parms


class SteadyStateTests(unittest.TestCase):

    def setUp(self):
        self.params = PoolModelParams.from_dict(default_parameters())

    def test_independent_pools_closed_form(self):
        p = PoolModelParams.from_dict(independent_pools())
        np.testing.assert_allclose(pool_steady_state(p),
                                   [0.6, 12.0, 100.0, 0.0, 0.0],
                                   rtol=1E-12, atol=1E-12)

    def test_independent_pools_generalised(self):
        p = PoolModelParams(('a', 'b', 'c'), [3.0, 40.0, 200.0],
                            [0.2, 0.3, 0.5], inputs=1.0)
        np.testing.assert_allclose(pool_steady_state(p), [0.6, 12.0, 100.0])
        # u * allocation * turnover time for any u
        np.testing.assert_allclose(pool_steady_state(p, inputs=2.5),
                                   [1.5, 30.0, 250.0])

    def test_zero_derivatives_at_steady_state(self):
        for inputs in (0.1, 0.5, 3.0):
            y0 = initial_state(self.params, inputs)
            p = self.params.replace_inputs(inputs)
            dydt = pool_ode(0.0, y0, p)
            np.testing.assert_allclose(dydt[1:], 0.0, atol=1E-12)
            # everything entering is respired
            self.assertAlmostEqual(dydt[0], inputs, places=12)

    def test_steady_state_non_negative(self):
        self.assertTrue(np.all(pool_steady_state(self.params) >= 0.0))

    def test_linear_solve_matches_parameter_set(self):
        K, A, b = build_matrices(default_parameters())
        np.testing.assert_allclose(solve_linear_steady_state(K, A, b, 0.5),
                                   pool_steady_state(self.params))

    def test_one_pool(self):
        p = OnePoolParams(20.0, 0.26)
        np.testing.assert_allclose(one_pool_steady_state(p), [5.2])
        np.testing.assert_allclose(initial_state(p), [0.0, 5.2])
        self.assertAlmostEqual(one_pool_ode(0.0, initial_state(p), p)[1], 0.0,
                               places=14)

    def test_dispatch(self):
        np.testing.assert_array_equal(steady_state(self.params),
                                      pool_steady_state(self.params))
        self.assertEqual(initial_state(self.params)[0], 0.0)
        self.assertEqual(initial_state(self.params).size, 6)

    def test_closed_loop_is_singular(self):
        p = PoolModelParams(('a', 'b'), [1.0, 2.0], [1.0, 0.0],
                            transfers={('a', 'b'): 1.0, ('b', 'a'): 1.0},
                            inputs=1.0)
        with self.assertRaises(SingularSystemError) as cm:
            pool_steady_state(p)
        self.assertEqual(cm.exception.params['a_to_b'], 1.0)
        self.assertTrue(isinstance(cm.exception, np.linalg.LinAlgError))


class AggregateDecayRateTests(unittest.TestCase):

    def setUp(self):
        self.params = PoolModelParams.from_dict(default_parameters())

    def test_total_carbon_equivalence(self):
        tau = proxy_turnover_time(self.params)
        for inputs in (0.01, 0.5, 7.0):
            total = pool_steady_state(self.params, inputs).sum()
            self.assertAlmostEqual(total / (inputs * tau), 1.0, places=12)

    def test_flat_mapping(self):
        self.assertAlmostEqual(proxy_turnover_time(default_parameters()),
                               proxy_turnover_time(self.params), places=10)

    def test_independent_pools(self):
        # sum of allocation * turnover time
        tau = proxy_turnover_time(independent_pools())
        self.assertAlmostEqual(tau, 0.2 * 3.0 + 0.3 * 40.0 + 0.5 * 200.0)

    def test_proxy_params(self):
        proxy = proxy_params(self.params)
        self.assertEqual(proxy.inputs, self.params.inputs)
        self.assertAlmostEqual(proxy.decay_rate, proxy_decay_rate(self.params))
        self.assertAlmostEqual(one_pool_steady_state(proxy)[0],
                               pool_steady_state(self.params).sum())

    def test_transfers_lengthen_turnover(self):
        # recycling carbon between pools keeps it in the system longer
        parms = default_parameters()
        base = proxy_turnover_time(parms)
        parms['meta_to_fast'] = 0.0
        self.assertTrue(proxy_turnover_time(parms) < base)

    def test_decay_modes(self):
        p = PoolModelParams.from_dict(independent_pools())
        taus = list(p.turnover_times)
        np.testing.assert_allclose(decay_modes(p),
                                   np.sort(1.0 / np.array(taus)))
        np.testing.assert_allclose(characteristic_times(p)[0], max(taus))

    def test_singular_propagates(self):
        parms = default_parameters()
        parms['meta_to_fast'] = 1.0
        parms['fast_to_meta'] = 1.0
        parms['fast_to_slow'] = 0.0
        parms['fast_to_passive'] = 0.0
        self.assertRaises(SingularSystemError, proxy_turnover_time, parms)


if __name__ == "__main__":

    unittest.main()
