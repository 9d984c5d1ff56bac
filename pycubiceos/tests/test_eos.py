#!/usr/bin/env python3
"""
Validation tests for eos and state modules.
Run with: python3 -m pytest pycubiceos/tests/ -v
Or standalone: python3 pycubiceos/tests/test_eos.py
"""

import sys
import os
import numpy as np

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..'))
import pycubiceos.eos as eos
from pycubiceos.constants import R
from pycubiceos.state import IsobaricIsothermalState
from pycubiceos.validate import InvalidInputError

# Methane
PC = 4.6e6    # Pa
TC = 190.6    # K
OMEGA = 0.0108

def all_models():
    return [eos.make_van_der_waals_eos(PC, TC),
            eos.make_peng_robinson_eos(PC, TC, OMEGA),
            eos.make_soave_redlich_kwong_eos(PC, TC, OMEGA)]

# =============================================================================
# Critical point scaling
# =============================================================================

def test_critical_params():
    m = eos.make_peng_robinson_eos(PC, TC, OMEGA)
    assert abs(m.ac - 0.45724 * R ** 2 * TC ** 2 / PC) < 1e-12
    assert abs(m.bc - 0.07780 * R * TC / PC) < 1e-15
    assert m.pc == PC and m.tc == TC and m.omega == OMEGA

def test_vdw_critical_pressure():
    """van der Waals isotherm passes through Pc at Tc and Vc = 3b"""
    m = eos.make_van_der_waals_eos(PC, TC)
    p = m.pressure(TC, 3 * m.bc)
    assert abs(p - PC) / PC < 1e-12, f"P at critical point = {p}, expected {PC}"

def test_vdw_critical_zfactor():
    """Cubic collapses to (Z - 3/8)^3 at the van der Waals critical point"""
    m = eos.make_van_der_waals_eos(PC, TC)
    z = m.zfactor(PC, TC)
    assert len(z) == 3
    assert np.allclose(z, 0.375, rtol=0, atol=1e-9), f"Zc = {z}, expected 0.375"

def test_reduced_state_params():
    m = eos.make_peng_robinson_eos(PC, TC, OMEGA)
    p, t = 2e6, 170.0
    st = m.state(p, t)
    pr, tr = p / PC, t / TC
    assert abs(st.a - m.alpha(tr) * 0.45724 * pr / tr ** 2) < 1e-14
    assert abs(st.b - 0.07780 * pr / tr) < 1e-14
    assert abs(st.beta - m.beta(tr)) < 1e-14
    assert eos.make_van_der_waals_eos(PC, TC).state(p, t).beta is None

def test_reduced_params_match_dimensional():
    """Reduced parameters equal a*P/(RT)^2 and b*P/(RT)"""
    m = eos.make_soave_redlich_kwong_eos(PC, TC, OMEGA)
    p, t = 3e6, 250.0
    st = m.state(p, t)
    a = m.alpha(t / TC) * m.ac
    assert abs(st.a - a * p / (R * t) ** 2) < 1e-12
    assert abs(st.b - m.bc * p / (R * t)) < 1e-12

# =============================================================================
# Temperature correction
# =============================================================================

def test_alpha_unity_at_critical():
    for m in all_models()[1:]:
        assert abs(m.alpha(1.0) - 1.0) < 1e-15

def test_beta_is_log_derivative_of_alpha():
    """beta = d(ln alpha)/d(ln Tr), checked by central difference"""
    h = 1e-6
    for m in all_models()[1:]:
        for tr in [0.5, 0.8, 1.0, 1.6]:
            numeric = (np.log(m.alpha(tr * (1 + h))) - np.log(m.alpha(tr * (1 - h)))) / (np.log(1 + h) - np.log(1 - h))
            assert abs(m.beta(tr) - numeric) < 1e-7, f"{type(m).__name__} beta({tr}) = {m.beta(tr)}, numeric {numeric}"

def test_beta_times_alpha_is_derivative_of_alpha():
    """alpha * beta recovers d(alpha)/d(ln Tr) = -m sqrt(Tr) (1 + m(1 - sqrt(Tr)))"""
    for m in all_models()[1:]:
        mm = m.m(m.omega)
        for tr in [0.5, 0.8, 1.0, 1.6]:
            expected = -mm * np.sqrt(tr) * (1 + mm * (1 - np.sqrt(tr)))
            assert abs(m.alpha(tr) * m.beta(tr) - expected) < 1e-12

def test_peng_robinson_m_polynomial():
    m = eos.make_peng_robinson_eos(PC, TC, 0.2)
    assert abs(m.m(0.2) - (0.3796 + 1.485 * 0.2 - 0.1644 * 0.04 + 0.01667 * 0.008)) < 1e-14

# =============================================================================
# Z-factor
# =============================================================================

def test_zfactor_supercritical_single_root():
    """Methane at 300 K, 5 MPa is supercritical: one root near 0.9"""
    for m in all_models()[1:]:
        z = m.zfactor(5e6, 300.0)
        assert len(z) == 1, f"{type(m).__name__} returned {z}"
        assert 0.85 < z[0] < 0.97, f"{type(m).__name__} Z = {z[0]}"

def test_zfactor_subcritical_three_roots():
    """Methane at 150 K, 0.5 MPa: liquid, unstable and vapor roots"""
    m = eos.make_peng_robinson_eos(PC, TC, OMEGA)
    z = m.zfactor(0.5e6, 150.0)
    assert len(z) == 3, f"Expected 3 roots, got {z}"
    assert z == sorted(z)
    assert z[0] < 0.1 and z[-1] > 0.85, f"Unexpected roots {z}"

def test_zfactor_consistent_with_pressure():
    """Each root reproduces the pressure through the P(T, V) form of the EoS"""
    for m in all_models():
        for p, t in [(0.5e6, 150.0), (5e6, 300.0), (2e6, 175.0)]:
            for z in m.zfactor(p, t):
                if z <= m.state(p, t).b:
                    continue
                v = z * R * t / p
                assert abs(m.pressure(t, v) - p) / p < 1e-8, f"{type(m).__name__} at P={p}, T={t}, Z={z}"

def test_isothermal_line_matches_pressure():
    for m in all_models():
        line = m.isothermal_line(160.0)
        for v in [1e-4, 5e-4, 2e-3]:
            assert abs(line.pressure(v) - m.pressure(160.0, v)) < 1e-9 * abs(m.pressure(160.0, v))

# =============================================================================
# Ideal gas limit
# =============================================================================

def test_ideal_gas_limit_low_pressure():
    """Z and fugacity coefficient both tend to 1 as pressure tends to zero"""
    for m in all_models():
        st = m.state(10.0, 300.0)
        z = st.zfactor()[-1]
        assert abs(z - 1) < 1e-5, f"{type(m).__name__} Z = {z}"
        assert abs(st.fugacity_coeff(z) - 1) < 1e-5, f"{type(m).__name__} phi = {st.fugacity_coeff(z)}"

def test_ideal_gas_limit_small_params():
    for m in all_models():
        for a in [1e-4, 1e-6, 1e-8]:
            beta = None if m.state(1e5, 300.0).beta is None else -0.5
            st = IsobaricIsothermalState(m, 300.0, a, a / 2, beta)
            z = st.zfactor()[-1]
            assert abs(z - 1) < 10 * a
            assert abs(st.fugacity_coeff(z) - 1) < 10 * a

# =============================================================================
# Residual properties
# =============================================================================

def test_residual_gibbs_consistency():
    """H - TS = RT ln(phi) and A = RT ln(phi) - RT(Z - 1) for every root"""
    for m in all_models():
        for p, t in [(0.5e6, 150.0), (5e6, 300.0)]:
            st = m.state(p, t)
            for z in st.zfactor():
                if z <= st.b:
                    continue
                g = R * t * st.ln_fugacity_coeff(z)
                assert abs(st.residual_enthalpy(z) - t * st.residual_entropy(z) - g) < 1e-8
                assert abs(st.residual_gibbs_energy(z) - g) < 1e-8
                assert abs(st.residual_helmholtz_energy(z) - (g - R * t * (z - 1))) < 1e-8

def test_residual_enthalpy_gibbs_helmholtz():
    """H = -RT^2 d(ln phi)/dT at constant pressure"""
    p, h = 5e6, 1e-2
    for m in all_models():
        t = 300.0
        lnphi = lambda tt: m.state(p, tt).ln_fugacity_coeff(m.zfactor(p, tt)[-1])
        numeric = -R * t ** 2 * (lnphi(t + h) - lnphi(t - h)) / (2 * h)
        st = m.state(p, t)
        hres = st.residual_enthalpy(st.zfactor()[-1])
        assert abs(hres - numeric) < 1e-5 * abs(hres), f"{type(m).__name__} H = {hres}, numeric {numeric}"

def test_fugacity_coeff_static_and_state_agree():
    m = eos.make_peng_robinson_eos(PC, TC, OMEGA)
    st = m.state(0.5e6, 150.0)
    for z in st.zfactor()[::2]:
        assert abs(st.fugacity_coeff(z) - m.fugacity_coeff(z, st.a, st.b)) < 1e-14

# =============================================================================
# Construction and parameter updates
# =============================================================================

def test_make_model_by_name():
    assert isinstance(eos.make_model('vdw', PC, TC), eos.VanDerWaalsEOS)
    assert isinstance(eos.make_model('PR', PC, TC, OMEGA), eos.PengRobinsonEOS)
    assert isinstance(eos.make_model('Srk', PC, TC, OMEGA), eos.SoaveRedlichKwongEOS)

def test_make_model_bad_inputs():
    for args in [('XYZ', PC, TC, OMEGA), ('PR', PC, TC, None), ('VDW', -PC, TC), ('SRK', PC, 0, OMEGA)]:
        try:
            eos.make_model(*args)
            assert False, f"Should have raised InvalidInputError for {args}"
        except InvalidInputError:
            pass

def test_invalid_input_is_value_error():
    try:
        eos.make_model('PR', PC, TC, OMEGA).zfactor(-1.0, 300.0)
        assert False, "Should have raised ValueError"
    except ValueError:
        pass

def test_abstract_base_not_instantiable():
    try:
        eos.CubicEOSBase(PC, TC)
        assert False, "Should have raised TypeError"
    except TypeError:
        pass

def test_set_params_replaces_derived_values():
    m = eos.make_peng_robinson_eos(PC, TC, OMEGA)
    m.set_params(4.88e6, 305.4, 0.0986)
    ref = eos.make_peng_robinson_eos(4.88e6, 305.4, 0.0986)
    assert (m.pc, m.tc, m.ac, m.bc, m.omega) == (ref.pc, ref.tc, ref.ac, ref.bc, ref.omega)
    assert m.zfactor(1e6, 250.0) == ref.zfactor(1e6, 250.0)

def test_set_params_rejected_leaves_model_unchanged():
    m = eos.make_van_der_waals_eos(PC, TC)
    before = (m.pc, m.tc, m.ac, m.bc)
    try:
        m.set_params(-1.0, TC)
        assert False, "Should have raised InvalidInputError"
    except InvalidInputError:
        pass
    assert (m.pc, m.tc, m.ac, m.bc) == before

if __name__ == '__main__':
    print("=" * 70)
    print("EOS MODULE VALIDATION TESTS")
    print("=" * 70)

    tests = [v for k, v in globals().items() if k.startswith('test_')]
    passed = 0
    failed = 0
    errors = []

    for test in tests:
        try:
            test()
            passed += 1
            print(f"  PASS: {test.__name__}")
        except Exception as e:
            failed += 1
            errors.append((test.__name__, str(e)))
            print(f"  FAIL: {test.__name__}: {e}")

    print(f"\n{'=' * 70}")
    print(f"Results: {passed} passed, {failed} failed out of {passed + failed}")

    print("=" * 70)
    sys.exit(1 if failed > 0 else 0)
