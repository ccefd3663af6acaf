import numpy as np
import pytest

from seagibbs import properties as props
from seagibbs.gibbs import g, g_t, g_p
from seagibbs.tools import vectorize_gibbs

# Check values from an independent double precision evaluation of the
# TEOS-10 Gibbs function polynomials
@pytest.mark.parametrize(
    "fn,checkval",
    [
        (props.rho, (35.0, 25.0, 2000.0, 1031.6782572615905)),
        (props.specvol, (35.0, 25.0, 2000.0, 9.6929444132546228e-04)),
        (props.entropy, (35.0, 25.0, 2000.0, 343.7632934240666)),
        (props.cp, (35.0, 25.0, 2000.0, 3957.3557905384232)),
        (props.enthalpy, (35.0, 25.0, 2000.0, 117514.46110167159)),
        (props.internal_energy, (35.0, 25.0, 2000.0, 98030.358515895045)),
        (props.helmholtz_energy, (35.0, 25.0, 2000.0, -4462.6674184904041)),
        (props.sound_speed, (35.0, 25.0, 2000.0, 1567.0850712684621)),
        (props.kappa, (35.0, 25.0, 2000.0, 3.9470313462689269e-10)),
        (props.kappa_const_t, (35.0, 25.0, 2000.0, 4.0186357298789288e-10)),
        (props.alpha, (35.0, 25.0, 2000.0, 3.1313173636552538e-04)),
        (props.beta_const_t, (35.0, 25.0, 2000.0, 7.1865523579196658e-04)),
        (props.adiabatic_lapse_rate, (35.0, 25.0, 2000.0, 2.2867175470970679e-08)),
        (props.chem_potential_relative, (35.0, 25.0, 2000.0, 63.015809520678765)),
        (props.rho, (35.16504, 0.0, 0.0, 1028.1071845748502)),
        (props.sound_speed, (35.16504, 0.0, 0.0, 1449.0246067187866)),
        (props.cp, (35.16504, 0.0, 0.0, 3986.4525110682998)),
        (props.rho, (0.0, 4.0, 0.0, 999.97487306544224)),
        (props.cp, (0.0, 4.0, 0.0, 4207.5188797050196)),
    ],
)
def test_checkval(fn, checkval):
    assert np.isclose(fn(*checkval[:-1]), checkval[-1], rtol=1e-11, atol=0)


def test_pure_water_density_maximum():
    # Fresh water is densest near 4 degC
    rho_ufunc = vectorize_gibbs(props.rho)
    t = np.linspace(0.0, 8.0, 81)
    r = rho_ufunc(0.0, t, 0.0)
    assert abs(t[np.argmax(r)] - 4.0) < 0.2


def test_chem_potential_nan_at_zero_salinity():
    assert np.isnan(props.chem_potential_relative(0.0, 10.0, 100.0))
    assert np.isfinite(props.rho(0.0, 10.0, 100.0))


@pytest.mark.parametrize("s,t,p", [(35.0, 25.0, 2000.0), (34.0, 2.0, 4000.0)])
def test_thermodynamic_identities(s, t, p):
    T = t + props.T0
    P = p * props.db2Pa + props.P0

    # h = g + T * entropy, u = h - P v
    h = props.enthalpy(s, t, p)
    assert np.isclose(h, g(s, t, p) + T * props.entropy(s, t, p), rtol=1e-12)
    assert np.isclose(props.internal_energy(s, t, p), h - P * props.specvol(s, t, p), rtol=1e-12)

    # The isentropic and isothermal compressibilities differ by T alpha^2 v / cp
    a = props.alpha(s, t, p)
    diff = T * a * a * props.specvol(s, t, p) / props.cp(s, t, p)
    assert np.isclose(props.kappa_const_t(s, t, p) - props.kappa(s, t, p), diff, rtol=1e-9)

    # c^2 = 1 / (rho kappa)
    c = props.sound_speed(s, t, p)
    assert np.isclose(c * c, 1.0 / (props.rho(s, t, p) * props.kappa(s, t, p)), rtol=1e-12)


def test_derivs_by_centred_differences():
    s, t, p = (35.0, 10.0, 1000.0)
    dt, dp = (1e-4, 1e-1)

    # dh/dt at constant p is cp
    h_t = (props.enthalpy(s, t + dt, p) - props.enthalpy(s, t - dt, p)) / (2 * dt)
    assert np.isclose(h_t, props.cp(s, t, p), rtol=1e-7)

    # alpha = (1/v) dv/dt
    v_t = (g_p(s, t + dt, p) - g_p(s, t - dt, p)) / (2 * dt)
    assert np.isclose(v_t / g_p(s, t, p), props.alpha(s, t, p), rtol=1e-7)

    # Lapse rate: d(entropy)/dp = - (dT/dp)_entropy * d(entropy)/dt
    e_p = (g_t(s, t, p + dp) - g_t(s, t, p - dp)) / (2 * dp * props.db2Pa)
    e_t = (g_t(s, t + dt, p) - g_t(s, t - dt, p)) / (2 * dt)
    assert np.isclose(-e_p / e_t, props.adiabatic_lapse_rate(s, t, p), rtol=1e-6)
