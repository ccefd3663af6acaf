"""
Thermodynamic properties of seawater from the TEOS-10 Gibbs function

All functions take Absolute Salinity [g/kg], in-situ temperature [deg C] and
sea pressure [dbar] as scalars, and combine the partial derivatives of the
specific Gibbs energy computed by `seagibbs.gibbs`.

Functions:

specvol :: specific volume

rho :: in-situ density

entropy, enthalpy, internal_energy, helmholtz_energy :: specific entropy and
    the specific energies

cp :: isobaric heat capacity

sound_speed :: speed of sound

kappa, kappa_const_t :: isentropic and isothermal compressibility

alpha :: thermal expansion coefficient with respect to in-situ temperature

beta_const_t :: saline contraction coefficient at constant in-situ temperature

adiabatic_lapse_rate :: adiabatic lapse rate

chem_potential_relative :: relative chemical potential


Notes:
To make vectorized versions of these functions, see
`seagibbs.tools.vectorize_gibbs`, or evaluate them on fields with
`seagibbs.lib.apply_sa_t_p`.

Where a salinity derivative of the Gibbs function is NaN (at zero salinity),
so is the property that uses it.
"""

# Check values computed on 18/10/2026:
#
# >>> rho(35.16504, 0, 0)
# 1028.1071845748502
#
# >>> sound_speed(35.16504, 0, 0)
# 1449.0246067187866
#
# >>> rho(35, 25, 2000), cp(35, 25, 2000)
# (1031.6782572615905, 3957.3557905384232)

import numpy as np
import numba as nb

from .gibbs import g, g_s, g_t, g_p, g_sp, g_tp, g_tt, g_pp

# Celsius zero point [K]
T0 = 273.15

# One standard atmosphere [Pa]
P0 = 101325.0

# dbar to Pa
db2Pa = 1e4


@nb.njit
def specvol(SA, t, p):
    """
    Specific volume.

    Parameters
    ----------
    SA : float
        Absolute Salinity [g/kg]
    t : float
        in-situ temperature (ITS-90) [deg C]
    p : float
        sea pressure (i.e. absolute pressure - 10.1325 dbar)  [dbar]

    Returns
    -------
    specvol : float
        Specific volume [m3 kg-1]
    """
    return g_p(SA, t, p)


@nb.njit
def rho(SA, t, p):
    """
    In-situ density.

    Parameters
    ----------
    SA, t, p : float
        See `specvol`

    Returns
    -------
    rho : float
        In-situ density [kg m-3]
    """
    return 1.0 / g_p(SA, t, p)


@nb.njit
def entropy(SA, t, p):
    """Specific entropy [J kg-1 K-1]"""
    return -g_t(SA, t, p)


@nb.njit
def enthalpy(SA, t, p):
    """Specific enthalpy [J kg-1]"""
    return g(SA, t, p) - (t + T0) * g_t(SA, t, p)


@nb.njit
def internal_energy(SA, t, p):
    """Specific internal energy [J kg-1]"""
    return (
        g(SA, t, p)
        - (t + T0) * g_t(SA, t, p)
        - (db2Pa * p + P0) * g_p(SA, t, p)
    )


@nb.njit
def helmholtz_energy(SA, t, p):
    """Specific Helmholtz energy [J kg-1]"""
    return g(SA, t, p) - (db2Pa * p + P0) * g_p(SA, t, p)


@nb.njit
def cp(SA, t, p):
    """Isobaric heat capacity [J kg-1 K-1]"""
    return -(t + T0) * g_tt(SA, t, p)


@nb.njit
def sound_speed(SA, t, p):
    """
    Speed of sound in seawater.

    Parameters
    ----------
    SA, t, p : float
        See `specvol`

    Returns
    -------
    sound_speed : float
        Speed of sound [m s-1]
    """
    tt = g_tt(SA, t, p)
    tp = g_tp(SA, t, p)
    return g_p(SA, t, p) * np.sqrt(tt / (tp * tp - tt * g_pp(SA, t, p)))


@nb.njit
def kappa(SA, t, p):
    """Isentropic compressibility [Pa-1]"""
    tt = g_tt(SA, t, p)
    tp = g_tp(SA, t, p)
    return (tp * tp - tt * g_pp(SA, t, p)) / (g_p(SA, t, p) * tt)


@nb.njit
def kappa_const_t(SA, t, p):
    """Isothermal compressibility [Pa-1]"""
    return -g_pp(SA, t, p) / g_p(SA, t, p)


@nb.njit
def alpha(SA, t, p):
    """
    Thermal expansion coefficient with respect to in-situ temperature.

    Parameters
    ----------
    SA, t, p : float
        See `specvol`

    Returns
    -------
    alpha : float
        Thermal expansion coefficient [K-1]
    """
    return g_tp(SA, t, p) / g_p(SA, t, p)


@nb.njit
def beta_const_t(SA, t, p):
    """
    Saline contraction coefficient at constant in-situ temperature.

    Parameters
    ----------
    SA, t, p : float
        See `specvol`

    Returns
    -------
    beta_const_t : float
        Saline contraction coefficient [kg g-1]
    """
    return -g_sp(SA, t, p) / g_p(SA, t, p)


@nb.njit
def adiabatic_lapse_rate(SA, t, p):
    """Adiabatic lapse rate, the rate of change of in-situ temperature with
    pressure at constant entropy [K Pa-1]"""
    return -g_tp(SA, t, p) / g_tt(SA, t, p)


@nb.njit
def chem_potential_relative(SA, t, p):
    # NaN at SA == 0, from g_s
    return g_s(SA, t, p)
