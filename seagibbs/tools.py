"""Tools for loading and vectorizing the Gibbs function and its derived properties"""

import functools as ft
import numpy as np
import numba as nb
import importlib
import numbers

# Names of the functions in `seagibbs.properties`
properties = (
    "specvol",
    "rho",
    "entropy",
    "enthalpy",
    "internal_energy",
    "helmholtz_energy",
    "cp",
    "sound_speed",
    "kappa",
    "kappa_const_t",
    "alpha",
    "beta_const_t",
    "adiabatic_lapse_rate",
    "chem_potential_relative",
)


@ft.lru_cache(maxsize=10, typed=True)
def load_gibbs(ns, nt, np):
    """Load the function for a partial derivative of the Gibbs function.

    Parameters
    ----------
    ns, nt, np : int

        Order of the partial derivative with respect to Absolute Salinity,
        in-situ temperature, and pressure, respectively.  For example,
        `(0, 0, 0)` loads the specific Gibbs energy itself, `(0, 0, 1)` loads
        its pressure derivative (the specific volume), and `(1, 1, 0)` loads
        its second order mixed derivative with respect to salinity and
        temperature.  Only derivatives up to second order are available.

    Returns
    -------
    fn : function

        `numba.njit`ed function of three scalar arguments, namely Absolute
        Salinity [g/kg], in-situ temperature [deg C] and sea pressure [dbar].

    Raises
    ------
    TypeError
        If any of `ns`, `nt`, `np` is not an integer, or is a `bool`.

    ValueError
        If `(ns, nt, np)` is not one of the supported partial derivatives.
    """

    key = (ns, nt, np)
    if not all(
        isinstance(n, numbers.Integral) and not isinstance(n, bool) for n in key
    ):
        raise TypeError(f"Derivative orders must be integers; got {key}")

    derivs = importlib.import_module("seagibbs.gibbs").derivs
    if key not in derivs:
        raise ValueError(
            f"Partial derivative (ns, nt, np) = {key} not implemented."
            " Currently, (ns, nt, np) must be one of " + list(derivs).__str__()
        )

    return derivs[key]


@ft.lru_cache(maxsize=20)
def load_property(name):
    """Load a thermodynamic property computed from the Gibbs function.

    Parameters
    ----------
    name : str

        Name of a function in `seagibbs.properties`, such as `'rho'`,
        `'sound_speed'` or `'cp'`.  See `seagibbs.tools.properties`.

    Returns
    -------
    fn : function

        `numba.njit`ed function of Absolute Salinity [g/kg], in-situ
        temperature [deg C] and sea pressure [dbar], all scalars.
    """

    if name in properties:
        fn = importlib.import_module("seagibbs.properties").__getattribute__(name)
    else:
        raise ValueError(
            f"Property {name} not (yet) implemented."
            " Currently, name must be one of " + properties.__str__()
        )

    return fn


@ft.lru_cache(maxsize=20)
def vectorize_gibbs(fn):
    """Convert a function that takes scalar inputs into one taking arrays.

    Parameters
    ----------
    fn : function
        Any `numba.njit`ed function taking three scalar inputs, namely
        Absolute Salinity, in-situ temperature and pressure, and returning one
        scalar output, such as `seagibbs.gibbs.g_p` or
        `seagibbs.properties.rho`.

    Returns
    -------
    fn_vec : function
        A `@numba.vectorize`'d version of `fn`, which can take array inputs and
        returns one array output.  The array inputs' shape need not match
        exactly, but must be broadcastable to each other.  Scalar inputs give
        a scalar output.
    """

    @nb.vectorize([nb.f8(nb.f8, nb.f8, nb.f8)])
    def fn_vec(s, t, p):
        return fn(s, t, p)

    # suppress RuntimeWarning when NaN's present in `s` array, or produced
    # at the singular points of the salinity derivatives.
    # see https://github.com/numba/numba/issues/4793
    def fn_vec_nowarning(s, t, p):
        with np.errstate(invalid="ignore"):
            return fn_vec(s, t, p)

    return fn_vec_nowarning
