"""Library of simple functions for evaluating the Gibbs function on fields"""

import numpy as np
import xarray as xr

from .tools import vectorize_gibbs


def xr_to_np(S):
    """Convert xarray into numpy array"""
    if hasattr(S, "values"):
        S = S.values
    return S


def _xr_in(S):
    # Prepare xarray container for output: like input S but without its attributes
    if isinstance(S, xr.DataArray):
        sxr = xr.full_like(S, 0, dtype=np.float64)
        sxr.attrs.clear()
        return sxr
    else:
        return None


def _xr_out(s, sxr):
    # Return xarrays if inputs were xarrays
    if isinstance(sxr, xr.DataArray):
        sxr.data = s
        return sxr
    else:
        return s


def broadcast_sa_t_p(SA, t, p):
    """Broadcast pressure against salinity and temperature fields

    Parameters
    ----------
    SA, t : float or ndarray
        Absolute Salinity [g/kg] and in-situ temperature [deg C].  Must have
        the same shape.

    p : float or ndarray
        Sea pressure [dbar].  One of
        - a scalar, or an array with one element, used everywhere;
        - an array of the same shape as `SA`;
        - a 1D array whose length is that of the last dimension of `SA`;
        - a 1D array whose length is that of the first dimension of `SA`;
        - a 2D array with one row or one column, broadcastable to `SA`;
        - a 2D column, `(N, 1)`, whose length `N` is that of the last
          dimension of the 2D `SA`.

    Returns
    -------
    SA, t, p : ndarray
        The inputs as float arrays, all of the same shape as `SA`.

    Raises
    ------
    ValueError
        If `SA` and `t` differ in shape, or `p` cannot be broadcast to `SA`.

    Notes
    -----
    A 1D `p` whose length matches both the first and last dimensions of `SA`
    is taken to vary along the last dimension.
    """

    SA, t, p = (np.asarray(xr_to_np(x), dtype=np.float64) for x in (SA, t, p))

    if SA.shape != t.shape:
        raise ValueError("SA and t must have same dimensions")

    if p.shape == SA.shape:
        pass
    elif p.size == 1:
        p = np.full(SA.shape, p.reshape(()))
    elif p.ndim == 1 and SA.ndim >= 1 and p.shape[0] == SA.shape[-1]:
        p = np.broadcast_to(p, SA.shape)
    elif p.ndim == 1 and SA.ndim >= 1 and p.shape[0] == SA.shape[0]:
        # p is a column: copy across each row
        p = np.broadcast_to(p.reshape((-1,) + (1,) * (SA.ndim - 1)), SA.shape)
    elif p.ndim == 2 and SA.ndim == 2 and p.shape in (
        (1, SA.shape[1]),
        (SA.shape[0], 1),
    ):
        p = np.broadcast_to(p, SA.shape)
    elif p.ndim == 2 and SA.ndim == 2 and p.shape == (SA.shape[1], 1):
        # p is a transposed row: transpose, then copy down each column
        p = np.broadcast_to(p.T, SA.shape)
    else:
        raise ValueError("Inputs array dimensions arguments do not agree")

    return SA, t, p


def apply_sa_t_p(fn, SA, t, p):
    """Evaluate a scalar function of salinity, temperature and pressure on fields

    Parameters
    ----------
    fn : function
        `numba.njit`ed function of three scalars: Absolute Salinity,
        in-situ temperature and pressure.  For example, any function in
        `seagibbs.properties`, or any of the partial derivatives of the Gibbs
        function in `seagibbs.gibbs`.

    SA, t, p : float or ndarray or xarray.DataArray
        See `broadcast_sa_t_p`

    Returns
    -------
    out : float or ndarray or xarray.DataArray
        `fn` evaluated elementwise, with the same shape as `SA`.  If `SA` is
        an `xarray.DataArray`, `out` is a `DataArray` with the same
        coordinates as `SA`.  If all inputs are scalars, `out` is a scalar.

    Examples
    --------
    >>> from seagibbs.properties import rho
    >>> rho_section = apply_sa_t_p(rho, SA, t, p)  # SA, t are 2D, p is 1D
    """

    sxr = _xr_in(SA)
    scalar = all(np.ndim(x) == 0 for x in (SA, t, p))

    SA, t, p = broadcast_sa_t_p(SA, t, p)
    out = vectorize_gibbs(fn)(SA, t, p)

    if scalar:
        return out[()]
    return _xr_out(out, sxr)
