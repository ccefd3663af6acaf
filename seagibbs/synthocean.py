import numpy as np


def synthocean(shape, pbot=4000.0, SSSSa=0.3, zonally_uniform=False, wrap=(False, False)):
    """
    Synthetic idealization of the Pacific and Southern Ocean with tuneable parameters

    Parameters
    ----------
    shape : tuple of int
        A three element tuple giving the dimensions of the output.  The elements
        specify the number of points in longitude, latitude, and depth space,
        respectively.

    pbot : float, Default 4000.0
        Sea pressure [dbar] at the bottommost data point, i.e. `p[-1]`

    SSSSa : float, Default 0.3
        Southern Sea Surface Salinity anomaly: the sea surface salinity is
        increased by `SSSSa` in the southernmost grid cells, and by 0 in the
        northernmost grid cells, and linearly in between.

    zonally_uniform : bool, Default False
        If `True`, the synthetic ocean is uniform in longitude.  If `False`,
        some zonal structure is added to the surface salinity and temperature.

    wrap : tuple of bool, Default (False, False)
        Specify periodicity of the lateral dimensions.
        When `wrap[0]` is `False`, `SA[0, :, :] = t[0, :, :] = nan`.
        When `wrap[1]` is `False`, `SA[:, 0, :] = t[:, 0, :] = nan`.

    Returns
    -------
    SA, t : ndarray
        Absolute Salinity [g/kg] and in-situ temperature [deg C] as 3D arrays.

    p : ndarray
        Sea pressure [dbar] as a 1D array, increasing cubicly from 0 to `pbot`.
    """

    ni, nj, nk = shape

    X = np.linspace(-1, 1, ni).reshape((ni, 1, 1))  # longitude (scaled)
    Y = np.linspace(-80, 60, nj).reshape((1, nj, 1))  # latitude
    x = (Y - -7) / 41.14  # latitude, normalized by mean -7 and std 41.14

    # Surface temperature: quintic fit in normalized latitude
    # fmt: off
    ts = 0.6265 * x**5 + 3.269 * x**4 - 3.602 * x**3 - 18.93 * x**2 + 5.927 * x + 27.41
    # fmt: on

    if zonally_uniform:
        ts = np.tile(ts, (ni, 1, 1))
    else:
        ts = ts - 1.5 * X

    # contract extreme values into a given range
    tmin = -1.8
    tmax = 30.0
    ts = (ts - np.min(ts)) / (np.max(ts) - np.min(ts)) * (tmax - tmin) + tmin

    # Surface salinity: quartic fit in normalized latitude
    Ss = 0.2221 * x**4 - 0.09487 * x**3 - 1.355 * x**2 - 0.126 * x + 35.59

    if zonally_uniform:
        Ss = np.tile(Ss, (ni, 1, 1))
    else:
        Ss = Ss + (0.4 + 0.5 * X - 0.8 * X**2)

    # Tilt surface salinity function, so high SSS in South (if SSSSa > 0)
    Ss = Ss + np.linspace(SSSSa, 0, nj).reshape((1, nj, 1))

    # Bottom water is linearly warmer and fresher moving northwards
    tb = np.linspace(0, 1, nj).reshape((1, nj, 1)) + (tmin - 0.1)
    Sb = np.linspace(34.7, 34.5, nj).reshape((1, nj, 1))

    # Linear interpolation of surface -> bottom data
    f = np.linspace(0, 1, nk).reshape((1, 1, nk))
    SA = f * (Sb - Ss) + Ss
    t = f * (tb - ts) + ts

    p = np.linspace(0, 1, nk) ** 3 * pbot

    # Add walls
    if not wrap[0]:
        SA[0, :, :] = np.nan
        t[0, :, :] = np.nan
    if not wrap[1]:
        SA[:, 0, :] = np.nan
        t[:, 0, :] = np.nan

    return SA, t, p
