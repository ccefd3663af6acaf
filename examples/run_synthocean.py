# In[Imports]

import numpy as np

from seagibbs import gibbs, apply_sa_t_p
from seagibbs.synthocean import synthocean
from seagibbs import properties as props

# In[Make a synthetic ocean]

# 3D fields of Absolute Salinity [g/kg] and in-situ temperature [deg C], on
# a 1D vector of sea pressure [dbar] increasing cubicly going down
SA, t, p = synthocean((16, 32, 50), pbot=5000.0, wrap=(True, False))

# In[Partial derivatives of the Gibbs function]

# `gibbs` needs inputs of identical shape, so broadcast the pressure first
P = np.broadcast_to(p, SA.shape)

g_p = gibbs(0, 0, 1, SA, t, P)  # specific volume [m3 kg-1]
g_tt = gibbs(0, 2, 0, SA, t, P)  # [J kg-1 K-2]
g_st = gibbs(1, 1, 0, SA, t, P)  # [J kg-1 (g/kg)-1 K-1]

print(f"specific volume ranges from {np.nanmin(g_p):.6e} to {np.nanmax(g_p):.6e} m3/kg")

# In[Thermodynamic properties]

# `apply_sa_t_p` broadcasts `p` against `SA` and `t` itself
rho = apply_sa_t_p(props.rho, SA, t, p)
c = apply_sa_t_p(props.sound_speed, SA, t, p)
cp = apply_sa_t_p(props.cp, SA, t, p)

print(f"in-situ density ranges from {np.nanmin(rho):.4f} to {np.nanmax(rho):.4f} kg/m3")
print(f"sound speed ranges from {np.nanmin(c):.2f} to {np.nanmax(c):.2f} m/s")
print(f"heat capacity ranges from {np.nanmin(cp):.2f} to {np.nanmax(cp):.2f} J/(kg K)")

# Depth of the sound speed minimum (the SOFAR channel) in each water column
k = np.argmin(np.where(np.isnan(c), np.inf, c), axis=-1)
print(f"sound speed minimum lies between {p[k[:, 1:].min()]:.0f} and {p[k[:, 1:].max()]:.0f} dbar")

# In[Singular points]

# The salinity derivatives are NaN at zero salinity
print(gibbs(1, 0, 0, 0.0, 10.0, 0.0), gibbs(2, 0, 0, 0.0, 10.0, 0.0))
