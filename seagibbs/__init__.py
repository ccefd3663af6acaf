__version__ = "1.0.0"

import importlib as _importlib

# Import from modules
from .tools import load_gibbs, load_property, vectorize_gibbs
from .gibbs import gibbs  # the function shadows the `gibbs` submodule
from .lib import apply_sa_t_p, broadcast_sa_t_p

# List of modules not explicitly imported above
modules = ["lib", "properties", "synthocean", "tools"]

__all__ = modules + [
    k for (k, v) in locals().items() if callable(v) and not k.startswith("_")
]  # all local, public functions


def __dir__():
    return __all__


# Lazy load of modules.
# Note only `properties.py` and `synthocean.py` are lazily loaded; the others
# get loaded implicitly by the above imports.
def __getattr__(name):
    if name in modules:
        return _importlib.import_module(f"seagibbs.{name}")
    else:
        try:
            return globals()[name]
        except KeyError:
            raise AttributeError(f"Module 'seagibbs' has no attribute '{name}'")
