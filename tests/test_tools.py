import sys
import numpy as np
import pytest

import seagibbs
from seagibbs.tools import load_gibbs, load_property, vectorize_gibbs
from seagibbs.gibbs import derivs, g_p
from seagibbs import properties


@pytest.mark.parametrize("key", list(derivs))
def test_load_gibbs(key):
    assert load_gibbs(*key) is derivs[key]


def test_load_gibbs_numpy_ints():
    assert load_gibbs(np.int64(0), np.int64(0), np.int64(1)) is g_p


def test_load_gibbs_errors():
    with pytest.raises(ValueError):
        load_gibbs(1, 1, 1)
    with pytest.raises(TypeError):
        load_gibbs(0, 0, 1.0)
    with pytest.raises(TypeError):
        load_gibbs("0", 0, 0)
    with pytest.raises(TypeError):
        load_gibbs(True, 0, 0)


@pytest.mark.parametrize("name", seagibbs.tools.properties)
def test_load_property(name):
    fn = load_property(name)
    assert fn is getattr(properties, name)
    assert np.isfinite(fn(35.0, 10.0, 1000.0))


def test_load_property_unknown():
    with pytest.raises(ValueError):
        load_property("cabbeling")


def test_vectorize_gibbs():
    g_p_ufunc = vectorize_gibbs(g_p)
    assert vectorize_gibbs(g_p) is g_p_ufunc  # cached

    # Smoketest: broadcasting
    s = np.ones((4, 5), dtype=float) * 35.0
    t = np.ones((5,), dtype=float) * 25.0
    res = g_p_ufunc(s, t, 2000.0)
    assert res.shape == s.shape
    assert np.allclose(res, 9.6929444132546228e-04, rtol=1e-12, atol=0)


def test_vectorize_gibbs_nan_no_warning():
    g_s_ufunc = vectorize_gibbs(derivs[(1, 0, 0)])
    s = np.array([np.nan, 0.0, 35.0])
    with np.errstate(invalid="raise"):
        res = g_s_ufunc(s, 10.0, 100.0)
    assert np.array_equal(np.isnan(res), [True, True, False])


def test_package_namespace():
    # the `gibbs` function shadows the `gibbs` submodule
    assert callable(seagibbs.gibbs)
    assert sys.modules["seagibbs.gibbs"].derivs is derivs
    assert seagibbs.gibbs(0, 0, 0, 0.0, 0.0, 0.0) == 101.342743139674
    assert "synthocean" in dir(seagibbs)
    assert callable(seagibbs.synthocean.synthocean)
