"""Test pygaschem/core/models.py"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
import pytest
import xarray as xr

from pygaschem import Model, ModelParams
from pygaschem.models.photolysis import FastJXParams


@dataclass
class ModelTestParams(ModelParams):
    """Test model params."""

    param1: str = "param1"
    param2: int = 1
    window: np.timedelta64 = np.timedelta64(0, "s")


class ModelTest(Model):
    """Test model doubling the air temperature."""

    name = "test"
    long_name = "my test model"
    default_params = ModelTestParams

    def eval(self, source: xr.Dataset | None = None, **params: Any) -> xr.Dataset:
        self.update_params(params)
        self.set_source(source)
        self.require_source_vars("air_temperature")
        self.source["double"] = 2.0 * self.source["air_temperature"]
        return self.source


@pytest.fixture()
def ds() -> xr.Dataset:
    """Dataset with a single air temperature variable."""
    return xr.Dataset(
        {"air_temperature": ("level", [288.0, 250.0])},
        coords={"level": [1000.0, 500.0]},
        attrs={"param2": 5},
    )


def test_model_params() -> None:
    """Check parameter loading order."""
    model = ModelTest()
    assert model.params == {
        "copy_source": True,
        "param1": "param1",
        "param2": 1,
        "window": np.timedelta64(0, "s"),
    }

    model = ModelTest({"param1": "a"}, param1="b", param2=3)
    assert model.params["param1"] == "b"
    assert model.params["param2"] == 3

    model = ModelTest(ModelTestParams(param2=4))
    assert model.params["param2"] == 4

    model.update_params(param2=7)
    assert model.params["param2"] == 7


def test_model_params_errors() -> None:
    """Unknown parameters and foreign parameter classes are rejected."""
    with pytest.raises(KeyError, match="Unknown parameter 'param3'"):
        ModelTest(param3=1)

    with pytest.raises(TypeError, match="must be of type ModelTestParams"):
        ModelTest(FastJXParams())


def test_timedelta_params() -> None:
    """Timedelta-like values are converted to np.timedelta64."""
    model = ModelTest(window="30min")
    assert model.params["window"] == np.timedelta64(30, "m")
    assert isinstance(model.params["window"], np.timedelta64)


def test_model_repr() -> None:
    """The representation names the model and its parameters."""
    out = repr(ModelTest())
    assert "ModelTest model" in out
    assert "my test model" in out


def test_eval_copies_source(ds: xr.Dataset) -> None:
    """The source is copied unless disabled."""
    out = ModelTest().eval(ds)
    assert "double" in out
    assert "double" not in ds
    np.testing.assert_array_equal(out["double"], [576.0, 500.0])

    out = ModelTest(copy_source=False).eval(ds)
    assert out is ds
    assert "double" in ds


def test_source_errors(ds: xr.Dataset) -> None:
    """Sources must be datasets with the required variables."""
    with pytest.raises(TypeError, match="Unknown source type"):
        ModelTest().eval(ds["air_temperature"])

    with pytest.raises(KeyError, match="missing required variables: air_temperature"):
        ModelTest().eval(ds.rename({"air_temperature": "t"}))
