import pytest
from solar_forecast.models.base_model import BaseModel

# Dummy model to test abstract base class behavior
class DummyModel(BaseModel):
    def train(self, X, y): return []
    def predict(self, X): return []

# === Test Case: TC20251019_baseModel_001 ===
# Description : Test that BaseModel cannot be instantiated directly due to it being an abstract class.
# Component   : solar_forecast/models/base_model.py
# Category    : Unit
def test_base_model_is_abstract():

    with pytest.raises(TypeError):
        BaseModel()

# === Test Case: TC20251019_baseModel_002 ===
# Description : Test that params are stored and returned as a copy.
# Component   : solar_forecast/models/base_model.py
# Category    : Unit
def test_base_model_params_copy():
    model = DummyModel({"epochs": 3})
    params = model.get_params()
    params["epochs"] = 99

    assert model.get_params() == {"epochs": 3}
    assert model.is_trained is False

# === Test Case: TC20251019_baseModel_003 ===
# Description : Test that missing params default to an empty dict.
# Component   : solar_forecast/models/base_model.py
# Category    : Unit
def test_default_params_empty():

    model = DummyModel()

    assert model.get_params() == {}
