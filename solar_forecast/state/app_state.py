# solar_forecast/state/app_state.py

from dataclasses import dataclass, field, replace
from typing import Optional, Union

from solar_forecast.state.input_state import InputVector, update_input
from solar_forecast.utils.config_loader import InputsConfig


@dataclass(frozen=True)
class AppState:
    """
    Everything one dashboard session shows.

    Attributes:
        inputs (InputVector): Current slider values.
        prediction (float): Latest clamped prediction; 0.0 until one is computed.
        has_prediction (bool): True once a forward pass has succeeded.
        notice (Optional[str]): Last readiness message for the user, if any.
    """
    inputs: InputVector = field(default_factory=InputVector)
    prediction: float = 0.0
    has_prediction: bool = False
    notice: Optional[str] = None


def initial_state(inputs_config: Optional[InputsConfig] = None) -> AppState:
    """Build the starting state from slider defaults and the fixed time of day."""
    inputs_config = inputs_config or InputsConfig()
    vector = InputVector(time_of_day=inputs_config.time_of_day)
    for name, slider in inputs_config.sliders.items():
        vector = update_input(vector, name, slider.default)
    return AppState(inputs=vector)


def with_input(state: AppState, field_name: str, value: Union[int, float]) -> AppState:
    """Single entry point for changing one input field."""
    inputs = update_input(state.inputs, field_name, value)
    if inputs is state.inputs:
        return state
    return replace(state, inputs=inputs)
