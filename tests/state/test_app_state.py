from solar_forecast.state.app_state import AppState, initial_state, with_input
from solar_forecast.utils.config_loader import InputsConfig, SliderConfig


def test_initial_state_from_defaults():
    state = initial_state()

    assert state.inputs.temperature == 25.0
    assert state.inputs.cloud_cover == 20.0
    assert state.inputs.wind_speed == 10.0
    assert state.inputs.humidity == 60.0
    assert state.inputs.time_of_day == 12.0
    assert state.prediction == 0.0
    assert state.has_prediction is False
    assert state.notice is None


def test_initial_state_follows_config():
    config = InputsConfig(
        sliders={"temperature": SliderConfig(label="Temperature", unit="°C", min_value=-10, max_value=45, default=5)},
        time_of_day=9,
    )

    state = initial_state(config)

    assert state.inputs.temperature == 5.0
    assert state.inputs.time_of_day == 9.0


def test_with_input_replaces_only_inputs():
    state = AppState(prediction=3.2, has_prediction=True)

    updated = with_input(state, "cloud_cover", 80)

    assert updated.inputs.cloud_cover == 80.0
    assert updated.prediction == 3.2
    assert updated.has_prediction is True
    assert state.inputs.cloud_cover == 20.0


def test_with_input_same_value_returns_same_state():
    state = AppState()

    assert with_input(state, "humidity", 60) is state


def test_example_scenario_inputs():
    state = initial_state()
    for name, value in {"temperature": 30, "cloud_cover": 50, "wind_speed": 5, "humidity": 70}.items():
        state = with_input(state, name, value)

    assert state.inputs.to_array().tolist() == [[30.0, 50.0, 5.0, 70.0, 12.0]]
