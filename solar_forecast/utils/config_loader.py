# solar_forecast/utils/config_loader.py

from pydantic import BaseModel, Field, model_validator
from typing import Dict, Optional
from solar_forecast.utils.config import load_config  # plain YAML loader


# -------------------
# Pydantic Configs
# -------------------
class SliderConfig(BaseModel):
    label: str
    unit: str
    min_value: float
    max_value: float
    default: float
    step: float = 1.0

    @model_validator(mode="after")
    def check_bounds(self) -> "SliderConfig":
        if self.min_value >= self.max_value:
            raise ValueError(f"Slider '{self.label}' min_value must be below max_value")
        if not self.min_value <= self.default <= self.max_value:
            raise ValueError(f"Slider '{self.label}' default {self.default} is outside its bounds")
        return self


def _default_sliders() -> Dict[str, SliderConfig]:
    return {
        "temperature": SliderConfig(label="Temperature", unit="°C", min_value=-10, max_value=45, default=25),
        "cloud_cover": SliderConfig(label="Cloud Cover", unit="%", min_value=0, max_value=100, default=20),
        "wind_speed": SliderConfig(label="Wind Speed", unit="km/h", min_value=0, max_value=50, default=10),
        "humidity": SliderConfig(label="Humidity", unit="%", min_value=0, max_value=100, default=60),
    }


class InputsConfig(BaseModel):
    sliders: Dict[str, SliderConfig] = Field(default_factory=_default_sliders)
    time_of_day: float = 12.0


class NetworkParams(BaseModel):
    input_size: int = 5
    hidden_size: int = 10
    output_size: int = 1
    learning_rate: float = 0.001
    batch_size: int = 32
    epochs: int = 10
    seed: Optional[int] = None


class SyntheticDataConfig(BaseModel):
    num_samples: int = Field(default=100, ge=1)
    num_features: int = Field(default=5, ge=1)
    num_targets: int = Field(default=1, ge=1)
    seed: Optional[int] = None


class ChartConfig(BaseModel):
    points: int = Field(default=24, ge=1)
    scale: float = Field(default=10.0, gt=0)


class DisplayConfig(BaseModel):
    unit: str = "kW"
    decimals: int = Field(default=2, ge=0)


class LoggingConfig(BaseModel):
    level: str = "INFO"
    file: Optional[str] = None


class ErrorLogConfig(BaseModel):
    path: Optional[str] = None


class FullConfig(BaseModel):
    inputs: InputsConfig = Field(default_factory=InputsConfig)
    network: NetworkParams = Field(default_factory=NetworkParams)
    synthetic_data: SyntheticDataConfig = Field(default_factory=SyntheticDataConfig)
    chart: ChartConfig = Field(default_factory=ChartConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    error_log: ErrorLogConfig = Field(default_factory=ErrorLogConfig)

    @model_validator(mode="after")
    def check_feature_width(self) -> "FullConfig":
        if self.synthetic_data.num_features != self.network.input_size:
            raise ValueError(
                "synthetic_data.num_features must match network.input_size "
                f"({self.synthetic_data.num_features} != {self.network.input_size})"
            )
        if self.synthetic_data.num_targets != self.network.output_size:
            raise ValueError(
                "synthetic_data.num_targets must match network.output_size "
                f"({self.synthetic_data.num_targets} != {self.network.output_size})"
            )
        return self


# -------------------
# Functions
# -------------------
def load_typed_config(config_path: Optional[str] = None) -> FullConfig:
    """
    Load and validate the full config as a typed Pydantic model.

    Sections missing from the YAML file keep their built-in defaults.

    Args:
        config_path (Optional[str]): Path to main YAML config file.
            If None, the built-in defaults are returned.

    Returns:
        FullConfig: Typed configuration object.
    """
    if config_path is None:
        return FullConfig()

    raw_config = load_config(config_path)
    return FullConfig(**raw_config)
