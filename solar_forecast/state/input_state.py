# solar_forecast/state/input_state.py

from dataclasses import dataclass, fields, replace
from typing import Tuple, Union
import numpy as np

from solar_forecast.utils.logger import get_logger

logger = get_logger(__name__)

# Column order the network was built for
FIELD_ORDER: Tuple[str, ...] = (
    "temperature",
    "cloud_cover",
    "wind_speed",
    "humidity",
    "time_of_day",
)


@dataclass(frozen=True)
class InputVector:
    """
    Current environmental readings fed to the network.

    Bounds are enforced by the dashboard controls only; nothing here
    clamps or validates the numbers.
    """
    temperature: float = 25.0
    cloud_cover: float = 20.0
    wind_speed: float = 10.0
    humidity: float = 60.0
    time_of_day: float = 12.0

    def to_array(self) -> np.ndarray:
        """Return a (1, 5) float32 row in FIELD_ORDER."""
        return np.array([[getattr(self, name) for name in FIELD_ORDER]], dtype=np.float32)


def update_input(vector: InputVector, field: str, value: Union[int, float]) -> InputVector:
    """
    Return a new InputVector with a single field replaced.

    Args:
        vector (InputVector): Current inputs.
        field (str): Field name from FIELD_ORDER.
        value (Union[int, float]): New value, stored as-is (last write wins).

    Returns:
        InputVector: Updated inputs.

    Raises:
        ValueError: If the field is unknown or the value is not numeric.
    """
    known = {f.name for f in fields(InputVector)}
    if field not in known:
        raise ValueError(f"Unknown input field '{field}'. Expected one of {sorted(known)}")

    try:
        numeric = float(value)
    except (TypeError, ValueError) as e:
        raise ValueError(f"Input '{field}' must be numeric, got {value!r}") from e

    if getattr(vector, field) == numeric:
        return vector

    logger.debug(f"Input '{field}' changed from {getattr(vector, field)} to {numeric}")
    return replace(vector, **{field: numeric})
