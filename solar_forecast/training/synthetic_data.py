# solar_forecast/training/synthetic_data.py
"""
Synthetic training data for the production regressor.

Features and targets are independent standard-normal draws, so the fitted
network is effectively a random function of the inputs.
"""

from typing import Optional, Tuple
import numpy as np

from solar_forecast.utils.logger import get_logger

logger = get_logger(__name__)


def generate_synthetic_data(
    num_samples: int = 100,
    num_features: int = 5,
    num_targets: int = 1,
    seed: Optional[int] = None,
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Draw standard-normal features and targets.

    Args:
        num_samples (int): Number of rows.
        num_features (int): Number of feature columns.
        num_targets (int): Number of target columns.
        seed (Optional[int]): Seed for reproducible draws.

    Returns:
        Tuple[np.ndarray, np.ndarray]: X of shape (num_samples, num_features)
            and y of shape (num_samples, num_targets), both float32.
    """
    if num_samples < 1 or num_features < 1 or num_targets < 1:
        raise ValueError(
            f"Sample, feature and target counts must be positive, got "
            f"({num_samples}, {num_features}, {num_targets})"
        )

    rng = np.random.default_rng(seed)
    X = rng.standard_normal((num_samples, num_features)).astype(np.float32)
    y = rng.standard_normal((num_samples, num_targets)).astype(np.float32)

    logger.info(f"Generated synthetic data X:{X.shape}, y:{y.shape}")
    return X, y
