from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional
import numpy as np

from solar_forecast.utils.logger import get_logger

logger = get_logger(__name__)


class BaseModel(ABC):
    """
    Abstract base class for all production regressors.
    Defines a unified interface and shared model parameter handling.
    """

    def __init__(self, model_params: Optional[Dict[str, Any]] = None) -> None:
        """
        Initialize model with parameters and set up logging.

        Args:
            model_params (Optional[Dict[str, Any]]): Configuration dictionary for model and training.
        """
        self.model_params = model_params or {}
        self.logger = logger
        self.is_trained = False

    @abstractmethod
    def train(self, X: np.ndarray, y: np.ndarray) -> List[float]:
        """
        Fit the model on training data.

        Args:
            X (np.ndarray): Feature matrix, shape (num_samples, num_features).
            y (np.ndarray): Targets, shape (num_samples, num_targets).

        Returns:
            List[float]: Mean training loss per epoch.
        """
        raise NotImplementedError("Subclasses must implement 'train'")

    @abstractmethod
    def predict(self, X: np.ndarray) -> np.ndarray:
        """
        Generate predictions using features X.

        Args:
            X (np.ndarray): Feature matrix for prediction.

        Returns:
            np.ndarray: Predicted values.
        """
        raise NotImplementedError("Subclasses must implement 'predict'")

    def get_params(self) -> Dict[str, Any]:
        """
        Return the model's configuration parameters.

        Returns:
            Dict[str, Any]: Model hyperparameters and configurations.
        """
        return self.model_params.copy()
