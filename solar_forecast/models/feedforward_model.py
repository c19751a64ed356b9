from typing import Any, Dict, List, Optional
import torch

import torch.nn as nn
from torch.utils.data import DataLoader, TensorDataset
import numpy as np

from solar_forecast.models.base_model import BaseModel


class FeedForwardModel(BaseModel):
    """
    Dense regressor (input -> hidden ReLU -> linear output) built with PyTorch.

    Trained with Adam on mean squared error. Once trained it is only used
    for forward passes; there is no retraining path.
    """

    class _DenseNet(nn.Module):
        """
        Internal PyTorch network definition.

        Args:
            input_size (int): Number of input features.
            hidden_size (int): Number of hidden ReLU units.
            output_size (int): Number of linear outputs.
        """
        def __init__(self, input_size: int, hidden_size: int, output_size: int):
            super().__init__()
            self.hidden = nn.Linear(input_size, hidden_size)
            self.activation = nn.ReLU()
            self.output = nn.Linear(hidden_size, output_size)

        def forward(self, x: torch.Tensor) -> torch.Tensor:
            return self.output(self.activation(self.hidden(x)))

    def __init__(self, model_params: Optional[Dict[str, Any]] = None) -> None:
        """
        Initialize FeedForwardModel with hyperparameters.

        Args:
            model_params (Optional[Dict[str, Any]]): Dictionary of model hyperparameters.
                Expected keys:
                    - input_size (int): Number of input features.
                    - hidden_size (int): Number of hidden units.
                    - output_size (int): Number of outputs.
                    - learning_rate (float): Learning rate for Adam.
                    - batch_size (int): Mini-batch size for training.
                    - epochs (int): Number of passes over the training data.
                    - seed (Optional[int]): Seed for weight init and shuffling.
        """
        super().__init__(model_params)

        self.input_size = self.model_params.get("input_size", 5)
        self.hidden_size = self.model_params.get("hidden_size", 10)
        self.output_size = self.model_params.get("output_size", 1)
        self.learning_rate = self.model_params.get("learning_rate", 0.001)
        self.batch_size = self.model_params.get("batch_size", 32)
        self.epochs = self.model_params.get("epochs", 10)
        self.seed = self.model_params.get("seed")

        self.generator = torch.Generator()
        if self.seed is not None:
            self.generator.manual_seed(self.seed)
            # Seeded weight init must not touch the process-wide torch RNG.
            with torch.random.fork_rng(devices=[]):
                torch.manual_seed(self.seed)
                self.model = self._build_network()
        else:
            self.generator.seed()
            self.model = self._build_network()

        self.criterion = nn.MSELoss()
        self.optimizer = torch.optim.Adam(self.model.parameters(), lr=self.learning_rate)

    def _build_network(self) -> nn.Module:
        return self._DenseNet(
            input_size=self.input_size,
            hidden_size=self.hidden_size,
            output_size=self.output_size,
        )

    def train(self, X: np.ndarray, y: np.ndarray) -> List[float]:
        """
        Fit the network for the configured number of epochs.

        Args:
            X (np.ndarray): Training features, shape (num_samples, input_size).
            y (np.ndarray): Training targets, shape (num_samples, output_size).

        Returns:
            List[float]: Mean training loss per epoch.
        """
        if X.ndim != 2 or X.shape[1] != self.input_size:
            raise ValueError(f"Expected features of shape (n, {self.input_size}), got {X.shape}")
        if y.ndim != 2 or y.shape != (X.shape[0], self.output_size):
            raise ValueError(f"Expected targets of shape ({X.shape[0]}, {self.output_size}), got {y.shape}")

        train_dataset = TensorDataset(
            torch.from_numpy(X).float(), torch.from_numpy(y).float()
        )
        train_loader = DataLoader(
            train_dataset, batch_size=self.batch_size, shuffle=True, generator=self.generator
        )

        self.logger.info(f"Starting training for {self.epochs} epochs on {len(train_dataset)} samples...")
        history: List[float] = []

        for epoch in range(1, self.epochs + 1):
            self.model.train()
            epoch_loss = 0.0

            for batch_X, batch_y in train_loader:
                self.optimizer.zero_grad()
                outputs = self.model(batch_X)
                loss = self.criterion(outputs, batch_y)
                loss.backward()
                self.optimizer.step()

                epoch_loss += loss.item() * batch_X.size(0)

            avg_train_loss = epoch_loss / len(train_loader.dataset)
            history.append(avg_train_loss)
            self.logger.info(f"Epoch [{epoch}/{self.epochs}] - Train Loss: {avg_train_loss:.6f}")

        self.model.eval()
        self.is_trained = True
        return history

    def predict(self, X: np.ndarray) -> np.ndarray:
        """
        Run a forward pass.

        Args:
            X (np.ndarray): Features, shape (num_samples, input_size).

        Returns:
            np.ndarray: Predicted values, shape (num_samples, output_size).
        """
        self.model.eval()
        with torch.no_grad():
            inputs = torch.from_numpy(np.asarray(X, dtype=np.float32))
            outputs = self.model(inputs)
            predictions = outputs.numpy()
        return predictions

    def get_params(self) -> Dict[str, Any]:
        """
        Get a copy of the model's current hyperparameters.

        Returns:
            Dict[str, Any]: Dictionary containing model hyperparameters.
        """
        self.logger.debug("Fetching model parameters.")
        return {
            "input_size": self.input_size,
            "hidden_size": self.hidden_size,
            "output_size": self.output_size,
            "learning_rate": self.learning_rate,
            "batch_size": self.batch_size,
            "epochs": self.epochs,
            "seed": self.seed,
        }
