"""
Single hidden layer perceptron trained online by backpropagation.

    hidden = f(W_ih · x + b_h)
    output = f(W_ho · hidden + b_o)

Each call to ``train`` performs one stochastic gradient step on one example.
"""

import numbers
import numpy as np

from typing import Callable, List, Optional, Sequence, Union

from perceptron.activation_functions import ActivationFunction, ActivationKind, get_activation
from perceptron.utils.config_loader import load_global_config, get_config_section
from perceptron.utils.error_calls import ActivationNotConfiguredError, InvalidConfigError
from perceptron.utils.matrix import Matrix
from logs.logger import get_logger, PrettyPrinter

logger = get_logger("Multi-Layer Perceptron")
printer = PrettyPrinter

# Strategies are always evaluated at unit gain and zero center
BOUND_GAIN = 1.0
BOUND_CENTER = 0.0

class MultiLayerPerceptron:
    def __init__(self, input_nodes: int, hidden_nodes: int, output_nodes: int,
                 learning_rate: Optional[float] = None,
                 rng: Union[np.random.Generator, int, None] = None):
        """
        Args:
            input_nodes: Size of the input vector
            hidden_nodes: Number of neurons in the hidden layer
            output_nodes: Size of the output vector
            learning_rate: Step size, defaults to the configured value
            rng: numpy Generator or integer seed used for weight initialization
        """
        self.config = load_global_config()
        self.mlp_config = get_config_section('multilayer_perceptron')

        for name, value in (('input_nodes', input_nodes), ('hidden_nodes', hidden_nodes),
                            ('output_nodes', output_nodes)):
            if not isinstance(value, numbers.Integral) or isinstance(value, bool) or value < 1:
                raise InvalidConfigError(f"{name} must be a positive integer, got {value!r}")

        self._input_nodes = int(input_nodes)
        self._hidden_nodes = int(hidden_nodes)
        self._output_nodes = int(output_nodes)
        self._learning_rate = float(learning_rate if learning_rate is not None
                                    else self.mlp_config.get('learning_rate', 0.1))

        if not isinstance(rng, np.random.Generator):
            rng = np.random.default_rng(rng if rng is not None else self.mlp_config.get('seed'))

        self.weights_input_hidden = Matrix(self._hidden_nodes, self._input_nodes).randomize(rng)
        self.weights_hidden_output = Matrix(self._output_nodes, self._hidden_nodes).randomize(rng)
        self.bias_hidden = Matrix(self._hidden_nodes, 1).randomize(rng)
        self.bias_output = Matrix(self._output_nodes, 1).randomize(rng)

        self._activation: Optional[ActivationFunction] = None
        # (activate, derivative) pair, replaced as a whole on reconfiguration
        self._transforms = None
        self._average_error = 0.0

        logger.info(f"Multi-Layer Perceptron succesfully initialized "
                    f"({self._input_nodes}-{self._hidden_nodes}-{self._output_nodes}, lr={self._learning_rate})")

    @property
    def input_nodes(self) -> int:
        return self._input_nodes

    @property
    def hidden_nodes(self) -> int:
        return self._hidden_nodes

    @property
    def output_nodes(self) -> int:
        return self._output_nodes

    @property
    def learning_rate(self) -> float:
        return self._learning_rate

    @property
    def activation(self) -> Optional[ActivationFunction]:
        """The bound built-in strategy, None when unbound or bound to plain callables."""
        return self._activation

    @property
    def last_average_error(self) -> float:
        """Mean absolute output error of the most recent training step."""
        return self._average_error

    # --- Configuration ---
    def select_activation(self, kind: Union[ActivationKind, str]):
        """Bind one of the registered activation functions."""
        strategy = get_activation(kind)
        self._transforms = (
            lambda x: strategy.activate(x, BOUND_GAIN, BOUND_CENTER),
            lambda x: strategy.derivative(x, BOUND_GAIN),
        )
        self._activation = strategy
        logger.info(f"Activation function set to {strategy!r}")

    def bind_activation(self, activate_fn: Callable[[float], float],
                        derivative_fn: Callable[[float], float]):
        """Bind an arbitrary activation/derivative pair of unary callables."""
        if not callable(activate_fn) or not callable(derivative_fn):
            raise TypeError("activate_fn and derivative_fn must be callable")
        self._transforms = (activate_fn, derivative_fn)
        self._activation = None
        logger.info("Custom activation function bound")

    def _require_transforms(self):
        if self._transforms is None:
            raise ActivationNotConfiguredError()
        return self._transforms

    # --- Inference ---
    def _forward(self, inputs: Matrix, activate: Callable[[float], float]):
        hidden = Matrix.multiply(self.weights_input_hidden, inputs)
        hidden.add_(self.bias_hidden)
        hidden.map_(activate)

        outputs = Matrix.multiply(self.weights_hidden_output, hidden)
        outputs.add_(self.bias_output)
        outputs.map_(activate)
        return hidden, outputs

    def infer(self, inputs: Sequence[float]) -> List[float]:
        """Feed-forward pass. Does not modify the network."""
        activate, _ = self._require_transforms()
        _, outputs = self._forward(Matrix.from_array(inputs), activate)
        return outputs.to_array()

    def test(self, inputs: Sequence[float]) -> List[float]:
        return self.infer(inputs)

    # --- Training ---
    def train(self, inputs: Sequence[float], targets: Sequence[float]):
        """One gradient-descent step on a single (inputs, targets) example."""
        activate, derivative = self._require_transforms()

        inputs = Matrix.from_array(inputs)
        hidden, outputs = self._forward(inputs, activate)
        targets = Matrix.from_array(targets)

        # ERROR = TARGETS - OUTPUTS
        output_errors = Matrix.subtract(targets, outputs)
        self._average_error = output_errors.abs().average()

        gradients = Matrix.map(outputs, derivative)
        gradients.multiply_(output_errors)
        gradients.multiply_(self._learning_rate)

        # Back-propagated through the weights as they were before this step
        hidden_errors = Matrix.multiply(Matrix.transpose(self.weights_hidden_output), output_errors)

        weight_ho_deltas = Matrix.multiply(gradients, Matrix.transpose(hidden))
        self.weights_hidden_output.add_(weight_ho_deltas)
        self.bias_output.add_(gradients)

        hidden_gradient = Matrix.map(hidden, derivative)
        hidden_gradient.multiply_(hidden_errors)
        hidden_gradient.multiply_(self._learning_rate)

        weight_ih_deltas = Matrix.multiply(hidden_gradient, Matrix.transpose(inputs))
        self.weights_input_hidden.add_(weight_ih_deltas)
        self.bias_hidden.add_(hidden_gradient)

        logger.debug(f"Training step complete, average error={self._average_error:.6f}")


if __name__ == "__main__":
    print("\n=== Running Multi-Layer Perceptron ===\n")
    printer.status("TEST", "Starting Multi-Layer Perceptron tests", "info")

    mlp = MultiLayerPerceptron(input_nodes=2, hidden_nodes=4, output_nodes=1, learning_rate=0.1, rng=42)
    mlp.select_activation(ActivationKind.SIGMOID)
    printer.status("INFER", mlp.infer([1.0, 0.0]), "success")

    for step in range(60):
        mlp.train([1.0, 0.0], [1.0])
    printer.status("TRAIN", f"average error after 60 steps: {mlp.last_average_error:.6f}", "success")
    printer.status("INFER", mlp.infer([1.0, 0.0]), "success")

    print("\n=== Successfully Ran Multi-Layer Perceptron ===\n")
