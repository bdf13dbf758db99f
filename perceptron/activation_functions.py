import numpy as np

from enum import Enum
from typing import Union

from perceptron.utils.error_calls import UnknownActivationError

class ActivationKind(Enum):
    SIGMOID = 1
    HYPERBOLIC_TANGENT = 2
    ELU = 3     # Exponential Linear Unit
    RELU = 4    # Rectified Linear Unit

    @classmethod
    def from_name(cls, name: str) -> "ActivationKind":
        aliases = {member.name.lower(): member for member in cls}
        aliases['tanh'] = cls.HYPERBOLIC_TANGENT
        key = name.strip().lower().replace('-', '_')
        if key in aliases:
            return aliases[key]
        raise UnknownActivationError(name)

def _exp(x: float) -> float:
    # Overflow saturates to inf rather than raising
    with np.errstate(over='ignore'):
        return float(np.exp(x))

# --- Activation Functions Base Class ---
class ActivationFunction:
    """Base class for scalar activation functions."""
    def activate(self, x: float, gain: float, center: float) -> float:
        raise NotImplementedError

    def derivative(self, x: float, gain: float) -> float:
        raise NotImplementedError

    def __repr__(self):
        return f"{type(self).__name__}()"

# --- Class Implementations ---
class Sigmoid(ActivationFunction):
    """Logistic sigmoid. The derivative takes the activated output, not z."""
    def activate(self, x, gain, center):
        # gain is ignored; derivative() assumes unit slope
        return 1.0 / (1.0 + _exp(-(x - center)))

    def derivative(self, x, gain):
        return x * (1.0 - x)

class HyperbolicTangent(ActivationFunction):
    """Tanh written through the exponential. The derivative takes the activated output."""
    def activate(self, x, gain, center):
        # gain is ignored; derivative() assumes unit slope
        xc = x - center
        return 2.0 / (1.0 + _exp(-2.0 * xc)) - 1.0

    def derivative(self, x, gain):
        return 1.0 - (x * x)

class ELU(ActivationFunction):
    """Exponential Linear Unit. The derivative takes the pre-activation value."""
    def activate(self, x, gain, center):
        xc = x - center
        if xc >= 0:
            return xc
        return gain * (_exp(xc) - 1.0)

    def derivative(self, x, gain):
        if gain < 0:
            return 0.0
        if x >= 0:
            return 1.0
        return x + gain

class ReLU(ActivationFunction):
    """Rectified Linear Unit with slope ``gain``."""
    def activate(self, x, gain, center):
        xc = x - center
        return max(xc * gain, 0.0)

    def derivative(self, x, gain):
        if x >= 0:
            return gain
        return 0.0

ACTIVATION_REGISTRY = {
    ActivationKind.SIGMOID: Sigmoid,
    ActivationKind.HYPERBOLIC_TANGENT: HyperbolicTangent,
    ActivationKind.ELU: ELU,
    ActivationKind.RELU: ReLU,
}

def get_activation(kind: Union[ActivationKind, str]) -> ActivationFunction:
    """Return a fresh strategy for an ActivationKind or its name."""
    if isinstance(kind, str):
        kind = ActivationKind.from_name(kind)
    if kind not in ACTIVATION_REGISTRY:
        raise UnknownActivationError(kind)
    return ACTIVATION_REGISTRY[kind]()
