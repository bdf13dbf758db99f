from perceptron.activation_functions import ActivationKind, ActivationFunction, get_activation
from perceptron.multilayer_perceptron import MultiLayerPerceptron
__all__ = ['ActivationKind', 'ActivationFunction', 'get_activation', 'MultiLayerPerceptron']
