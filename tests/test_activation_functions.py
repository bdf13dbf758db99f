import math
import unittest

from perceptron.activation_functions import (ActivationKind, ELU, HyperbolicTangent, ReLU,
                                             Sigmoid, get_activation)
from perceptron.utils.error_calls import UnknownActivationError

class TestSigmoid(unittest.TestCase):
    def setUp(self):
        self.fn = Sigmoid()

    def test_activate(self):
        self.assertEqual(self.fn.activate(0.0, 1.0, 0.0), 0.5)
        self.assertAlmostEqual(self.fn.activate(1.0, 1.0, 0.0), 1 / (1 + math.exp(-1)))

    def test_center_shifts_midpoint(self):
        self.assertEqual(self.fn.activate(2.0, 1.0, 2.0), 0.5)

    def test_derivative_uses_activated_value(self):
        self.assertEqual(self.fn.derivative(0.5, 1.0), 0.25)
        self.assertEqual(self.fn.derivative(1.0, 1.0), 0.0)

    def test_extreme_inputs_saturate(self):
        self.assertEqual(self.fn.activate(-1000.0, 1.0, 0.0), 0.0)
        self.assertEqual(self.fn.activate(1000.0, 1.0, 0.0), 1.0)

class TestHyperbolicTangent(unittest.TestCase):
    def setUp(self):
        self.fn = HyperbolicTangent()

    def test_activate_matches_tanh(self):
        self.assertEqual(self.fn.activate(0.0, 1.0, 0.0), 0.0)
        for x in (-2.0, -0.3, 0.7, 1.5):
            self.assertAlmostEqual(self.fn.activate(x, 1.0, 0.0), math.tanh(x))

    def test_center(self):
        self.assertAlmostEqual(self.fn.activate(1.5, 1.0, 0.5), math.tanh(1.0))

    def test_derivative_uses_activated_value(self):
        self.assertEqual(self.fn.derivative(0.5, 1.0), 0.75)
        self.assertEqual(self.fn.derivative(0.0, 1.0), 1.0)

    def test_extreme_inputs_saturate(self):
        self.assertEqual(self.fn.activate(-1000.0, 1.0, 0.0), -1.0)
        self.assertEqual(self.fn.activate(1000.0, 1.0, 0.0), 1.0)

class TestELU(unittest.TestCase):
    def setUp(self):
        self.fn = ELU()

    def test_activate_positive_branch(self):
        self.assertEqual(self.fn.activate(2.0, 1.0, 0.0), 2.0)
        self.assertEqual(self.fn.activate(0.0, 1.0, 0.0), 0.0)

    def test_activate_negative_branch(self):
        self.assertAlmostEqual(self.fn.activate(-1.0, 1.0, 0.0), math.exp(-1) - 1)
        self.assertAlmostEqual(self.fn.activate(-1.0, 2.0, 0.0), 2 * (math.exp(-1) - 1))
        self.assertAlmostEqual(self.fn.activate(1.0, 1.0, 3.0), math.exp(-2) - 1)

    def test_derivative(self):
        # Known asymmetry: unlike Sigmoid/Tanh, x here is the pre-activation value
        self.assertEqual(self.fn.derivative(3.0, 1.0), 1.0)
        self.assertEqual(self.fn.derivative(0.0, 1.0), 1.0)
        self.assertEqual(self.fn.derivative(-0.5, 1.0), 0.5)

    def test_negative_gain_derivative_is_zero(self):
        self.assertEqual(self.fn.derivative(-0.5, -1.0), 0.0)
        self.assertEqual(self.fn.derivative(2.0, -1.0), 0.0)

class TestReLU(unittest.TestCase):
    def setUp(self):
        self.fn = ReLU()

    def test_activate(self):
        self.assertEqual(self.fn.activate(-3.0, 1.0, 0.0), 0.0)
        self.assertEqual(self.fn.activate(2.0, 3.0, 0.0), 6.0)
        self.assertEqual(self.fn.activate(5.0, 1.0, 2.0), 3.0)

    def test_derivative(self):
        self.assertEqual(self.fn.derivative(5.0, 2.0), 2.0)
        self.assertEqual(self.fn.derivative(0.0, 2.0), 2.0)
        self.assertEqual(self.fn.derivative(-1.0, 2.0), 0.0)

class TestActivationRegistry(unittest.TestCase):
    def test_every_kind_maps_to_its_strategy(self):
        expected = {
            ActivationKind.SIGMOID: Sigmoid,
            ActivationKind.HYPERBOLIC_TANGENT: HyperbolicTangent,
            ActivationKind.ELU: ELU,
            ActivationKind.RELU: ReLU,
        }
        for kind, cls in expected.items():
            self.assertIsInstance(get_activation(kind), cls)

    def test_lookup_by_name(self):
        self.assertIsInstance(get_activation("tanh"), HyperbolicTangent)
        self.assertIsInstance(get_activation("Hyperbolic-Tangent"), HyperbolicTangent)
        self.assertIsInstance(get_activation(" ReLU "), ReLU)

    def test_lookup_by_member_name(self):
        for kind in ActivationKind:
            self.assertIs(ActivationKind.from_name(kind.name), kind)
        self.assertIs(ActivationKind.from_name("elu"), ActivationKind.ELU)

    def test_returns_fresh_instances(self):
        self.assertIsNot(get_activation(ActivationKind.ELU), get_activation(ActivationKind.ELU))

    def test_unknown_name(self):
        with self.assertRaises(UnknownActivationError):
            get_activation("softmax")

    def test_unknown_tag(self):
        with self.assertRaises(UnknownActivationError):
            get_activation(7)

if __name__ == "__main__":
    unittest.main()
