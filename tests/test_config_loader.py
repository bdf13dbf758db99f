import unittest

from perceptron.utils.config_loader import load_global_config, get_config_section

class TestConfigLoader(unittest.TestCase):
    def test_loads_once(self):
        self.assertIs(load_global_config(), load_global_config())

    def test_records_config_path(self):
        self.assertTrue(load_global_config()['__config_path__'].endswith("perceptron_config.yaml"))

    def test_sections(self):
        self.assertEqual(get_config_section('matrix')['random_high'], 1.0)
        self.assertEqual(get_config_section('matrix')['random_low'], -1.0)
        self.assertIn('learning_rate', get_config_section('multilayer_perceptron'))

    def test_no_tunable_activation_parameters(self):
        self.assertEqual(get_config_section('activation'), {})
        self.assertNotIn('input_nodes', get_config_section('multilayer_perceptron'))
        self.assertNotIn('output_nodes', get_config_section('multilayer_perceptron'))

    def test_missing_section_is_empty(self):
        self.assertEqual(get_config_section('does_not_exist'), {})

if __name__ == "__main__":
    unittest.main()
