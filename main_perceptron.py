"""
Train the single hidden layer perceptron on XOR and report its predictions.

    python main_perceptron.py --activation tanh --epochs 5000
"""

import argparse

from perceptron.multilayer_perceptron import MultiLayerPerceptron
from perceptron.utils.config_loader import get_config_section
from logs.logger import get_logger, PrettyPrinter

logger = get_logger("Perceptron Demo")
printer = PrettyPrinter

XOR_DATASET = [
    ([0.0, 0.0], [0.0]),
    ([0.0, 1.0], [1.0]),
    ([1.0, 0.0], [1.0]),
    ([1.0, 1.0], [0.0]),
]

def train_xor(mlp, epochs, log_interval):
    """Present every XOR example once per epoch, in a fixed order."""
    epoch_error = 0.0
    for epoch in range(1, epochs + 1):
        epoch_error = 0.0
        for inputs, targets in XOR_DATASET:
            mlp.train(inputs, targets)
            epoch_error += mlp.last_average_error
        epoch_error /= len(XOR_DATASET)

        if log_interval and epoch % log_interval == 0:
            printer.progress_bar(epoch, epochs, label="Training")
            logger.info(f"Epoch {epoch}/{epochs} | Avg Error: {epoch_error:.6f}")
    return epoch_error

def main():
    mlp_config = get_config_section('multilayer_perceptron')
    training_config = get_config_section('training')

    parser = argparse.ArgumentParser(description="Train a perceptron on XOR")
    parser.add_argument("--activation", default=mlp_config.get('activation', 'sigmoid'),
                        help="sigmoid, tanh, elu or relu")
    parser.add_argument("--hidden", type=int, default=mlp_config.get('hidden_nodes', 4),
                        help="Number of hidden neurons")
    parser.add_argument("--learning-rate", type=float, default=mlp_config.get('learning_rate', 0.1))
    parser.add_argument("--epochs", type=int, default=training_config.get('epochs', 10000))
    parser.add_argument("--log-interval", type=int, default=training_config.get('log_interval', 1000))
    parser.add_argument("--seed", type=int, default=mlp_config.get('seed'))
    args = parser.parse_args()

    printer.section_header("XOR training")
    mlp = MultiLayerPerceptron(2, args.hidden, 1, learning_rate=args.learning_rate, rng=args.seed)
    mlp.select_activation(args.activation)

    final_error = train_xor(mlp, args.epochs, args.log_interval)
    printer.status("TRAIN", f"Final average error: {final_error:.6f}", "success")

    rows = []
    for inputs, targets in XOR_DATASET:
        prediction = mlp.infer(inputs)[0]
        rows.append([inputs, targets[0], f"{prediction:.4f}"])
    printer.table(["Inputs", "Target", "Prediction"], rows, title=f"XOR ({args.activation})")


if __name__ == "__main__":
    main()
