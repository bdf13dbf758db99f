
class PerceptronError(Exception):
    """Base class for all perceptron errors"""

class ActivationNotConfiguredError(PerceptronError):
    """Raised when inference or training runs before an activation is bound"""
    def __init__(self, message="No activation function bound; call select_activation() or bind_activation() first"):
        super().__init__(message)

class UnknownActivationError(PerceptronError):
    """Raised when an activation tag or name has no registered strategy"""
    def __init__(self, kind=None):
        message = f"Unknown activation function: {kind!r}" if kind is not None else "Unknown activation function"
        super().__init__(message)
        self.kind = kind

class ShapeMismatchError(PerceptronError):
    """Raised when two matrices have incompatible dimensions for an operation"""
    def __init__(self, expected, actual, operation="operation"):
        super().__init__(f"Shape mismatch in {operation}: expected {expected}, got {actual}")
        self.expected = expected
        self.actual = actual
        self.operation = operation

class InvalidConfigError(PerceptronError):
    """Raised when perceptron configuration validation fails"""
    def __init__(self, message="Invalid perceptron configuration"):
        super().__init__(message)
        self.message = message

    def __str__(self):
        return f'InvalidConfigError: {self.message}'
