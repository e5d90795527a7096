import numpy as np

def identity_activation(z):
    return z

def clamped_activation(z):
    return np.clip(z, -1.0, 1.0)

def relu_activation(z):
    return np.maximum(0.0, z)

def sigmoid_activation(z):
    # 1 / (1 + exp(-z)) as exp(-log(1 + exp(-z))): no overflow, and the
    # lower tail stays positive down to the float64 limit
    z = np.asarray(z, dtype=np.float64)
    return np.exp(-np.logaddexp(0.0, -z))

def tanh_activation(z):
    return np.tanh(z)

def step_activation(z):
    return np.where(np.asarray(z) > 0.0, 1.0, 0.0)

activations = {
    "identity": identity_activation,
    "clamped" : clamped_activation,
    "relu"    : relu_activation,
    "sigmoid" : sigmoid_activation,
    "tanh"    : tanh_activation,
    "step"    : step_activation
    }

def get_activation(name: str):
    """
    Look up an activation function by name.

    Raises:
        ValueError: if 'name' is not a registered activation
    """
    try:
        return activations[name]
    except KeyError:
        valid = ", ".join(sorted(activations))
        raise ValueError(f"Unknown activation function '{name}' (valid options: {valid})") from None
