import torch
from torch import Tensor

MIN_WEIGHT = 0.1


def clamp_weights(weights: Tensor, minimum: float = MIN_WEIGHT) -> Tensor:
    """Clamp rational Bezier weights from below.

    The evaluators accept any weight and leave validation to the caller;
    an editor applies this before handing edited weights to them.

    Examples
    --------
    >>> clamp_weights(torch.tensor([2.0, 0.0, -1.0]))
    tensor([2.0000, 0.1000, 0.1000])
    """
    if minimum <= 0:
        raise ValueError(f"minimum must be positive, got {minimum}")
    return torch.clamp(weights, min=minimum)
