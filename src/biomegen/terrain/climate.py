"""Climate fields: temperature from latitude, moisture from noise."""

import numpy as np
from numpy.typing import NDArray

LATITUDE_WEIGHT = 0.65
NOISE_WEIGHT = 0.35
BIAS_WEIGHT = 0.3


def derive_temperature(
    noise: NDArray[np.float64],
    bias: float = 0.0,
) -> NDArray[np.float64]:
    """Blend a north-south gradient with local noise.

    Row 0 is the coldest. ``bias`` shifts the whole field.

    Args:
        noise: Normalized temperature noise.
        bias: Global shift in [-1, 1].

    Returns:
        Temperature field clipped to [0, 1].
    """
    height, width = noise.shape
    latitude = (np.arange(height, dtype=np.float64) / height)[:, np.newaxis]
    temperature = latitude * LATITUDE_WEIGHT + noise * NOISE_WEIGHT + bias * BIAS_WEIGHT
    return np.clip(temperature, 0.0, 1.0)


def derive_moisture(
    noise: NDArray[np.float64],
    bias: float = 0.0,
) -> NDArray[np.float64]:
    """Shift normalized moisture noise by a bias and clip to [0, 1]."""
    return np.clip(noise + bias * BIAS_WEIGHT, 0.0, 1.0)
