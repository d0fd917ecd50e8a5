"""Land shaping: radial and multi-center falloff per land-mass variant."""

import logging

import numpy as np
from numpy.typing import NDArray
from pydantic import BaseModel

from .config import GenerationConfig, LandMassType
from .noise import normalize, value_noise
from .rng import Rng

logger = logging.getLogger(__name__)

# Seed offsets for the auxiliary streams used while shaping
CENTER_SEED_OFFSET = 7777
LAKE_SEED_OFFSET = 5555
FRAGMENT_SEED_OFFSET = 9999

CENTER_MARGIN = 0.15
CENTER_RADIUS_MIN = 0.2
CENTER_RADIUS_MAX = 0.5
EDGE_FADE_WIDTH = 0.15

PANGAEA_EXPONENT = 1.5
PANGAEA_STRENGTH = 0.8
LAKES_FALLOFF = 0.25
LAKE_THRESHOLD = 0.3

# (falloff strength outside centers, edge penalty strength)
_MULTI_CENTER_STRENGTHS: dict[LandMassType, tuple[float, float]] = {
    LandMassType.CONTINENTS: (0.6, 0.8),
    LandMassType.ARCHIPELAGO: (0.35, 0.6),
}


class Center(BaseModel, frozen=True):
    """Falloff focus for multi-center land shaping."""

    x: float
    y: float
    radius: float


def shape_land(
    elevation: NDArray[np.float64],
    config: GenerationConfig,
    seed: int,
) -> NDArray[np.float64]:
    """Reshape an elevation field according to the configured land-mass type.

    Args:
        elevation: Normalized elevation field.
        config: Generation configuration.
        seed: Resolved generation seed.

    Returns:
        New elevation field normalized to [0, 1].
    """
    land_mass = config.land_mass

    if land_mass == LandMassType.PANGAEA:
        shaped = apply_radial_falloff(
            elevation, PANGAEA_STRENGTH, exponent=PANGAEA_EXPONENT
        )
    elif land_mass in _MULTI_CENTER_STRENGTHS:
        height, width = elevation.shape
        centers = generate_centers(width, height, config.island_count, seed)
        logger.debug(f"Land centers: {centers}")

        base = elevation
        if land_mass == LandMassType.ARCHIPELAGO:
            fragments = value_noise(
                width,
                height,
                config.noise_scale * 0.5,
                3,
                seed + FRAGMENT_SEED_OFFSET,
            )
            base = elevation * (0.5 + 0.5 * fragments)

        falloff_strength, edge_strength = _MULTI_CENTER_STRENGTHS[land_mass]
        shaped = apply_center_falloff(base, centers, falloff_strength, edge_strength)
    elif land_mass == LandMassType.LAKES:
        shaped = carve_lakes(
            apply_radial_falloff(elevation, LAKES_FALLOFF),
            config.noise_scale,
            seed,
        )
    else:
        shaped = apply_radial_falloff(elevation, config.falloff)

    return normalize(np.maximum(shaped, 0.0))


def radial_distance(width: int, height: int) -> NDArray[np.float64]:
    """Distance from the grid center, scaled so the unit circle touches the edges.

    Args:
        width: Grid width.
        height: Grid height.

    Returns:
        2D distance array of shape (height, width).
    """
    cx, cy = width / 2, height / 2
    xx, yy = np.meshgrid(
        np.arange(width, dtype=np.float64), np.arange(height, dtype=np.float64)
    )
    dx = (xx - cx) / cx
    dy = (yy - cy) / cy
    return np.sqrt(dx**2 + dy**2)


def apply_radial_falloff(
    elevation: NDArray[np.float64],
    strength: float,
    exponent: float = 1.0,
) -> NDArray[np.float64]:
    """Subtract a centered radial falloff from elevation.

    Args:
        elevation: Input elevation field.
        strength: Elevation drop at unit distance from the center.
        exponent: Power applied to the distance (1 = linear).

    Returns:
        Elevation with falloff applied, clamped below at 0.
    """
    height, width = elevation.shape
    dist = radial_distance(width, height)
    return np.maximum(elevation - dist**exponent * strength, 0.0)


def generate_centers(width: int, height: int, count: int, seed: int) -> list[Center]:
    """Place land-mass centers inside an inset margin.

    Args:
        width: Grid width.
        height: Grid height.
        count: Number of centers.
        seed: Generation seed; centers use their own offset stream.

    Returns:
        List of Center, in draw order.
    """
    rng = Rng(seed + CENTER_SEED_OFFSET)
    span = 1.0 - 2 * CENTER_MARGIN
    smallest = min(width, height)

    centers = []
    for _ in range(count):
        x = width * (CENTER_MARGIN + span * rng.next())
        y = height * (CENTER_MARGIN + span * rng.next())
        radius = smallest * rng.uniform(CENTER_RADIUS_MIN, CENTER_RADIUS_MAX)
        centers.append(Center(x=x, y=y, radius=radius))
    return centers


def edge_fade(width: int, height: int) -> NDArray[np.float64]:
    """Fade factor that is 0 on the border and reaches 1 inside the margin."""
    xx, yy = np.meshgrid(
        np.arange(width, dtype=np.float64), np.arange(height, dtype=np.float64)
    )
    to_edge = np.minimum.reduce([xx, width - 1 - xx, yy, height - 1 - yy])
    fade_width = max(EDGE_FADE_WIDTH * min(width, height), 1.0)
    return np.clip(to_edge / fade_width, 0.0, 1.0)


def apply_center_falloff(
    elevation: NDArray[np.float64],
    centers: list[Center],
    falloff_strength: float,
    edge_strength: float,
) -> NDArray[np.float64]:
    """Subtract a multi-center distance falloff and an edge penalty.

    Distance is measured in units of each center's radius, taking the
    closest center for every cell.

    Args:
        elevation: Input elevation field.
        centers: Land-mass centers.
        falloff_strength: Weight of the center distance penalty.
        edge_strength: Weight of the border proximity penalty.

    Returns:
        Elevation with falloff applied, clamped below at 0.
    """
    height, width = elevation.shape
    xx, yy = np.meshgrid(
        np.arange(width, dtype=np.float64), np.arange(height, dtype=np.float64)
    )

    nearest = np.full((height, width), np.inf)
    for center in centers:
        dist = np.sqrt((xx - center.x) ** 2 + (yy - center.y) ** 2) / center.radius
        nearest = np.minimum(nearest, dist)

    fade = edge_fade(width, height)
    penalty = nearest * falloff_strength + (1.0 - fade) * edge_strength
    return np.maximum(elevation - penalty, 0.0)


def carve_lakes(
    elevation: NDArray[np.float64],
    noise_scale: float,
    seed: int,
) -> NDArray[np.float64]:
    """Scale elevation down where an independent noise field dips low.

    Args:
        elevation: Input elevation field.
        noise_scale: Base noise scale of the map.
        seed: Generation seed; the lake field uses its own offset.

    Returns:
        Elevation with lake depressions carved.
    """
    height, width = elevation.shape
    lake_noise = value_noise(
        width, height, noise_scale * 0.8, 3, seed + LAKE_SEED_OFFSET
    )
    result = elevation.copy()
    basin = lake_noise < LAKE_THRESHOLD
    result[basin] *= lake_noise[basin] / LAKE_THRESHOLD
    return result
