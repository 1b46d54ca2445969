"""Learning a single separating value by nudging it towards random samples."""

from __future__ import annotations

import random
from os import PathLike
from pathlib import Path
from typing import Callable, Optional, Sequence, Union

from .fruits import FeaturedFruit, Species, WeighedFruit, random_unit

PathArg = Union[str, PathLike]
StepCallback = Optional[Callable[[float], None]]

WEIGHT_ITERATIONS = 4000
WEIGHT_RATE = 0.01
FEATURE_ITERATIONS = 1_000_000
FEATURE_RATE = 0.000001
FEATURE_BIAS_BASE = 3.5
IMAGE_ITERATIONS = 300_000
IMAGE_RATE = 0.0001
IMAGE_BIAS_START = 1.0


def nudge_bias(bias: float, value: float, rate: float) -> float:
    """Grow bias by rate if value is above it, shrink it if below, else keep it."""
    if value > bias:
        return bias + bias * rate
    if value < bias:
        return bias - bias * rate
    return bias


def train_weight_bias(
    fruits: Sequence[WeighedFruit], rng: random.Random, iterations: int = WEIGHT_ITERATIONS
) -> float:
    """Start from a random bias and pull it towards randomly chosen orange weights."""
    oranges = [fruit for fruit in fruits if fruit.species is Species.ORANGE]
    if not oranges:
        raise ValueError("no oranges to train on")
    bias = random_unit(rng)
    for _ in range(iterations):
        bias = nudge_bias(bias, oranges[rng.randrange(len(oranges))].weight, WEIGHT_RATE)
    return bias


def train_feature_bias(
    fruits: Sequence[FeaturedFruit],
    rng: random.Random,
    iterations: int = FEATURE_ITERATIONS,
    on_step: StepCallback = None,
) -> float:
    """Pull a bias starting between 3.5 and 4.5 towards feature totals of random fruits."""
    if not fruits:
        raise ValueError("no fruits to train on")
    bias = FEATURE_BIAS_BASE + random_unit(rng)
    for _ in range(iterations):
        bias = nudge_bias(bias, fruits[rng.randrange(len(fruits))].total(), FEATURE_RATE)
        if on_step is not None:
            on_step(bias)
    return bias


def train_image_bias(
    sums: Sequence[float],
    rng: random.Random,
    iterations: int = IMAGE_ITERATIONS,
    on_step: StepCallback = None,
) -> float:
    """Pull a bias starting at 1 towards the pixel sums of random images."""
    if not sums:
        raise ValueError("no images to train on")
    bias = IMAGE_BIAS_START
    for _ in range(iterations):
        bias = nudge_bias(bias, sums[rng.randrange(len(sums))], IMAGE_RATE)
        if on_step is not None:
            on_step(bias)
    return bias


def write_bias(path: PathArg, bias: float) -> None:
    """Store the bias as a single line of text."""
    Path(path).write_text(f"{bias:f}\n", encoding="ascii")


def read_bias(path: PathArg) -> float:
    """Read a bias stored by write_bias."""
    tokens = Path(path).read_text(encoding="ascii").split()
    if not tokens:
        raise ValueError(f"{path}: no bias value")
    return float(tokens[0])