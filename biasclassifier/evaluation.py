"""Measuring how well a learned bias separates two classes."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Sequence

from .fruits import FeaturedFruit, Species, generate_orange_features, generate_other_features

EVALUATION_TRIALS = 1000


@dataclass
class ConfusionCounts:
    """Outcome tallies, in the order they are reported."""

    first_correct: int = 0
    first_wrong: int = 0
    second_correct: int = 0
    second_wrong: int = 0

    def total(self) -> int:
        return self.first_correct + self.first_wrong + self.second_correct + self.second_wrong

    def report(self, first: str, second: str) -> str:
        """Human-readable summary naming the two classes."""
        return (
            f"\n{self.total()} trials:\n"
            f"Expected {first} given {first}: {self.first_correct}\n"
            f"Expected {first} given {second}: {self.first_wrong}\n"
            f"Expected {second} given {second}: {self.second_correct}\n"
            f"Expected {second} given {first}: {self.second_wrong}\n\n"
        )


def random_featured_fruit(rng: random.Random) -> FeaturedFruit:
    """An orange or another fruit with equal probability."""
    if rng.randrange(2) == 0:
        return generate_orange_features(rng)
    return generate_other_features(rng)


def evaluate_fruits(
    bias: float, rng: random.Random, trials: int = EVALUATION_TRIALS
) -> ConfusionCounts:
    """Classify fresh random fruits: oranges should total below bias, others above."""
    counts = ConfusionCounts()
    for _ in range(trials):
        fruit = random_featured_fruit(rng)
        total = fruit.total()
        if fruit.species is Species.ORANGE:
            if total < bias:
                counts.first_correct += 1
            else:
                counts.first_wrong += 1
        elif total > bias:
            counts.second_correct += 1
        else:
            counts.second_wrong += 1
    return counts


def evaluate_images(
    sums: Sequence[float], bias: float, rng: random.Random, trials: int = EVALUATION_TRIALS
) -> ConfusionCounts:
    """Classify random images: the first half (circles) above bias, the rest below.

    Images whose sum equals the bias are not counted.
    """
    if not sums:
        raise ValueError("no images to evaluate")
    half = len(sums) // 2
    counts = ConfusionCounts()
    for _ in range(trials):
        index = rng.randrange(len(sums))
        value = sums[index]
        if index < half:
            if value > bias:
                counts.first_correct += 1
            elif value < bias:
                counts.second_wrong += 1
        elif value < bias:
            counts.second_correct += 1
        elif value > bias:
            counts.first_wrong += 1
    return counts