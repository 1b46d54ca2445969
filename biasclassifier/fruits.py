"""Synthetic fruit samples: single-weight records and eight-feature records."""

from __future__ import annotations

import random
import struct
from dataclasses import dataclass
from enum import Enum
from os import PathLike
from pathlib import Path
from typing import Iterable, Union

PathArg = Union[str, PathLike]

WEIGHED_SAMPLES_PER_SPECIES = 25
FEATURED_SAMPLES_PER_SPECIES = 15

ORANGE_WEIGHT_BASE = 0.082
ORANGE_WEIGHT_SPREAD = 1000.0

# Lower bound of each orange feature; every value lies within a tenth above it.
ORANGE_FEATURE_BASES = (0.8, 0.7, 0.6, 0.5, 0.4, 0.3, 0.2, 0.1)
ORANGE_FEATURE_SPREAD = 10.0

_RECORD = struct.Struct("<8fc3x")
RECORD_SIZE = _RECORD.size


class Species(str, Enum):
    """Kind of fruit, stored as a single character."""

    ORANGE = "l"
    OTHER = "q"


@dataclass
class WeighedFruit:
    """A fruit described only by its weight."""

    weight: float
    species: Species


@dataclass
class FeaturedFruit:
    """A fruit described by eight normalised features."""

    weight: float
    volume: float
    colour: float
    position: float
    texture: float
    consistency: float
    temperature: float
    age: float
    species: Species

    @property
    def features(self) -> tuple[float, ...]:
        return (
            self.weight,
            self.volume,
            self.colour,
            self.position,
            self.texture,
            self.consistency,
            self.temperature,
            self.age,
        )

    def total(self) -> float:
        """Sum of all eight features."""
        return sum(self.features)


def random_unit(rng: random.Random) -> float:
    """A uniformly distributed value between 0 and 1."""
    return rng.random()


def generate_weighed_fruits(rng: random.Random) -> list[WeighedFruit]:
    """25 oranges weighing 0.082 to 0.083, then 25 fruits of any weight up to 1."""
    oranges = [
        WeighedFruit(ORANGE_WEIGHT_BASE + random_unit(rng) / ORANGE_WEIGHT_SPREAD, Species.ORANGE)
        for _ in range(WEIGHED_SAMPLES_PER_SPECIES)
    ]
    others = [
        WeighedFruit(random_unit(rng), Species.OTHER)
        for _ in range(WEIGHED_SAMPLES_PER_SPECIES)
    ]
    return oranges + others


def write_weighed_fruits(path: PathArg, fruits: Iterable[WeighedFruit]) -> None:
    """Write one "weight species" line per fruit."""
    with open(path, "w", encoding="ascii") as handle:
        for fruit in fruits:
            handle.write(f"{fruit.weight:f} {fruit.species.value}\n")


def read_weighed_fruits(path: PathArg) -> list[WeighedFruit]:
    """Read fruits written by write_weighed_fruits."""
    fruits = []
    for number, line in enumerate(Path(path).read_text(encoding="ascii").splitlines(), 1):
        if not line.strip():
            continue
        parts = line.split()
        if len(parts) != 2:
            raise ValueError(f"line {number}: expected weight and species, got {line!r}")
        try:
            fruits.append(WeighedFruit(float(parts[0]), Species(parts[1])))
        except ValueError as exc:
            raise ValueError(f"line {number}: {exc}") from exc
    return fruits


def generate_orange_features(rng: random.Random) -> FeaturedFruit:
    """An orange whose features each lie in a narrow band of width 0.1."""
    values = [base + random_unit(rng) / ORANGE_FEATURE_SPREAD for base in ORANGE_FEATURE_BASES]
    return FeaturedFruit(*values, species=Species.ORANGE)


def generate_other_features(rng: random.Random) -> FeaturedFruit:
    """Any fruit, with every feature between 0 and 1."""
    values = [random_unit(rng) for _ in ORANGE_FEATURE_BASES]
    return FeaturedFruit(*values, species=Species.OTHER)


def generate_featured_fruits(rng: random.Random) -> list[FeaturedFruit]:
    """15 oranges followed by 15 other fruits."""
    oranges = [generate_orange_features(rng) for _ in range(FEATURED_SAMPLES_PER_SPECIES)]
    others = [generate_other_features(rng) for _ in range(FEATURED_SAMPLES_PER_SPECIES)]
    return oranges + others


def pack_featured_fruit(fruit: FeaturedFruit) -> bytes:
    """Fixed-size binary record: eight float32 values, species byte, padding."""
    return _RECORD.pack(*fruit.features, fruit.species.value.encode("ascii"))


def unpack_featured_fruit(data: bytes) -> FeaturedFruit:
    """Decode a record produced by pack_featured_fruit."""
    if len(data) != RECORD_SIZE:
        raise ValueError(f"record must be {RECORD_SIZE} bytes, got {len(data)}")
    *values, species = _RECORD.unpack(data)
    return FeaturedFruit(*values, species=Species(species.decode("ascii")))


def write_featured_fruits(path: PathArg, fruits: Iterable[FeaturedFruit]) -> None:
    """Write fruits as consecutive binary records."""
    with open(path, "wb") as handle:
        for fruit in fruits:
            handle.write(pack_featured_fruit(fruit))


def read_featured_fruits(path: PathArg) -> list[FeaturedFruit]:
    """Read every record written by write_featured_fruits."""
    data = Path(path).read_bytes()
    if len(data) % RECORD_SIZE:
        raise ValueError(f"file size {len(data)} is not a multiple of {RECORD_SIZE}")
    return [
        unpack_featured_fruit(data[start:start + RECORD_SIZE])
        for start in range(0, len(data), RECORD_SIZE)
    ]