import random

import pytest

from biasclassifier.fruits import (
    Species,
    WeighedFruit,
    generate_featured_fruits,
    generate_weighed_fruits,
)
from biasclassifier.training import (
    read_bias,
    nudge_bias,
    train_feature_bias,
    train_image_bias,
    train_weight_bias,
    write_bias,
)


def test_nudge_up():
    assert nudge_bias(1.0, 2.0, 0.5) == 1.5


def test_nudge_down():
    assert nudge_bias(1.0, 0.0, 0.5) == 0.5


def test_nudge_equal_unchanged():
    assert nudge_bias(2.0, 2.0, 0.5) == 2.0


def test_weight_bias_settles_near_orange_weights():
    fruits = generate_weighed_fruits(random.Random(12))
    bias = train_weight_bias(fruits, random.Random(13))
    assert 0.082 * 0.98 < bias < 0.083 * 1.02


def test_weight_bias_requires_oranges():
    with pytest.raises(ValueError):
        train_weight_bias([WeighedFruit(0.5, Species.OTHER)], random.Random(0))


def test_feature_bias_reports_every_step():
    steps = []
    fruits = generate_featured_fruits(random.Random(1))
    bias = train_feature_bias(fruits, random.Random(2), 25, steps.append)
    assert len(steps) == 25
    assert steps[-1] == bias


def test_feature_bias_start_range():
    bias = train_feature_bias(generate_featured_fruits(random.Random(1)), random.Random(2), 0)
    assert 3.5 <= bias <= 4.5


def test_feature_bias_requires_fruits():
    with pytest.raises(ValueError):
        train_feature_bias([], random.Random(0), 10)


def test_image_bias_starts_at_one():
    assert train_image_bias([5.0], random.Random(0), 0) == 1.0


def test_image_bias_moves_towards_samples():
    up = train_image_bias([100.0], random.Random(0), 50)
    down = train_image_bias([-100.0], random.Random(0), 50)
    assert down < 1.0 < up


def test_image_bias_requires_sums():
    with pytest.raises(ValueError):
        train_image_bias([], random.Random(0), 10)


def test_bias_file_round_trip(tmp_path):
    path = tmp_path / "bias1.txt"
    write_bias(path, 4.25)
    assert path.read_text() == "4.250000\n"
    assert read_bias(path) == 4.25


def test_read_empty_bias(tmp_path):
    path = tmp_path / "bias.txt"
    path.write_text("")
    with pytest.raises(ValueError):
        read_bias(path)