import random

import pytest

from biasclassifier.evaluation import (
    ConfusionCounts,
    evaluate_fruits,
    evaluate_images,
    random_featured_fruit,
)
from biasclassifier.fruits import Species


def test_total():
    assert ConfusionCounts(1, 2, 3, 4).total() == 10


def test_report_lines():
    text = ConfusionCounts(1, 2, 3, 4).report("circle", "square")
    lines = text.strip().splitlines()
    assert lines[0] == "10 trials:"
    assert lines[1].endswith(": 1")
    assert "circle given square" in lines[2] and lines[2].endswith(": 2")
    assert lines[4].endswith(": 4")
    assert text.endswith("\n\n")


def test_random_fruit_yields_both_species():
    rng = random.Random(3)
    species = {random_featured_fruit(rng).species for _ in range(100)}
    assert species == {Species.ORANGE, Species.OTHER}


def test_evaluate_fruits_counts_every_trial():
    counts = evaluate_fruits(4.0, random.Random(5), 200)
    assert counts.total() == 200


def test_evaluate_fruits_huge_bias_accepts_all_oranges():
    counts = evaluate_fruits(100.0, random.Random(5), 200)
    assert counts.first_wrong == 0
    assert counts.second_correct == 0
    assert counts.first_correct > 0


def test_evaluate_fruits_negative_bias_rejects_all_oranges():
    counts = evaluate_fruits(-1.0, random.Random(5), 200)
    assert counts.first_correct == 0
    assert counts.second_wrong == 0


def test_evaluate_images_perfect_separation():
    counts = evaluate_images([10.0, 10.0, 0.0, 0.0], 5.0, random.Random(1), 300)
    assert counts.total() == 300
    assert counts.first_wrong == 0
    assert counts.second_wrong == 0


def test_evaluate_images_ties_not_counted():
    counts = evaluate_images([5.0, 5.0], 5.0, random.Random(1), 50)
    assert counts.total() == 0


def test_evaluate_images_reversed():
    counts = evaluate_images([0.0, 10.0], 5.0, random.Random(2), 100)
    assert counts.first_correct == 0
    assert counts.second_correct == 0
    assert counts.total() == 100


def test_evaluate_images_empty():
    with pytest.raises(ValueError):
        evaluate_images([], 1.0, random.Random(0))