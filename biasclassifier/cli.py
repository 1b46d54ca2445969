"""Command line for generating samples, training biases and testing them."""

from __future__ import annotations

import argparse
import random
import sys
from typing import Optional, Sequence

from . import bitmaps, evaluation, fruits, training


def _parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--seed", type=int, default=None, help="random seed (default: clock)")

    parser = argparse.ArgumentParser(prog="biasclassifier", description=__doc__)
    commands = parser.add_subparsers(dest="command", required=True)

    cmd = commands.add_parser("gen-weights", parents=[common], help="generate weighed fruits")
    cmd.add_argument("--output", default="entradas1.txt")

    cmd = commands.add_parser("gen-features", parents=[common], help="generate featured fruits")
    cmd.add_argument("--output", default="entradas2.txt")

    cmd = commands.add_parser("gen-images", parents=[common], help="generate shape bitmaps")
    cmd.add_argument("--directory", default="imagens")
    cmd.add_argument("--count", type=int, default=bitmaps.SAMPLE_COUNT)

    cmd = commands.add_parser("train-weights", parents=[common], help="train on orange weights")
    cmd.add_argument("--input", default="entradas1.txt")
    cmd.add_argument("--iterations", type=int, default=training.WEIGHT_ITERATIONS)

    cmd = commands.add_parser("train-features", parents=[common], help="train on fruit features")
    cmd.add_argument("--input", default="entradas2.txt")
    cmd.add_argument("--output", default="bias1.txt")
    cmd.add_argument("--iterations", type=int, default=training.FEATURE_ITERATIONS)
    cmd.add_argument("--quiet", action="store_true", help="do not print every step")

    cmd = commands.add_parser("train-images", parents=[common], help="train on image pixel sums")
    cmd.add_argument("--directory", default="imagens")
    cmd.add_argument("--count", type=int, default=bitmaps.SAMPLE_COUNT)
    cmd.add_argument("--output", default="bias2.txt")
    cmd.add_argument("--iterations", type=int, default=training.IMAGE_ITERATIONS)
    cmd.add_argument("--quiet", action="store_true", help="do not print every step")

    cmd = commands.add_parser("test-features", parents=[common], help="evaluate the fruit bias")
    cmd.add_argument("--bias", default="bias1.txt")
    cmd.add_argument("--trials", type=int, default=evaluation.EVALUATION_TRIALS)

    cmd = commands.add_parser("test-images", parents=[common], help="evaluate the image bias")
    cmd.add_argument("--directory", default="imagens")
    cmd.add_argument("--count", type=int, default=bitmaps.SAMPLE_COUNT)
    cmd.add_argument("--bias", default="bias2.txt")
    cmd.add_argument("--trials", type=int, default=evaluation.EVALUATION_TRIALS)
    return parser


def _gen_weights(args: argparse.Namespace, rng: random.Random) -> None:
    fruits.write_weighed_fruits(args.output, fruits.generate_weighed_fruits(rng))
    for number, fruit in enumerate(fruits.read_weighed_fruits(args.output)):
        print(f"{number:2d}) {fruit.weight:f} {fruit.species.value}")


def _gen_features(args: argparse.Namespace, rng: random.Random) -> None:
    fruits.write_featured_fruits(args.output, fruits.generate_featured_fruits(rng))
    for number, fruit in enumerate(fruits.read_featured_fruits(args.output)):
        values = " ".join(f"{value:f}" for value in fruit.features)
        print(f"{number}) {values} {fruit.species.value}")


def _gen_images(args: argparse.Namespace, rng: random.Random) -> None:
    try:
        for path in bitmaps.generate_samples(args.directory, rng, args.count):
            print(f"{path} - [{path.stat().st_size} bytes]")
    except FileNotFoundError as exc:
        raise OSError(
            f"cannot create image file ({exc}); the directory {args.directory!r} may need to be created"
        ) from exc
    print("\nImages saved successfully")


def _step_printer(label: str, quiet: bool):
    if quiet:
        return None
    return lambda bias: print(f"{label} = {bias:f}")


def _train_weights(args: argparse.Namespace, rng: random.Random) -> None:
    bias = training.train_weight_bias(fruits.read_weighed_fruits(args.input), rng, args.iterations)
    print(f"Separating value (bias): {bias:f}")


def _train_features(args: argparse.Namespace, rng: random.Random) -> None:
    samples = fruits.read_featured_fruits(args.input)
    bias = training.train_feature_bias(
        samples, rng, args.iterations, _step_printer("finalBias", args.quiet)
    )
    training.write_bias(args.output, bias)


def _train_images(args: argparse.Namespace, rng: random.Random) -> None:
    sums = bitmaps.load_pixel_sums(args.directory, args.count)
    bias = training.train_image_bias(sums, rng, args.iterations, _step_printer("bias", args.quiet))
    training.write_bias(args.output, bias)


def _test_features(args: argparse.Namespace, rng: random.Random) -> None:
    counts = evaluation.evaluate_fruits(training.read_bias(args.bias), rng, args.trials)
    print(counts.report("orange", "other"), end="")


def _test_images(args: argparse.Namespace, rng: random.Random) -> None:
    sums = bitmaps.load_pixel_sums(args.directory, args.count)
    counts = evaluation.evaluate_images(sums, training.read_bias(args.bias), rng, args.trials)
    print(counts.report("circle", "square"), end="")


_COMMANDS = {
    "gen-weights": _gen_weights,
    "gen-features": _gen_features,
    "gen-images": _gen_images,
    "train-weights": _train_weights,
    "train-features": _train_features,
    "train-images": _train_images,
    "test-features": _test_features,
    "test-images": _test_images,
}


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run one command; return the process exit status."""
    args = _parser().parse_args(argv)
    rng = random.Random(args.seed)
    try:
        _COMMANDS[args.command](args, rng)
    except (OSError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())