# biasclassifier

A small toolkit for experimenting with the simplest possible learner: a single
threshold (a "bias") that separates two classes of samples. The bias is trained
by repeatedly picking a random sample and nudging the threshold up or down by a
fixed fraction of itself (`training.nudge_bias`). It is then evaluated by
counting how often fresh random samples fall on the expected side.

Three kinds of data are supported:

- **Weighed fruits** (`biasclassifier.fruits`): 25 oranges weighing between
  0.082 and 0.083, followed by 25 other fruits weighing anywhere in `[0, 1)`.
  They are stored as text, one `weight species` line per fruit, where the
  species is `l` for an orange and `q` for any other fruit.
- **Featured fruits** (`biasclassifier.fruits`): 15 oranges followed by 15
  other fruits, each with eight features (weight, volume, colour, position,
  texture, consistency, temperature, age). Each orange feature lies in a band
  of width 0.1; the other fruits' features lie anywhere in `[0, 1)`. They are
  stored as consecutive 36-byte little-endian records: eight 32-bit floats, a
  species byte and three padding bytes. The classifier compares the sum of
  the features (`FeaturedFruit.total()`) with the bias.
- **Bitmaps** (`biasclassifier.bitmaps`): 60×60 top-down 24-bit BMP files
  named `amostraNNNN.bmp`. The first half show a black disc of radius 10, the
  second half a black square, each on a white background at a random position.
  The classifier compares each image's pixel sum, the sum of its pixel bytes
  read as signed bytes, with the bias.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Command line

The package installs a `biasclassifier` command with one sub-command per step.
Every sub-command accepts `--seed N` to make its random choices reproducible;
without it the generator is seeded from the clock.

```
biasclassifier --help
```

| Command | What it does | Options (defaults) |
|---|---|---|
| `gen-weights` | Writes weighed fruits and prints them back, numbered | `--output` (`entradas1.txt`) |
| `gen-features` | Writes featured fruits and prints them back, numbered | `--output` (`entradas2.txt`) |
| `gen-images` | Writes circle and square bitmaps, printing each path and size | `--directory` (`imagens`), `--count` (120) |
| `train-weights` | Trains a bias on orange weights and prints it | `--input` (`entradas1.txt`), `--iterations` (4000) |
| `train-features` | Trains a bias on feature totals and writes it to a file | `--input` (`entradas2.txt`), `--output` (`bias1.txt`), `--iterations` (1000000), `--quiet` |
| `train-images` | Trains a bias on pixel sums and writes it to a file | `--directory` (`imagens`), `--count` (120), `--output` (`bias2.txt`), `--iterations` (300000), `--quiet` |
| `test-features` | Evaluates a stored bias on fresh random fruits | `--bias` (`bias1.txt`), `--trials` (1000) |
| `test-images` | Evaluates a stored bias on randomly picked images | `--directory` (`imagens`), `--count` (120), `--bias` (`bias2.txt`), `--trials` (1000) |

`train-features` and `train-images` print the bias after every step unless
`--quiet` is given. `gen-images` does not create its directory; create it
first. A typical image session:

```
mkdir imagens
biasclassifier gen-images --seed 1
biasclassifier train-images --quiet --seed 1
biasclassifier test-images --seed 1
```

The test commands print a report of four counts. For fruits, an orange is
counted correct when its total is below the bias and any other fruit when its
total is above it. For images, a circle is counted correct when its pixel sum
is above the bias and a square when it is below; an image whose sum equals the
bias is not counted at all.

On a missing or malformed file the command prints `error: ...` to standard
error and exits with status 1.

## Library use

```python
import random
from pathlib import Path

from biasclassifier.fruits import generate_featured_fruits
from biasclassifier.training import train_feature_bias, write_bias, read_bias
from biasclassifier.evaluation import evaluate_fruits

rng = random.Random(1)
fruits = generate_featured_fruits(rng)
bias = train_feature_bias(fruits, rng, 100_000, None)
write_bias(Path("bias1.txt"), bias)

counts = evaluate_fruits(read_bias(Path("bias1.txt")), rng, 1000)
print(counts.report("orange", "other"))
```

For images, `bitmaps.generate_samples(directory, rng, count)` writes the BMP
files, yielding each path as it is written; `bitmaps.load_pixel_sums(directory,
count)` reads back one pixel sum per image; and `training.train_image_bias` and
`evaluation.evaluate_images` train and test a bias on those sums. The lower
level pieces, `draw_circle`, `draw_square`, `encode_bmp` and `pixel_sum`, are
available too, as are `pack_featured_fruit` and `unpack_featured_fruit` for
single binary records.

All functions that involve randomness take a `random.Random` instance.

## What it does not do

The bias learned by `train-weights` is only printed; there is no command that
stores or evaluates it. The package has no learner beyond a single threshold:
there are no per-feature weights, and no way to classify a single sample given
on the command line.