"""Single-threshold classifiers for synthetic fruit records and shape bitmaps."""

__version__ = "0.1.0"