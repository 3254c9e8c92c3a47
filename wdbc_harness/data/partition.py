"""Seeded train/test partitioning."""

import math

import numpy as np

from wdbc_harness.data.dataset import Dataset, Split
from wdbc_harness.utils import get_logger

log = get_logger(__name__)


def train_size(n_rows: int, fraction: float) -> int:
    """Number of training rows: floor(fraction * n_rows), ignoring float noise."""
    return math.floor(round(fraction * n_rows, 9))


def split(dataset: Dataset, fraction: float, seed: int) -> Split:
    """
    Partition a dataset into train and test sets.

    ``floor(fraction * len(dataset))`` row indices are drawn uniformly
    without replacement from a generator seeded with ``seed``; they form the
    training set and the remaining rows form the test set. The same inputs
    always give the same partition. An empty side is allowed here and
    rejected by the operations that need rows.
    """
    if not 0.0 < fraction < 1.0:
        raise ValueError(f"fraction must be in (0, 1), got {fraction}")

    n = len(dataset)
    n_train = train_size(n, fraction)

    rng = np.random.default_rng(seed)
    train_indices = np.sort(rng.choice(n, size=n_train, replace=False))
    test_indices = np.setdiff1d(np.arange(n), train_indices)

    if n_train == 0 or n_train == n:
        log.warning(
            "Split of %d rows at fraction %.3f leaves an empty %s partition",
            n, fraction, "train" if n_train == 0 else "test",
        )

    log.info(
        "Split: %d train / %d test (seed=%d, fraction=%.2f)",
        len(train_indices), len(test_indices), seed, fraction,
    )

    return Split(
        train=dataset.take(train_indices),
        test=dataset.take(test_indices),
        train_indices=train_indices,
        test_indices=test_indices,
        fraction=fraction,
        seed=seed,
    )
