import logging

import numpy as np
import pandas as pd
import pytest

from wdbc_harness.data import DatasetLoader
from wdbc_harness.utils import set_level
from tests.helpers import make_dataset


@pytest.fixture
def tiny_dataset():
    """Ten records: seven benign, three malignant."""
    return make_dataset(["B"] * 7 + ["M"] * 3)


@pytest.fixture
def separable_dataset():
    """Sixty records with a clear class shift."""
    return make_dataset(["B", "M"] * 30, seed=1)


@pytest.fixture(scope="session")
def wdbc_dataset():
    return DatasetLoader().load("wdbc")


@pytest.fixture
def wdbc_csv(tmp_path, wdbc_dataset):
    """The built-in table written in the public CSV layout, trailing empty column included."""
    df = pd.DataFrame({"id": wdbc_dataset.ids, "diagnosis": wdbc_dataset.labels})
    df = pd.concat([df, wdbc_dataset.features], axis=1)
    df["Unnamed: 32"] = np.nan
    path = tmp_path / "data.csv"
    df.to_csv(path, index=False)
    return path


@pytest.fixture
def restore_log_level():
    """Put harness loggers back to INFO after a test lowers them."""
    yield
    set_level(logging.INFO)
