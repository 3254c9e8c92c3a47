import numpy as np
import pandas as pd

from wdbc_harness.config import FEATURE_COLUMNS
from wdbc_harness.data import Dataset

# Small ensembles keep the end-to-end runs fast
FAST_HYPERPARAMETERS = {
    "random_forest": {"n_estimators": 20},
    "gradient_boosting": {"n_estimators": 20},
    "xgboost": {"n_estimators": 20},
    "mlp": {"hidden_layer_sizes": [8], "max_iter": 300},
}


def make_dataset(labels, seed=0) -> Dataset:
    """Random features with malignant rows shifted upwards so models can separate them."""
    rng = np.random.default_rng(seed)
    labels = list(labels)
    shift = np.array([[1.5 if label == "M" else 0.0] for label in labels])
    values = rng.normal(size=(len(labels), len(FEATURE_COLUMNS))) + shift
    return Dataset(
        ids=pd.Series([f"r{i}" for i in range(len(labels))]),
        features=pd.DataFrame(values, columns=FEATURE_COLUMNS),
        labels=pd.Series(labels),
    )
