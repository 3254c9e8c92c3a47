"""Dataset loading module for the WDBC diagnosis table."""

import pandas as pd
from sklearn.datasets import load_breast_cancer

from wdbc_harness.config import BENIGN, FEATURE_COLUMNS, MALIGNANT
from wdbc_harness.data.dataset import Dataset
from wdbc_harness.data.encoder import encode_labels
from wdbc_harness.errors import SchemaMismatchError
from wdbc_harness.utils import get_logger

log = get_logger(__name__)


def _sklearn_column_name(name: str) -> str:
    """Translate a scikit-learn feature name ("mean radius") to the CSV schema ("radius_mean")."""
    if name.startswith("mean "):
        base, stat = name[len("mean "):], "mean"
    elif name.startswith("worst "):
        base, stat = name[len("worst "):], "worst"
    elif name.endswith(" error"):
        base, stat = name[: -len(" error")], "se"
    else:
        raise SchemaMismatchError(f"Unexpected feature name in built-in dataset: {name!r}")
    return f"{base.replace('fractal dimension', 'fractal_dimension')}_{stat}"


def _load_builtin() -> pd.DataFrame:
    raw = load_breast_cancer()
    df = pd.DataFrame(raw.data, columns=[_sklearn_column_name(n) for n in raw.feature_names])
    # scikit-learn encodes 0 = malignant, 1 = benign
    diagnosis = pd.Series(raw.target).map({0: MALIGNANT, 1: BENIGN})
    df.insert(0, "diagnosis", diagnosis)
    df.insert(0, "id", range(len(df)))
    return df


# Registry of available datasets
DATASET_REGISTRY = {
    "wdbc": {
        "loader": _load_builtin,
        "description": "Wisconsin Diagnostic Breast Cancer (569 samples, 30 features), bundled with scikit-learn",
    },
}


class DatasetLoader:
    """Loads the diagnosis table and validates it against the feature schema."""

    def __init__(self, feature_columns: list[str] | None = None):
        self.feature_columns = list(feature_columns or FEATURE_COLUMNS)

    @staticmethod
    def list_available() -> list[str]:
        """Return names of all available datasets."""
        return list(DATASET_REGISTRY.keys())

    def load(self, name: str = "wdbc") -> Dataset:
        """Load a registered dataset by name."""
        if name not in DATASET_REGISTRY:
            raise ValueError(
                f"Unknown dataset '{name}'. "
                f"Available: {self.list_available()}"
            )

        entry = DATASET_REGISTRY[name]
        log.info("Loading dataset: %s", name)
        log.info("Description: %s", entry["description"])
        return self.from_frame(entry["loader"]())

    def load_csv(self, path, sep: str = ",") -> Dataset:
        """
        Load a delimited file.

        The first column is the record identifier, the second the raw
        diagnosis label; the declared feature columns are selected by name
        and any other columns are ignored.
        """
        log.info("Loading CSV from: %s", path)
        df = pd.read_csv(path, sep=sep)
        return self.from_frame(df)

    def from_frame(self, df: pd.DataFrame) -> Dataset:
        """Validate a raw frame and build a Dataset from it."""
        if df.shape[1] < 2:
            raise SchemaMismatchError(
                f"Expected an identifier and a label column, got {list(df.columns)}"
            )

        missing = [c for c in self.feature_columns if c not in df.columns]
        if missing:
            raise SchemaMismatchError(f"Missing feature columns: {missing}")

        id_column, label_column = df.columns[0], df.columns[1]
        if label_column in self.feature_columns:
            raise SchemaMismatchError(
                f"Second column must be the diagnosis label, got feature {label_column!r}"
            )

        try:
            features = df[self.feature_columns].apply(pd.to_numeric).astype(float)
        except (ValueError, TypeError) as e:
            raise SchemaMismatchError(f"Non-numeric feature value: {e}") from e

        null_counts = features.isnull().sum()
        if null_counts.any():
            raise SchemaMismatchError(
                f"Missing feature values: {null_counts[null_counts > 0].to_dict()}"
            )

        labels = df[label_column].reset_index(drop=True)
        # Fail fast on unknown labels instead of at training time
        encode_labels(labels)

        dataset = Dataset(
            ids=df[id_column].reset_index(drop=True),
            features=features.reset_index(drop=True),
            labels=labels,
        )
        log.info(
            "Loaded %d samples with %d features, class distribution %s",
            len(dataset),
            len(self.feature_columns),
            dataset.class_distribution(),
        )
        return dataset
