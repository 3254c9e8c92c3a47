import pandas as pd
import pytest

from wdbc_harness.config import FEATURE_COLUMNS
from wdbc_harness.data import DatasetLoader
from wdbc_harness.data.loader import _sklearn_column_name
from wdbc_harness.errors import InvalidLabelError, SchemaMismatchError


def test_feature_schema():
    assert len(FEATURE_COLUMNS) == 30
    assert FEATURE_COLUMNS[0] == "radius_mean"
    assert FEATURE_COLUMNS[-1] == "fractal_dimension_worst"
    assert "concave points_se" in FEATURE_COLUMNS


@pytest.mark.parametrize("sk_name, expected", [
    ("mean radius", "radius_mean"),
    ("radius error", "radius_se"),
    ("worst fractal dimension", "fractal_dimension_worst"),
    ("mean concave points", "concave points_mean"),
])
def test_sklearn_names_map_to_csv_schema(sk_name, expected):
    assert _sklearn_column_name(sk_name) == expected


def test_builtin_dataset(wdbc_dataset):
    assert len(wdbc_dataset) == 569
    assert wdbc_dataset.feature_names == FEATURE_COLUMNS
    assert wdbc_dataset.class_distribution() == {"B": 357, "M": 212}


def test_load_unknown_dataset():
    with pytest.raises(ValueError):
        DatasetLoader().load("not_a_dataset")


def test_load_csv_round_trips_builtin(wdbc_csv, wdbc_dataset):
    loaded = DatasetLoader().load_csv(wdbc_csv)
    assert len(loaded) == len(wdbc_dataset)
    assert loaded.feature_names == FEATURE_COLUMNS
    assert loaded.labels.tolist() == wdbc_dataset.labels.tolist()
    pd.testing.assert_frame_equal(loaded.features, wdbc_dataset.features, check_exact=False)


def test_load_csv_missing_feature_column(tmp_path, wdbc_csv):
    df = pd.read_csv(wdbc_csv).drop(columns=["area_worst"])
    path = tmp_path / "broken.csv"
    df.to_csv(path, index=False)

    with pytest.raises(SchemaMismatchError, match="area_worst"):
        DatasetLoader().load_csv(path)


def test_load_csv_unknown_label(tmp_path, wdbc_csv):
    df = pd.read_csv(wdbc_csv)
    df.loc[3, "diagnosis"] = "X"
    path = tmp_path / "bad_label.csv"
    df.to_csv(path, index=False)

    with pytest.raises(InvalidLabelError):
        DatasetLoader().load_csv(path)


def test_from_frame_rejects_non_numeric_features(wdbc_csv):
    df = pd.read_csv(wdbc_csv)
    df["radius_mean"] = df["radius_mean"].astype(object)
    df.loc[0, "radius_mean"] = "large"

    with pytest.raises(SchemaMismatchError):
        DatasetLoader().from_frame(df)


def test_from_frame_rejects_missing_values(wdbc_csv):
    df = pd.read_csv(wdbc_csv)
    df.loc[5, "texture_se"] = None

    with pytest.raises(SchemaMismatchError, match="texture_se"):
        DatasetLoader().from_frame(df)


def test_from_frame_requires_label_in_second_column(wdbc_csv):
    df = pd.read_csv(wdbc_csv)
    df = df[["id"] + FEATURE_COLUMNS + ["diagnosis"]]

    with pytest.raises(SchemaMismatchError):
        DatasetLoader().from_frame(df)


def test_from_frame_ignores_extra_columns(wdbc_csv):
    df = pd.read_csv(wdbc_csv)
    df["notes"] = "n/a"
    dataset = DatasetLoader().from_frame(df)
    assert "notes" not in dataset.feature_names
    assert "Unnamed: 32" not in dataset.feature_names
