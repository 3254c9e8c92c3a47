import json

import pytest
from pydantic import ValidationError

from wdbc_harness.__main__ import build_parser
from wdbc_harness.config import SCALING_METHODS, HarnessConfig
from wdbc_harness.data import Preprocessor
from wdbc_harness.models import ADAPTERS


def test_defaults():
    config = HarnessConfig()
    assert config.train_fraction == 0.7
    assert config.seed == 42
    assert config.threshold == 0.5
    assert config.model_names == list(ADAPTERS)


@pytest.mark.parametrize("field, value", [
    ("train_fraction", 0.0),
    ("train_fraction", 1.0),
    ("threshold", 1.1),
    ("scaling", "robust"),
    ("cv_folds", 1),
    ("n_workers", 0),
    ("models", ["svm"]),
    ("models", []),
    ("hyperparameters", {"svm": {"C": 1.0}}),
])
def test_invalid_values_are_rejected(field, value):
    with pytest.raises(ValidationError):
        HarnessConfig(**{field: value})


@pytest.mark.parametrize("method", SCALING_METHODS)
def test_scaling_methods_accepted_everywhere(method):
    assert HarnessConfig(scaling=method).scaling == method
    assert Preprocessor(method).scaling == method
    assert build_parser().parse_args(["--scaling", method]).scaling == method


def test_model_selection_keeps_order():
    config = HarnessConfig(models=["xgboost", "random_forest"])
    assert config.model_names == ["xgboost", "random_forest"]


def test_from_json(tmp_path):
    path = tmp_path / "run.json"
    path.write_text(json.dumps({
        "train_fraction": 0.8,
        "seed": 7,
        "models": ["mlp"],
        "hyperparameters": {"mlp": {"hidden_layer_sizes": [16]}},
    }))

    config = HarnessConfig.from_json(path)
    assert config.train_fraction == 0.8
    assert config.seed == 7
    assert config.hyperparameters["mlp"] == {"hidden_layer_sizes": [16]}
