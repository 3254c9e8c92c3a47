"""Configuration constants and run settings for the evaluation harness."""

import json
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

# Feature schema of the WDBC table: ten nucleus measurements, each reported
# as mean, standard error and worst value, in this column order.
MEASUREMENTS = [
    "radius",
    "texture",
    "perimeter",
    "area",
    "smoothness",
    "compactness",
    "concavity",
    "concave points",
    "symmetry",
    "fractal_dimension",
]
STATISTICS = ["mean", "se", "worst"]
FEATURE_COLUMNS = [f"{m}_{s}" for s in STATISTICS for m in MEASUREMENTS]

# Diagnosis labels. Malignant is the positive class everywhere.
BENIGN = "B"
MALIGNANT = "M"
LABEL_MAPPING = {BENIGN: 0, MALIGNANT: 1}
POSITIVE_CLASS = LABEL_MAPPING[MALIGNANT]

DEFAULT_TRAIN_FRACTION = 0.7
DEFAULT_SEED = 42
DEFAULT_THRESHOLD = 0.5
SCALING_METHODS = ("standard", "minmax", "none")


class HarnessConfig(BaseModel):
    """Settings for one evaluation run. All values are supplied externally."""

    dataset: str = Field(default="wdbc", description="Built-in dataset name")
    csv_path: str | None = Field(
        default=None,
        description="Delimited file to load instead of the built-in dataset",
    )
    models: list[str] | None = Field(
        default=None,
        description="Adapter names to evaluate (null = all)",
    )
    hyperparameters: dict[str, dict] = Field(
        default_factory=dict,
        description="Per-adapter hyperparameter overrides, passed through verbatim",
    )
    train_fraction: float = Field(default=DEFAULT_TRAIN_FRACTION, gt=0.0, lt=1.0)
    seed: int = DEFAULT_SEED
    threshold: float = Field(default=DEFAULT_THRESHOLD, ge=0.0, le=1.0)
    scaling: str = Field(default="standard", pattern=f"^({'|'.join(SCALING_METHODS)})$")
    cv_folds: int = Field(default=0, ge=0, le=20)
    n_workers: int = Field(default=1, ge=1)
    continue_on_error: bool = False

    @field_validator("models")
    @classmethod
    def _known_models(cls, value):
        if value is None:
            return value
        from wdbc_harness.models import ADAPTERS

        unknown = sorted(set(value) - set(ADAPTERS))
        if unknown:
            raise ValueError(f"Unknown models: {unknown}. Available: {list(ADAPTERS)}")
        if not value:
            raise ValueError("At least one model is required")
        return value

    @field_validator("hyperparameters")
    @classmethod
    def _known_hyperparameter_targets(cls, value):
        from wdbc_harness.models import ADAPTERS

        unknown = sorted(set(value) - set(ADAPTERS))
        if unknown:
            raise ValueError(f"Hyperparameters given for unknown models: {unknown}")
        return value

    @field_validator("cv_folds")
    @classmethod
    def _fold_count(cls, value):
        if value == 1:
            raise ValueError("cv_folds must be 0 (disabled) or at least 2")
        return value

    @property
    def model_names(self) -> list[str]:
        from wdbc_harness.models import ADAPTERS

        return list(self.models) if self.models else list(ADAPTERS)

    @classmethod
    def from_json(cls, path) -> "HarnessConfig":
        """Load settings from a JSON file."""
        with open(Path(path)) as f:
            return cls.model_validate(json.load(f))
