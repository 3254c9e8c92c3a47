from wdbc_harness.models.adapters import (
    ADAPTERS,
    GradientBoostingAdapter,
    MLPAdapter,
    RandomForestAdapter,
    XGBoostAdapter,
    get_adapter,
)
from wdbc_harness.models.base import ModelAdapter, TrainedModel

__all__ = [
    "ADAPTERS",
    "ModelAdapter",
    "TrainedModel",
    "RandomForestAdapter",
    "GradientBoostingAdapter",
    "XGBoostAdapter",
    "MLPAdapter",
    "get_adapter",
]
