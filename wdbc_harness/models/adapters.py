"""Concrete model adapters, one per classifier family."""

from sklearn.ensemble import GradientBoostingClassifier, RandomForestClassifier
from sklearn.neural_network import MLPClassifier
from xgboost import XGBClassifier

from wdbc_harness.config import DEFAULT_SEED
from wdbc_harness.models.base import ModelAdapter


class RandomForestAdapter(ModelAdapter):
    """Bagged decision-tree ensemble."""

    name = "random_forest"
    description = "Random forest (scikit-learn)"
    default_hyperparameters = {
        "n_estimators": 100,
        "max_depth": None,
        "random_state": DEFAULT_SEED,
        "n_jobs": -1,
    }

    def build_estimator(self, hyperparameters: dict):
        return RandomForestClassifier(**hyperparameters)


class GradientBoostingAdapter(ModelAdapter):
    """Boosted shallow trees fitted on the log-loss gradient."""

    name = "gradient_boosting"
    description = "Gradient boosting (scikit-learn)"
    default_hyperparameters = {
        "n_estimators": 100,
        "learning_rate": 0.1,
        "max_depth": 3,
        "random_state": DEFAULT_SEED,
    }

    def build_estimator(self, hyperparameters: dict):
        return GradientBoostingClassifier(**hyperparameters)


class XGBoostAdapter(ModelAdapter):
    """Extreme gradient boosting with histogram tree construction."""

    name = "xgboost"
    description = "Extreme gradient boosting (xgboost)"
    default_hyperparameters = {
        "n_estimators": 300,
        "max_depth": 4,
        "learning_rate": 0.05,
        "subsample": 0.9,
        "colsample_bytree": 0.9,
        "eval_metric": "logloss",
        "tree_method": "hist",
        "random_state": DEFAULT_SEED,
    }

    def build_estimator(self, hyperparameters: dict):
        return XGBClassifier(**hyperparameters)


class MLPAdapter(ModelAdapter):
    """Compact feed-forward network. Expects scaled features."""

    name = "mlp"
    description = "Feed-forward neural network (scikit-learn MLP)"
    default_hyperparameters = {
        "hidden_layer_sizes": (32, 16),
        "alpha": 1e-4,
        "max_iter": 1000,
        "random_state": DEFAULT_SEED,
    }

    def build_estimator(self, hyperparameters: dict):
        params = dict(hyperparameters)
        # JSON configs deliver layer sizes as lists
        if isinstance(params.get("hidden_layer_sizes"), list):
            params["hidden_layer_sizes"] = tuple(params["hidden_layer_sizes"])
        return MLPClassifier(**params)


# Registry of available adapters: name -> adapter class
ADAPTERS = {
    cls.name: cls
    for cls in (RandomForestAdapter, GradientBoostingAdapter, XGBoostAdapter, MLPAdapter)
}


def get_adapter(name: str) -> ModelAdapter:
    """Return a new adapter instance by registry name."""
    if name not in ADAPTERS:
        raise ValueError(f"Unknown model '{name}'. Available: {list(ADAPTERS)}")
    return ADAPTERS[name]()
