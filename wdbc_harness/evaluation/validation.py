"""Stratified k-fold cross-validation through the adapter interface."""

import numpy as np
from sklearn.model_selection import StratifiedKFold

from wdbc_harness.config import DEFAULT_SEED, DEFAULT_THRESHOLD
from wdbc_harness.data.dataset import Dataset, Split
from wdbc_harness.data.preprocessor import Preprocessor
from wdbc_harness.evaluation.evaluator import EvaluationResult, evaluate
from wdbc_harness.models.base import ModelAdapter
from wdbc_harness.utils import get_logger

log = get_logger(__name__)


def cross_validate(
    adapter: ModelAdapter,
    dataset: Dataset,
    folds: int = 5,
    seed: int = DEFAULT_SEED,
    threshold: float = DEFAULT_THRESHOLD,
    hyperparameters: dict | None = None,
    scaling: str = "none",
) -> list[EvaluationResult]:
    """
    Run fit/predict/evaluate on each stratified fold of ``dataset``.

    ``dataset`` must be unscaled: a fresh scaler is fitted on each fold's
    training rows, so held-out rows never contribute to scaling statistics.
    """
    if folds < 2:
        raise ValueError(f"folds must be at least 2, got {folds}")

    y = dataset.encoded_labels()
    skf = StratifiedKFold(n_splits=folds, shuffle=True, random_state=seed)

    results = []
    for i, (train_idx, test_idx) in enumerate(skf.split(np.zeros(len(y)), y), start=1):
        fold = Preprocessor(scaling).fit_transform(Split(
            train=dataset.take(train_idx),
            test=dataset.take(test_idx),
            train_indices=train_idx,
            test_indices=test_idx,
            fraction=(folds - 1) / folds,
            seed=seed,
        ))
        model = adapter.fit(fold.train, hyperparameters)
        result = evaluate(
            adapter.predict(model, fold.test), fold.test.encoded_labels(), threshold
        )
        log.debug("  %s fold %d/%d: auc=%.4f", adapter.name, i, folds, result.auc)
        results.append(result)

    aucs = np.array([r.auc for r in results])
    log.info(
        "%s: %d-fold CV AUC=%.4f (+/- %.4f)",
        adapter.name, folds, aucs.mean(), aucs.std(),
    )
    return results
