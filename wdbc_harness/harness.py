"""
Evaluation harness.

Orchestrates the pipeline: data loading -> partitioning -> preprocessing ->
per-model fit/predict/evaluate -> result sinks. Each model runs
independently against the same fixed test partition.
"""

import time
import traceback
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field

import numpy as np
import pandas as pd

from wdbc_harness.config import HarnessConfig
from wdbc_harness.data import Dataset, DatasetLoader, Preprocessor, Split, split
from wdbc_harness.evaluation import EvaluationResult, LoggingSink, cross_validate, evaluate
from wdbc_harness.models import get_adapter
from wdbc_harness.utils import get_logger

log = get_logger(__name__)

DISCLAIMER = (
    "DISCLAIMER: This harness compares ML classifiers on a public research "
    "dataset. It does NOT provide medical diagnoses or replace professional "
    "medical advice."
)


@dataclass(frozen=True)
class ModelOutcome:
    """Everything recorded for one successfully evaluated model."""

    name: str
    description: str
    result: EvaluationResult
    fit_seconds: float
    cv_auc_mean: float | None = None
    cv_auc_std: float | None = None
    top_features: tuple = ()


@dataclass
class HarnessReport:
    """Per-model outcomes of one run, in configured model order."""

    results: dict = field(default_factory=dict)
    failures: dict = field(default_factory=dict)
    split_sizes: dict = field(default_factory=dict)

    @property
    def best_model_name(self) -> str | None:
        if not self.results:
            return None
        return max(self.results, key=lambda n: self.results[n].result.auc)

    def comparison(self) -> pd.DataFrame:
        """One row per model, sorted by test AUC (best first)."""
        rows = []
        for name, outcome in self.results.items():
            row = {"model": name, "description": outcome.description}
            row.update(outcome.result.to_dict())
            row["cv_auc_mean"] = outcome.cv_auc_mean
            row["cv_auc_std"] = outcome.cv_auc_std
            row["fit_seconds"] = round(outcome.fit_seconds, 3)
            rows.append(row)
        if not rows:
            return pd.DataFrame()
        df = pd.DataFrame(rows).sort_values("auc", ascending=False, kind="stable")
        return df.reset_index(drop=True)

    def to_dict(self) -> dict:
        return {
            "split_sizes": self.split_sizes,
            "best_model": self.best_model_name,
            "results": {
                name: {
                    "description": o.description,
                    "metrics": o.result.to_dict(),
                    "cv_auc_mean": o.cv_auc_mean,
                    "cv_auc_std": o.cv_auc_std,
                    "fit_seconds": round(o.fit_seconds, 3),
                    "top_features": [
                        {"feature": f, "importance": round(imp, 6)}
                        for f, imp in o.top_features
                    ],
                }
                for name, o in self.results.items()
            },
            "failures": self.failures,
        }


class EvaluationHarness:
    """
    Runs every configured model through the same split and scoring.

    Stages:
        1. Data Loading    - read the diagnosis table
        2. Partitioning    - seeded train/test split
        3. Preprocessing   - scaler fitted on train rows
        4. Evaluation      - fit, predict and score each model
    """

    def __init__(self, config: HarnessConfig | None = None, sinks: list | None = None):
        self.config = config or HarnessConfig()
        self.sinks = list(sinks) if sinks is not None else [LoggingSink()]

        self._dataset = None
        self._raw_split = None
        self._split = None
        self._report = None

    def run(self, dataset: Dataset | None = None) -> HarnessReport:
        """Execute the full pipeline and return the report."""
        log.info("=" * 60)
        log.info("WDBC MODEL EVALUATION HARNESS")
        log.info("=" * 60)
        log.info(DISCLAIMER)

        self._dataset = dataset
        stages = [
            ("1/4 Data Loading", self._stage_load),
            ("2/4 Partitioning", self._stage_split),
            ("3/4 Preprocessing", self._stage_preprocess),
            ("4/4 Evaluation", self._stage_evaluate),
        ]

        for stage_name, stage_fn in stages:
            log.info("-" * 60)
            log.info("STAGE: %s", stage_name)
            log.info("-" * 60)
            try:
                stage_fn()
            except Exception:
                log.error("Stage '%s' failed:\n%s", stage_name, traceback.format_exc())
                raise

        for sink in self.sinks:
            close = getattr(sink, "close", None)
            if close is not None:
                close()

        return self._report

    def _stage_load(self):
        if self._dataset is not None:
            log.info("Using supplied dataset (%d samples)", len(self._dataset))
            return
        loader = DatasetLoader()
        if self.config.csv_path:
            self._dataset = loader.load_csv(self.config.csv_path)
        else:
            self._dataset = loader.load(self.config.dataset)

    def _stage_split(self):
        self._raw_split = split(self._dataset, self.config.train_fraction, self.config.seed)

    def _stage_preprocess(self):
        preprocessor = Preprocessor(scaling=self.config.scaling)
        self._split = preprocessor.fit_transform(self._raw_split)

    def _stage_evaluate(self):
        names = self.config.model_names
        log.info(
            "Evaluating %d models on %d test samples",
            len(names), len(self._split.test),
        )

        if self.config.n_workers > 1:
            # map() yields in submission order, so the report order is fixed
            with ThreadPoolExecutor(max_workers=self.config.n_workers) as pool:
                collected = list(zip(names, pool.map(self._run_one, names)))
        else:
            collected = [(name, self._run_one(name)) for name in names]

        report = HarnessReport(split_sizes=self._split.sizes)
        for name, (outcome, error) in collected:
            if error is not None:
                report.failures[name] = error
                continue
            report.results[name] = outcome
            for sink in self.sinks:
                sink(name, outcome.result)

        if report.results:
            best = report.best_model_name
            log.info("Best model on test set: %s (AUC=%.4f)", best, report.results[best].result.auc)
        if report.failures:
            log.warning("%d model(s) failed: %s", len(report.failures), list(report.failures))

        self._report = report

    def _run_one(self, name: str):
        """Evaluate one model; with continue_on_error, turn its exception into a recorded failure."""
        try:
            return self.evaluate_model(name, self._split, raw_train=self._raw_split.train), None
        except Exception as e:
            if not self.config.continue_on_error:
                raise
            log.error("Model '%s' failed: %s", name, e)
            return None, f"{type(e).__name__}: {e}"

    def evaluate_model(self, name: str, data: Split, raw_train: Dataset | None = None) -> ModelOutcome:
        """
        Full fit/predict/evaluate cycle for one model.

        ``data`` is the preprocessed split. Cross-validation runs on
        ``raw_train``, the unscaled training rows, and scales per fold; without
        it the already processed ``data.train`` is used as is.
        """
        adapter = get_adapter(name)
        hyperparameters = self.config.hyperparameters.get(name)

        t0 = time.time()
        model = adapter.fit(data.train, hyperparameters)
        fit_seconds = time.time() - t0

        scores = adapter.predict(model, data.test)
        result = evaluate(scores, data.test.encoded_labels(), self.config.threshold)

        cv_mean = cv_std = None
        if self.config.cv_folds >= 2:
            cv_train, cv_scaling = (
                (raw_train, self.config.scaling) if raw_train is not None else (data.train, "none")
            )
            cv_results = cross_validate(
                adapter, cv_train,
                folds=self.config.cv_folds,
                seed=self.config.seed,
                threshold=self.config.threshold,
                hyperparameters=hyperparameters,
                scaling=cv_scaling,
            )
            aucs = np.array([r.auc for r in cv_results])
            cv_mean, cv_std = round(float(aucs.mean()), 4), round(float(aucs.std()), 4)

        return ModelOutcome(
            name=name,
            description=adapter.description,
            result=result,
            fit_seconds=fit_seconds,
            cv_auc_mean=cv_mean,
            cv_auc_std=cv_std,
            top_features=tuple(adapter.feature_importances(model)[:10]),
        )
