"""Result sinks: callables receiving ``(model_name, EvaluationResult)``."""

import json
import os

from wdbc_harness.evaluation.evaluator import EvaluationResult
from wdbc_harness.utils import get_logger

log = get_logger(__name__)


class LoggingSink:
    """Logs one summary line per evaluated model."""

    def __call__(self, model_name: str, result: EvaluationResult) -> None:
        log.info(
            "  %s: auc=%.4f, acc=%.4f, TP=%d TN=%d FP=%d FN=%d",
            model_name, result.auc, result.accuracy,
            result.tp, result.tn, result.fp, result.fn,
        )

    def close(self) -> None:
        pass


class JsonSink:
    """Collects results and writes them to a JSON file on close."""

    def __init__(self, path: str):
        self.path = path
        self.results = {}

    def __call__(self, model_name: str, result: EvaluationResult) -> None:
        self.results[model_name] = result.to_dict()

    def close(self) -> None:
        directory = os.path.dirname(self.path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(self.path, "w") as f:
            json.dump(self.results, f, indent=2)
        log.info("Results saved to: %s", self.path)
