from wdbc_harness.evaluation.evaluator import EvaluationResult, evaluate
from wdbc_harness.evaluation.sinks import JsonSink, LoggingSink
from wdbc_harness.evaluation.validation import cross_validate

__all__ = [
    "EvaluationResult",
    "evaluate",
    "cross_validate",
    "LoggingSink",
    "JsonSink",
]
