"""
WDBC model evaluation harness.

Loads the Wisconsin Diagnostic Breast Cancer table, splits it with a seeded
partition, fits several classifier families behind one adapter interface
and compares them by confusion matrix and AUC.

DISCLAIMER: This is a machine learning research tool for a publicly
available dataset. It does NOT provide medical diagnoses or replace
professional medical advice.
"""

__version__ = "0.1.0"
