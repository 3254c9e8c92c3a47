from wdbc_harness.data.dataset import Dataset, Split
from wdbc_harness.data.encoder import decode, encode, encode_labels
from wdbc_harness.data.loader import DATASET_REGISTRY, DatasetLoader
from wdbc_harness.data.partition import split
from wdbc_harness.data.preprocessor import Preprocessor

__all__ = [
    "Dataset",
    "Split",
    "encode",
    "encode_labels",
    "decode",
    "DATASET_REGISTRY",
    "DatasetLoader",
    "split",
    "Preprocessor",
]
