from .datasets import Dataset, load_builtin, load_csv, load_dataset

__all__ = ["Dataset", "load_builtin", "load_csv", "load_dataset"]
