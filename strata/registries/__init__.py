"""Registries.

Add a new implementation, register it, and the rest of the system stays
closed for modification:

    @register_model_builder("nb")
    def _nb(cfg, seed):
        return MyNaiveBayesBuilder(cfg)
"""

from .models import make_model_builder, register_model_builder, list_model_algos
from .splitters import make_splitter, register_splitter, list_split_modes
