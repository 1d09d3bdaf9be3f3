"""strata: stratified hold-out / k-fold partitioning and classifier comparison.

Prefer importing the public surface from :mod:`strata.api`.
"""

__version__ = "0.1.0"
