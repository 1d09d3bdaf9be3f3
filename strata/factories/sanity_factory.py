from __future__ import annotations
from strata.components.interfaces import SanityChecker
from strata.components.sanity import BasicClassificationSanity

def make_sanity_checker() -> SanityChecker:
    return BasicClassificationSanity()
