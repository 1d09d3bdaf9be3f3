# scripts/run_comparison.py
from __future__ import annotations

import logging

from strata.api import format_run, run_comparison
from strata.contracts.eval_configs import EvalModel
from strata.contracts.model_configs import (
    ForestConfig,
    KNNConfig,
    LDAConfig,
    SVMConfig,
    TreeConfig,
)
from strata.contracts.run_config import DataModel, RunConfig
from strata.contracts.scale_configs import ScaleModel
from strata.contracts.split_configs import SplitCVModel, SplitHoldoutModel

# ==== EDIT THESE AS YOU LIKE ==================================================
DATA = DataModel(builtin="iris")
# DATA = DataModel(csv_path=r"./data/iris.csv", label_column="Species")

HOLDOUT = SplitHoldoutModel(holdout_frac=0.20)   # 80% train / 20% validation
CV = SplitCVModel(n_splits=10)

SCALE = ScaleModel(method="standard")

MODELS = [
    LDAConfig(),
    TreeConfig(name="cart"),
    KNNConfig(n_neighbors=5),
    SVMConfig(kernel="rbf", C=1.0),
    ForestConfig(name="rf", n_estimators=500),
]

EVAL = EvalModel(
    metric="accuracy",
    extra_metrics=["kappa"],
    seed=42,
)
# ============================================================================


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    cfg = RunConfig(
        data=DATA, holdout=HOLDOUT, cv=CV, scale=SCALE,
        models=MODELS, eval=EVAL,
    )
    result = run_comparison(cfg)

    print("\n=== COMPARISON RESULT ===")
    print(format_run(result))


if __name__ == "__main__":
    main()
