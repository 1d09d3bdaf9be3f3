from __future__ import annotations

"""Command-line entry point: compare classifiers on a stratified hold-out split."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from pydantic import ValidationError

from strata.contracts.eval_configs import EvalModel
from strata.contracts.model_configs import default_model_configs
from strata.contracts.run_config import DataModel, RunConfig
from strata.contracts.scale_configs import ScaleModel
from strata.contracts.split_configs import SplitCVModel, SplitHoldoutModel
from strata.errors import StrataError
from strata.reporting.summary import format_run
from strata.use_cases.run import run_comparison

logger = logging.getLogger("strata")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="strata",
        description="Stratified hold-out split + k-fold comparison of classifiers.",
    )

    # ---- data ----
    parser.add_argument("--dataset", type=str, default="iris",
                        choices=["iris", "wine", "breast_cancer"])
    parser.add_argument("--csv", type=str, default=None,
                        help="Delimited file to load instead of a builtin dataset.")
    parser.add_argument("--label-column", type=str, default=None,
                        help="Label column of --csv (default: last column).")

    # ---- split + cv ----
    parser.add_argument("--holdout-frac", type=float, default=0.2)
    parser.add_argument("--k", type=int, default=10, help="Number of CV folds.")
    parser.add_argument("--seed", type=int, default=42)

    # ---- models + scoring ----
    parser.add_argument("--models", type=str, default=None,
                        help="Comma-separated subset of: lda,cart,knn,svm,rf.")
    parser.add_argument("--scale", type=str, default="standard",
                        choices=["standard", "robust", "minmax", "none"])
    parser.add_argument("--metric", type=str, default="accuracy",
                        choices=["accuracy", "balanced_accuracy", "kappa", "f1_macro"])

    parser.add_argument("--config", type=str, default=None,
                        help="JSON RunConfig; overrides every other option.")
    parser.add_argument("-v", "--verbose", action="count", default=0)
    return parser


def config_from_args(args: argparse.Namespace) -> RunConfig:
    if args.config:
        return RunConfig.model_validate_json(Path(args.config).read_text(encoding="utf-8"))

    models = default_model_configs()
    if args.models:
        wanted = [m.strip() for m in args.models.split(",") if m.strip()]
        by_name = {m.display_name: m for m in models}
        unknown = [w for w in wanted if w not in by_name]
        if unknown:
            raise ValueError(f"Unknown model(s) {unknown}; choose from {sorted(by_name)}")
        models = [by_name[w] for w in wanted]

    return RunConfig(
        data=DataModel(builtin=args.dataset, csv_path=args.csv, label_column=args.label_column),
        holdout=SplitHoldoutModel(holdout_frac=args.holdout_frac),
        cv=SplitCVModel(n_splits=args.k),
        scale=ScaleModel(method=args.scale),
        models=models,
        eval=EvalModel(metric=args.metric, seed=args.seed),
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    level = logging.WARNING if args.verbose == 0 else (logging.INFO if args.verbose == 1 else logging.DEBUG)
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    try:
        cfg = config_from_args(args)
        result = run_comparison(cfg)
    except (StrataError, ValidationError, ValueError, FileNotFoundError) as e:
        logger.error("%s: %s", type(e).__name__, e)
        return 2

    print(format_run(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
