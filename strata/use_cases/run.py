from __future__ import annotations

"""End-to-end comparison run.

load -> sanity -> stratified hold-out split -> k-fold comparison of every
configured model on the training rows -> refit of the best model and a
single evaluation on the hold-out rows.

Seeds: the run seed (``eval.seed``, default 0) is the root of an
:class:`RngManager`; the hold-out split, the CV folds and each model draw
from their own named child stream, so changing one model's config never
changes the partitions.
"""

import logging
from typing import Optional

from strata.components.splitters.holdout import stratified_split
from strata.contracts.results import RunResult
from strata.contracts.run_config import RunConfig
from strata.core.json_safety import to_jsonable
from strata.core.progress import ProgressCallback
from strata.factories.data_loading_factory import make_data_loader
from strata.factories.sanity_factory import make_sanity_checker
from strata.runtime.random.rng import RngManager
from strata.use_cases._deps import resolve_seed

from .comparison import compare_models
from .validation import validate_on_holdout

logger = logging.getLogger(__name__)


def run_comparison(
    run_config: RunConfig,
    *,
    progress: Optional[ProgressCallback] = None,
) -> RunResult:
    cfg = run_config

    # --- Load data ---------------------------------------------------------
    dataset = make_data_loader(cfg.data).load()

    # --- Checks ------------------------------------------------------------
    make_sanity_checker().check(dataset.X, dataset.y)

    # --- RNG ----------------------------------------------------------------
    seed = resolve_seed(cfg.eval.seed, fallback=0)
    rngm = RngManager(seed)

    # --- Hold-out split ----------------------------------------------------
    split = stratified_split(
        dataset.y,
        cfg.holdout.holdout_frac,
        rngm.child_seed("data/holdout"),
        classes=dataset.classes,
        n_rows=dataset.n_rows,
    )
    logger.info(
        "Hold-out split of %s: %d train / %d hold-out rows",
        dataset.name, split.train_idx.size, split.holdout_idx.size,
    )

    # --- Resampled comparison ----------------------------------------------
    comparison = compare_models(
        dataset,
        split.train_idx,
        cfg.models,
        cv=cfg.cv,
        scale=cfg.scale,
        eval_cfg=cfg.eval,
        seed=seed,
        progress=progress,
    )

    # --- Best model on the hold-out set ------------------------------------
    best_cfg = next(m for m in cfg.models if m.display_name == comparison.best)
    validation = validate_on_holdout(
        dataset,
        split,
        best_cfg,
        scale=cfg.scale,
        eval_cfg=cfg.eval,
        seed=seed,
    )

    notes = [f"Ranking by mean {comparison.primary_metric}: " + " > ".join(comparison.ranking())]

    return RunResult(
        dataset=dataset.name,
        n_rows=dataset.n_rows,
        classes=to_jsonable(list(dataset.classes)),
        holdout_frac=split.holdout_frac,
        seed=seed,
        n_train=int(split.train_idx.size),
        n_holdout=int(split.holdout_idx.size),
        comparison=comparison,
        validation=validation,
        notes=notes,
    )
