from __future__ import annotations

import json

from strata.cli import main
from strata.contracts.eval_configs import EvalModel
from strata.contracts.model_configs import ForestConfig, KNNConfig, LDAConfig
from strata.contracts.run_config import RunConfig
from strata.contracts.split_configs import SplitCVModel
from strata.reporting.summary import format_run
from strata.use_cases import run_comparison


def _small_config(seed=42) -> RunConfig:
    return RunConfig(
        cv=SplitCVModel(n_splits=5),
        models=[LDAConfig(), KNNConfig(), ForestConfig(name="rf", n_estimators=20)],
        eval=EvalModel(seed=seed),
    )


def test_run_comparison_end_to_end():
    res = run_comparison(_small_config())
    assert res.dataset == "iris"
    assert (res.n_rows, res.n_train, res.n_holdout) == (150, 120, 30)
    assert res.classes == ["setosa", "versicolor", "virginica"]
    assert [m.name for m in res.comparison.models] == ["lda", "knn", "rf"]
    assert res.validation.model_name == res.comparison.best
    assert res.notes and res.notes[0].startswith("Ranking by mean accuracy")

    text = format_run(res)
    assert "Best by mean accuracy" in text
    assert "Confusion matrix" in text


def test_run_comparison_is_reproducible():
    a = run_comparison(_small_config(seed=3))
    b = run_comparison(_small_config(seed=3))
    assert a.model_dump() == b.model_dump()


def test_result_is_json_serialisable():
    res = run_comparison(_small_config())
    again = json.loads(res.model_dump_json())
    assert again["comparison"]["best"] == res.comparison.best


def test_cli_runs(capsys):
    assert main(["--k", "3", "--models", "lda,knn", "--seed", "1"]) == 0
    out = capsys.readouterr().out
    assert "Best by mean accuracy" in out
    assert "3-fold stratified CV on 120 rows" in out


def test_cli_rejects_bad_k():
    assert main(["--k", "1", "--models", "lda"]) == 2


def test_cli_rejects_unknown_model():
    assert main(["--models", "bogus"]) == 2


def test_cli_reads_json_config(tmp_path, capsys):
    cfg = {
        "cv": {"n_splits": 4},
        "models": [{"algo": "knn", "n_neighbors": 3}],
        "eval": {"metric": "kappa", "seed": 0},
    }
    p = tmp_path / "run.json"
    p.write_text(json.dumps(cfg))
    assert main(["--config", str(p)]) == 0
    assert "Best by mean kappa: knn" in capsys.readouterr().out
