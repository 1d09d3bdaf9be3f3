from __future__ import annotations

"""Plain-text rendering of comparison and hold-out results."""

from typing import Any, List, Sequence

from strata.contracts.results import ComparisonResult, RunResult, ValidationResult


def _table(header: Sequence[str], rows: Sequence[Sequence[Any]]) -> List[str]:
    cells = [list(map(str, header))] + [[str(c) for c in r] for r in rows]
    widths = [max(len(r[i]) for r in cells) for i in range(len(header))]
    out = []
    for j, r in enumerate(cells):
        out.append("  ".join(c.rjust(w) if i else c.ljust(w) for i, (c, w) in enumerate(zip(r, widths))))
        if j == 0:
            out.append("  ".join("-" * w for w in widths))
    return out


def format_comparison(result: ComparisonResult) -> str:
    lines = [
        f"{result.n_splits}-fold stratified CV on {result.n_train} rows "
        f"(fold sizes {min(result.fold_sizes)}-{max(result.fold_sizes)}, seed {result.seed})",
    ]
    for metric in result.metrics:
        lines.append("")
        lines.append(f"{metric}:")
        rows = []
        for m in result.models:
            s = m.summary[metric]
            rows.append([m.name] + [f"{v:.4f}" for v in (s.min, s.q1, s.median, s.mean, s.q3, s.max)])
        lines.extend(_table(["model", "min", "q1", "median", "mean", "q3", "max"], rows))
    lines.append("")
    lines.append(f"Best by mean {result.primary_metric}: {result.best}")
    return "\n".join(lines)


def format_validation(result: ValidationResult) -> str:
    conf = result.confusion
    labels = [str(l) for l in conf.get("labels", [])]
    matrix = conf.get("matrix", [])
    g = conf.get("global", {})

    lines = [f"Hold-out evaluation of {result.model_name} ({result.n_holdout} rows, trained on {result.n_train})", ""]
    lines.append("Confusion matrix (rows = reference, columns = prediction):")
    lines.extend(_table(["reference"] + labels, [[lab] + list(row) for lab, row in zip(labels, matrix)]))
    lines.append("")

    if g:
        lo, hi = g.get("accuracy_ci", [float("nan"), float("nan")])
        lines.append(f"Accuracy : {g['accuracy']:.4f}  (95% CI {lo:.4f}, {hi:.4f})")
        lines.append(f"NIR      : {g['no_information_rate']:.4f}  (P[Acc > NIR] = {g['p_value_acc_gt_nir']:.3g})")
        lines.append(f"Kappa    : {g['kappa']:.4f}")
        lines.append("")

    rows = [
        [pc["label"], f"{pc['sensitivity']:.4f}", f"{pc['specificity']:.4f}",
         f"{pc['precision']:.4f}", f"{pc['balanced_accuracy']:.4f}", pc["support"]]
        for pc in conf.get("per_class", [])
    ]
    if rows:
        lines.extend(_table(["class", "sensitivity", "specificity", "precision", "bal. acc", "support"], rows))
    return "\n".join(lines)


def format_run(result: RunResult) -> str:
    head = (
        f"Dataset {result.dataset}: {result.n_rows} rows, classes {result.classes}; "
        f"hold-out {result.holdout_frac:g} -> {result.n_train} train / {result.n_holdout} hold-out"
    )
    parts = [head, "", format_comparison(result.comparison), "", format_validation(result.validation)]
    if result.notes:
        parts.append("")
        parts.extend(f"- {n}" for n in result.notes)
    return "\n".join(parts)
