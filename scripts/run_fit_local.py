# scripts/run_fit_local.py
from __future__ import annotations

import logging

from knotfit.api import RegressionConfig, fit_piecewise_linear

# ==== EDIT THESE AS YOU LIKE ==================================================
# 21 quarters of revenue, starting 2019Q2
Y = [
    480908734.61, 418598119.85, 427460738.33, 618999891.13, 313439976.55,
    299484629.79, 519625618.31, 665667339.66, 708570866.01, 766344390.58,
    749944347.47, 902043201.84, 674475488.50, 631845186.90, 652163993.42,
    779891715.88, 797533136.93, 836989815.67, 956302630.94, 1124572881.12,
    1010948927.96,
]
X = [2019.25 + i / 4 for i in range(len(Y))]

CONFIG = RegressionConfig(
    n_candidate_knots=14,
    max_knot_count=5,
    folds=5,
    refinement_iterations=8,
    seed=161,
)

PLOT_PATH = None  # e.g. "./fit.png" to save a matplotlib figure
# ============================================================================


def main():
    logging.basicConfig(level=logging.DEBUG)
    result = fit_piecewise_linear(X, Y, CONFIG)

    print("\n=== CROSS-VALIDATION ===")
    print("knot_count,train_rmse,test_rmse")
    for cv in result.cv_results:
        print(f"{cv.knot_count},{cv.train_rmse:.4f},{cv.test_rmse:.4f}")

    print("\n=== FINAL MODEL ===")
    print(f"Best knot count: {result.best_knot_count}")
    print(f"RMSE: {result.rmse}")
    print(f"Knots: {list(result.model.knots)}")
    print(f"Coefficients: {list(result.model.coefficients)}")

    print("\n=== TABLE (x, y, y_pred) ===")
    for row in result.table:
        print(",".join(str(v) for v in row))

    if PLOT_PATH:
        from knotfit.visualizations import plot_fit

        fig, _ = plot_fit(result.plot, title="Piecewise-linear fit")
        fig.savefig(PLOT_PATH, dpi=120)
        print(f"\nPlot written to {PLOT_PATH}")


if __name__ == "__main__":
    main()
