from __future__ import annotations

from typing import Any, Mapping, Optional, Union

import numpy as np
import matplotlib.pyplot as plt

from knotfit.contracts.results import PlotData


def _as_plot_data(data: Union[PlotData, Mapping[str, Any]]) -> PlotData:
    if isinstance(data, PlotData):
        return data
    return PlotData.model_validate(data)


def plot_fit(
    data: Union[PlotData, Mapping[str, Any]],
    *,
    ax: Optional[Any] = None,
    title: Optional[str] = None,
    show_knots: bool = True,
    figsize: tuple = (10, 5),
    alpha: float = 0.85,
):
    """
    Scatter the original points and overlay the fitted piecewise-linear curve.

    `data` is the plot payload returned by ``PiecewiseLinearRegression.get_plot_data()``
    (or the ``plot`` field of a fit summary). Interior vertices of the fitted
    curve are the knots; they are marked when `show_knots` is True.

    Returns (fig, ax). The figure is not shown.
    """
    payload = _as_plot_data(data)

    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.figure

    ox = np.asarray(payload.original.x, dtype=float)
    oy = np.asarray(payload.original.y, dtype=float)
    fx = np.asarray(payload.fitted.x, dtype=float)
    fy = np.asarray(payload.fitted.y, dtype=float)

    ax.scatter(ox, oy, s=26, alpha=alpha, edgecolor="black", linewidths=0.5, label="original")
    ax.plot(fx, fy, color="tab:red", linewidth=2.0, label="fitted")
    if show_knots and fx.size > 2:
        ax.scatter(fx[1:-1], fy[1:-1], s=60, marker="D", color="tab:red", zorder=3, label="knots")

    ax.set_xlabel("x")
    ax.set_ylabel("y")
    if title:
        ax.set_title(title)
    ax.legend(loc="best", frameon=True)
    return fig, ax
