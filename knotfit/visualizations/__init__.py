from .fit_plot import plot_fit

__all__ = ["plot_fit"]
