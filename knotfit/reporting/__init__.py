from .json_safety import safe_float_list
from .plot_payload import build_plot_data, fitted_polyline_x

__all__ = ["build_plot_data", "fitted_polyline_x", "safe_float_list"]
