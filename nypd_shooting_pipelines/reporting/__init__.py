from .export import save_results
from .figures import plot_counts, plot_linear_fit, plot_loess_fit, render_figures

__all__ = ["save_results", "plot_counts", "plot_linear_fit", "plot_loess_fit", "render_figures"]
