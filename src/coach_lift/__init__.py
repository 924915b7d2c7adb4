"""coach-lift: training program generator and workout log."""

__version__ = "0.1.0"
