from .widgets import QueryFooter, ResultsPane

__all__ = ["QueryFooter", "ResultsPane"]
