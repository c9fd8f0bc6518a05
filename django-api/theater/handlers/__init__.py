from theater.handlers.views import PlayListView, StatementView

__all__ = ["PlayListView", "StatementView"]
