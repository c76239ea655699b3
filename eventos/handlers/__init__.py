from eventos.handlers.views import EventListView

__all__ = ["EventListView"]
