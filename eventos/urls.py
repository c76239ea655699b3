from django.urls import path

from eventos.handlers import EventListView

urlpatterns = [
    path("eventos", EventListView.as_view(), name="evento-list"),
]
