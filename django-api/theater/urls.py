from django.urls import path

from theater.handlers import PlayListView, StatementView

urlpatterns = [
    path("plays", PlayListView.as_view(), name="play-list"),
    path("statements", StatementView.as_view(), name="statement-create"),
]
