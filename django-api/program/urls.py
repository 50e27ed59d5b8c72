from django.urls import path

from program.handlers import ItemCountsView, ProgramView, RegulationListView

urlpatterns = [
    path("program", ProgramView.as_view(), name="program"),
    path("program/item-counts", ItemCountsView.as_view(), name="item-counts"),
    path(
        "regulations/<str:category>",
        RegulationListView.as_view(),
        name="regulation-list",
    ),
]
