from program.handlers.views import ItemCountsView, ProgramView, RegulationListView

__all__ = ["ItemCountsView", "ProgramView", "RegulationListView"]
