"""Mini README: Ledger listeners that render state for the interfaces.

``SummaryView`` keeps the running total, the entry list and the exportable
report text. ``ChartView`` keeps the income/expense doughnut chart. Both are
plain listeners: they rebuild from the full transaction sequence each time
the ledger broadcasts.
"""

from .chart_view import ChartView, DoughnutChart
from .summary_view import EntryLine, SummaryView

__all__ = ["ChartView", "DoughnutChart", "EntryLine", "SummaryView"]
