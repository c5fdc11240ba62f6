"""Mini README: Chart listener maintaining the income/expense doughnut.

Structure:
    * DoughnutChart - a single chart instance with data, colours and proportions.
    * ChartView - listener that destroys the previous chart before drawing anew.

Only one live chart exists at a time. ``as_config`` emits a Chart.js
configuration so the browser can draw exactly what the view holds.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional, Sequence, Tuple

import numpy as np

from ..broadcasting import LedgerListener
from ..finance.transactions import Transaction, summarise
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

CHART_LABELS: Tuple[str, str] = ("Income", "Expense")
CHART_COLOURS: Tuple[str, str] = ("#2ecc71", "#e74c3c")


@dataclass(slots=True)
class DoughnutChart:
    """Two-segment proportion chart."""

    values: np.ndarray
    labels: Tuple[str, ...] = CHART_LABELS
    colours: Tuple[str, ...] = CHART_COLOURS
    destroyed: bool = field(default=False)

    @property
    def proportions(self) -> np.ndarray:
        total = float(self.values.sum())
        if total == 0:
            return np.zeros_like(self.values, dtype=float)
        return self.values / total

    def destroy(self) -> None:
        """Mark the chart as discarded so it is never drawn again."""

        self.destroyed = True

    def as_config(self) -> Dict[str, object]:
        if self.destroyed:
            raise RuntimeError("Cannot export a destroyed chart")
        return {
            "type": "doughnut",
            "data": {
                "labels": list(self.labels),
                "datasets": [
                    {
                        "data": [float(value) for value in self.values],
                        "backgroundColor": list(self.colours),
                    }
                ],
            },
        }


class ChartView(LedgerListener):
    """Redraw the income/expense doughnut whenever the ledger changes."""

    listener_name = "chart"

    def __init__(self) -> None:
        self.chart_instance: Optional[DoughnutChart] = None
        self.destroyed_count = 0

    def update(self, transactions: Sequence[Transaction]) -> None:
        summary = summarise(transactions)
        if self.chart_instance is not None:
            self.chart_instance.destroy()
            self.destroyed_count += 1
        self.chart_instance = DoughnutChart(
            values=np.array([summary.total_income, summary.total_expense], dtype=float)
        )
        LOGGER.debug(
            "Chart redrawn: income=%.2f expense=%.2f", summary.total_income, summary.total_expense
        )

    def as_config(self) -> Optional[Dict[str, object]]:
        if self.chart_instance is None:
            return None
        return self.chart_instance.as_config()
