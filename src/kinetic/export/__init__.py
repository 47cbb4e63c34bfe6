"""Export and display of engine results."""

from __future__ import annotations

from kinetic.export.formatters import TableFormatter, day_report, totals_to_dict

__all__ = ["TableFormatter", "day_report", "totals_to_dict"]
