"""ReportService — sales totals and drawer contents."""

from __future__ import annotations

from lemonctl.domain.report import format_report
from lemonctl.services.base import BaseService
from lemonctl.services.contracts import ReportResultData, dump_validated
from lemonctl.services.result import ServiceResult


class ReportService(BaseService):
    """Read-only view over the drawer and the sales total."""

    def report(self) -> ServiceResult:
        with self._stand.read() as store:
            snapshot = store.snapshot()

        data = dump_validated(
            ReportResultData,
            {
                "report": format_report(snapshot),
                "lemonades_sold": snapshot.lemonades_sold,
                "profit": snapshot.profit,
                "cash_value": snapshot.cash_value,
                "bills": {str(d): c for d, c in snapshot.bills.items()},
            },
        )
        return ServiceResult(ok=True, op="report", data=data)
