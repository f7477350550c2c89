"""StatsService — chain population report."""

from __future__ import annotations

from dnsblock.services.base import BaseService
from dnsblock.services.result import ServiceResult


class StatsService(BaseService):
    def stats(self) -> ServiceResult:
        return ServiceResult(ok=True, op="stats", data=self._table.stats().to_dict())
