"""Ports for reading weight logs from a spreadsheet export."""

from __future__ import annotations

from abc import ABC, abstractmethod


class SheetFetchError(RuntimeError):
    """The spreadsheet export could not be retrieved or contained no records."""


class WeightSheetPort(ABC):
    """Interface describing access to the published weight sheet."""

    @abstractmethod
    async def fetch_csv(self) -> str:
        """Return the raw CSV export of the sheet."""
