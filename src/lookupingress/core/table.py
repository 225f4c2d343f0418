"""Text rendering of lookup results."""

from __future__ import annotations

import json
from collections.abc import Sequence

from lookupingress.core.models import MatchResult
from lookupingress.infra.constants import DEFAULT_CONSTANTS


class TableRenderer:
    """Renders MatchResults as a column-aligned text table.

    Each column is as wide as its header or its widest cell, whichever is
    larger. Columns are separated by ``|`` with ``padding`` spaces on each
    side, and a dashed rule the full width of the table follows the header.
    """

    def __init__(
        self,
        headers: Sequence[str] = DEFAULT_CONSTANTS.TABLE_HEADERS,
        padding: int = DEFAULT_CONSTANTS.TABLE_PADDING,
        empty_message: str = DEFAULT_CONSTANTS.NO_RESULTS_MESSAGE,
    ) -> None:
        self.headers = tuple(headers)
        self.padding = padding
        self.empty_message = empty_message

    @staticmethod
    def _cells(result: MatchResult) -> tuple[str, ...]:
        return (result.ingress_name, result.host, result.path, result.service_name)

    def column_widths(self, results: Sequence[MatchResult]) -> list[int]:
        widths = [len(h) for h in self.headers]
        for result in results:
            for i, cell in enumerate(self._cells(result)):
                widths[i] = max(widths[i], len(cell))
        return widths

    def render(self, results: Sequence[MatchResult]) -> str:
        """Render results as a table, or the empty message if there are none."""
        if not results:
            return self.empty_message

        widths = self.column_widths(results)
        separator = " " * self.padding + "|" + " " * self.padding

        def _line(cells: Sequence[str]) -> str:
            return separator.join(cell.ljust(width) for cell, width in zip(cells, widths))

        total_width = sum(widths) + len(separator) * (len(widths) - 1)

        lines = [_line(self.headers), "-" * total_width]
        lines.extend(_line(self._cells(result)) for result in results)
        # Trailing blank line after the rows
        lines.append("")
        return "\n".join(lines)


def render_table(results: Sequence[MatchResult]) -> str:
    """Render results with the default table layout."""
    return TableRenderer().render(results)


def render_json(results: Sequence[MatchResult]) -> str:
    """Render results as a JSON array of ingress/host/path/service records."""
    return json.dumps([r.as_record() for r in results], indent=2)
