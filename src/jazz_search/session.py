"""Search overlay session state.

A session holds what the search overlay shows: whether it is open, the
current query and type filter, and which result is highlighted for
keyboard navigation. The search itself stays a pure function; the session
only decides when to call it.
"""

from __future__ import annotations

from typing import Optional

from .config import Config, get_config
from .grouping import SearchView, search_view
from .models import FILTER_ALL, SearchData, SearchResult
from .search import normalize_filter

# Detail page per kind. Cities have no detail page.
_LINK_TEMPLATES = {
    "event": "/{locale}/events/{id}",
    "artist": "/{locale}/artists/{id}",
    "venue": "/{locale}/venues/{id}",
    "city": "/{locale}/cities",
}


def result_link(result: SearchResult, locale: str = "en") -> str:
    """Site path a result navigates to."""
    return _LINK_TEMPLATES[result.type].format(locale=locale, id=result.id)


class SearchSession:
    """State for one search overlay over a fixed set of collections."""

    def __init__(
        self,
        data: SearchData,
        config: Optional[Config] = None,
        locale: Optional[str] = None,
    ) -> None:
        self.data = data
        self.config = config or get_config()
        self.locale = locale or self.config.locale
        self.is_open = False
        self.query = ""
        self.filter = FILTER_ALL
        self.active_index = -1
        self._view: Optional[SearchView] = None

    # --- Open / close ---

    def open(self) -> None:
        """Open the overlay with a blank query."""
        self.is_open = True
        self.query = ""
        self.filter = FILTER_ALL
        self.active_index = -1
        self._view = None

    def close(self) -> None:
        self.is_open = False

    def toggle(self) -> None:
        if self.is_open:
            self.close()
        else:
            self.open()

    # --- Input ---

    def set_query(self, query: str) -> None:
        self.query = query
        self.active_index = -1

    def set_filter(self, filter: str) -> None:
        self.filter = normalize_filter(filter, config=self.config)
        self.active_index = -1

    @property
    def view(self) -> SearchView:
        """View for the current query and filter.

        Recomputed only when either has changed since the last read.
        """
        view = self._view
        if view is None or view.query != self.query or view.filter != self.filter:
            view = search_view(self.query, self.data, self.filter, config=self.config)
            self._view = view
        return view

    # --- Keyboard navigation ---

    def move_down(self) -> int:
        """Highlight the next result, stopping at the last one."""
        self.active_index = min(self.active_index + 1, len(self.view.flat) - 1)
        return self.active_index

    def move_up(self) -> int:
        """Highlight the previous result; -1 returns focus to the input."""
        self.active_index = max(self.active_index - 1, -1)
        return self.active_index

    @property
    def active_result(self) -> Optional[SearchResult]:
        flat = self.view.flat
        if 0 <= self.active_index < len(flat):
            return flat[self.active_index]
        return None

    def activate(self) -> Optional[str]:
        """Follow the highlighted result.

        Returns:
            The link to navigate to, or None if nothing is highlighted.
            The session closes when a link is returned.
        """
        result = self.active_result
        if result is None:
            return None
        self.close()
        return result_link(result, self.locale)
