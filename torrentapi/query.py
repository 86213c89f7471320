"""Query builder for search and list requests."""

from urllib.parse import quote_plus

CATEGORY_SEPARATOR = ";"


class Query:
    """Accumulates request parameters as URL fragments.

    Every setter appends an ``&key=value`` fragment and returns the same
    instance, so calls can be chained. Categories are collected separately
    and joined into a single ``category=a;b;c`` fragment by
    :meth:`flush_categories`.

    Values are not validated: ``limit`` is expected in {25, 50, 100} and
    ``sort`` in {seeders, leechers, last}, and the API rejects anything else.
    """

    def __init__(self):
        self.fragments: list[str] = []
        self.categories: list[int] = []

    def _add(self, key: str, value) -> "Query":
        self.fragments.append(f"&{key}={value}")
        return self

    def search_string(self, query: str) -> "Query":
        """Add a free-text search string."""
        return self._add("search_string", quote_plus(query))

    def category(self, category: int) -> "Query":
        """Add a category to filter by."""
        if isinstance(category, bool) or not isinstance(category, int):
            raise TypeError(f"category must be an int, got {category!r}")
        if category < 0:
            raise ValueError(f"category must be non-negative, got {category}")
        self.categories.append(category)
        return self

    def search_tvdb(self, series_id: str) -> "Query":
        """Add a TheTVDB id."""
        return self._add("search_tvdb", series_id)

    def search_imdb(self, movie_id: str) -> "Query":
        """Add an IMDB id."""
        return self._add("search_imdb", movie_id)

    def search_themoviedb(self, movie_id: str) -> "Query":
        """Add a TheMovieDB id."""
        return self._add("search_themoviedb", movie_id)

    def format(self, fmt: str) -> "Query":
        """Request a results format: json or json_extended.

        With plain json not every TorrentResult field is populated.
        """
        return self._add("format", fmt)

    def limit(self, limit: int) -> "Query":
        """Limit the number of results."""
        return self._add("limit", limit)

    def sort(self, sort: str) -> "Query":
        """Sort results by seeders, leechers or last (the API default)."""
        return self._add("sort", sort)

    def ranked(self, ranked: bool) -> "Query":
        """Restrict results to ranked torrents, or not."""
        return self._add("ranked", 1 if ranked else 0)

    def min_seeders(self, count: int) -> "Query":
        """Minimum number of seeders."""
        return self._add("min_seeders", count)

    def min_leechers(self, count: int) -> "Query":
        """Minimum number of leechers."""
        return self._add("min_leechers", count)

    def mode(self, mode: str) -> "Query":
        """Select the request mode, search or list. Set by the client."""
        return self._add("mode", mode)

    def flush_categories(self) -> "Query":
        """Move the collected categories into one fragment."""
        if self.categories:
            joined = CATEGORY_SEPARATOR.join(str(c) for c in self.categories)
            self._add("category", joined)
            self.categories = []
        return self

    def encode(self) -> str:
        """Return the accumulated fragments as a query-string tail."""
        return "".join(self.fragments)

    def reset(self) -> None:
        """Clear all parameters."""
        self.fragments = []
        self.categories = []

    def __str__(self) -> str:
        return self.encode()
