"""
FRED API client. One method per endpoint, returning typed responses.
API docs: https://fred.stlouisfed.org/docs/api/fred/

Required arguments become the first query parameters, in order. Any extra keyword
arguments (limit=, sort_order=, realtime_start=, ...) are appended after them in call
order; None values are skipped.
"""
import logging
from typing import Any, TypeVar

from pydantic import BaseModel

from fred_client.core.config import Settings, get_settings
from fred_client.request.builder import FredRequest, redact
from fred_client.request.transport import HttpxTransport, Transport
from fred_client.response.decoder import check_error, decode
from fred_client.response.models import (
    Categories,
    CategoryRelatedTags,
    CategorySeries,
    CategoryTags,
    RelatedTags,
    Release,
    ReleaseDates,
    ReleaseRelatedTags,
    Releases,
    ReleasesDates,
    ReleaseSeries,
    ReleaseSources,
    ReleaseTables,
    ReleaseTags,
    Series,
    SeriesCategories,
    SeriesItem,
    SeriesObservations,
    SeriesRelease,
    SeriesSearch,
    SeriesSearchRelatedTags,
    SeriesSearchTags,
    SeriesTags,
    SeriesUpdates,
    SeriesVintageDates,
    Source,
    SourceReleases,
    Sources,
    Tags,
    TagsSeries,
)

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


class FREDConnector:
    def __init__(
        self,
        api_key: str | None = None,
        *,
        settings: Settings | None = None,
        transport: Transport | None = None,
    ):
        settings = settings or get_settings()
        self.api_key = api_key or settings.fred_api_key
        self.base_url = settings.fred_base_url
        self._owns_transport = transport is None
        self.transport: Transport = transport or HttpxTransport(timeout=settings.request_timeout_seconds)

    def close(self) -> None:
        if self._owns_transport and isinstance(self.transport, HttpxTransport):
            self.transport.close()

    def __enter__(self) -> "FREDConnector":
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def _url(self, endpoint: str, params: list[tuple[str, Any]], options: dict[str, Any]) -> str:
        extra = [(k, v) for k, v in options.items() if v is not None]
        return FredRequest(endpoint, params + extra).url(self.api_key, self.base_url)

    def _get_text(self, endpoint: str, params: list[tuple[str, Any]], options: dict[str, Any]) -> str:
        url = self._url(endpoint, params, options)
        logger.debug("FRED %s -> %s", endpoint, redact(url))
        return self.transport.get(url)

    def _get(
        self,
        endpoint: str,
        model: type[M],
        params: list[tuple[str, Any]],
        options: dict[str, Any],
    ) -> M:
        return decode(self._get_text(endpoint, params, options), model)

    # Categories

    def category(self, category_id: int, **options: Any) -> Categories:
        """Get a category."""
        return self._get("category", Categories, [("category_id", category_id)], options)

    def category_children(self, category_id: int, **options: Any) -> Categories:
        """Get the child categories for a specified parent category."""
        return self._get("category/children", Categories, [("category_id", category_id)], options)

    def category_related(self, category_id: int, **options: Any) -> Categories:
        return self._get("category/related", Categories, [("category_id", category_id)], options)

    def category_series(self, category_id: int, **options: Any) -> CategorySeries:
        """Get the series in a category."""
        return self._get("category/series", CategorySeries, [("category_id", category_id)], options)

    def category_tags(self, category_id: int, **options: Any) -> CategoryTags:
        return self._get("category/tags", CategoryTags, [("category_id", category_id)], options)

    def category_related_tags(self, category_id: int, tag_names: str | list[str], **options: Any) -> CategoryRelatedTags:
        return self._get(
            "category/related_tags",
            CategoryRelatedTags,
            [("category_id", category_id), ("tag_names", tag_names)],
            options,
        )

    # Releases

    def releases(self, **options: Any) -> Releases:
        """Get all releases of economic data."""
        return self._get("releases", Releases, [], options)

    def releases_dates(self, **options: Any) -> ReleasesDates:
        """Get release dates for all releases of economic data."""
        return self._get("releases/dates", ReleasesDates, [], options)

    def release(self, release_id: int, **options: Any) -> Release:
        return self._get("release", Release, [("release_id", release_id)], options)

    def release_dates(self, release_id: int, **options: Any) -> ReleaseDates:
        """Fetch release dates for a FRED release."""
        return self._get("release/dates", ReleaseDates, [("release_id", release_id)], options)

    def release_series(self, release_id: int, **options: Any) -> ReleaseSeries:
        return self._get("release/series", ReleaseSeries, [("release_id", release_id)], options)

    def release_sources(self, release_id: int, **options: Any) -> ReleaseSources:
        return self._get("release/sources", ReleaseSources, [("release_id", release_id)], options)

    def release_tags(self, release_id: int, **options: Any) -> ReleaseTags:
        return self._get("release/tags", ReleaseTags, [("release_id", release_id)], options)

    def release_related_tags(self, release_id: int, tag_names: str | list[str], **options: Any) -> ReleaseRelatedTags:
        return self._get(
            "release/related_tags",
            ReleaseRelatedTags,
            [("release_id", release_id), ("tag_names", tag_names)],
            options,
        )

    def release_tables(self, release_id: int, **options: Any) -> ReleaseTables:
        """Release table tree. Pass element_id= to start below the root."""
        return self._get("release/tables", ReleaseTables, [("release_id", release_id)], options)

    # Series

    def series(self, series_id: str, **options: Any) -> Series:
        """Get an economic data series (metadata only)."""
        return self._get("series", Series, [("series_id", series_id)], options)

    def series_json(self, series_id: str, **options: Any) -> str:
        """The /series response as JSON text, undecoded."""
        return check_error(self._get_text("series", [("series_id", series_id)], options))

    def series_categories(self, series_id: str, **options: Any) -> SeriesCategories:
        return self._get("series/categories", SeriesCategories, [("series_id", series_id)], options)

    def series_observations(self, series_id: str, **options: Any) -> SeriesObservations:
        """Observations for a series. Use observation_start=/observation_end= (dates) to window."""
        return self._get("series/observations", SeriesObservations, [("series_id", series_id)], options)

    def series_observations_json(self, series_id: str, **options: Any) -> str:
        """The /series/observations response as JSON text, undecoded."""
        return check_error(self._get_text("series/observations", [("series_id", series_id)], options))

    def series_release(self, series_id: str, **options: Any) -> SeriesRelease:
        return self._get("series/release", SeriesRelease, [("series_id", series_id)], options)

    def series_search(self, search_text: str, **options: Any) -> SeriesSearch:
        """Get economic data series that match keywords."""
        return self._get("series/search", SeriesSearch, [("search_text", search_text)], options)

    def series_search_tags(self, series_search_text: str, **options: Any) -> SeriesSearchTags:
        return self._get(
            "series/search/tags",
            SeriesSearchTags,
            [("series_search_text", series_search_text)],
            options,
        )

    def series_search_related_tags(
        self,
        series_search_text: str,
        tag_names: str | list[str],
        **options: Any,
    ) -> SeriesSearchRelatedTags:
        return self._get(
            "series/search/related_tags",
            SeriesSearchRelatedTags,
            [("series_search_text", series_search_text), ("tag_names", tag_names)],
            options,
        )

    def series_tags(self, series_id: str, **options: Any) -> SeriesTags:
        """Get the tags for an economic data series."""
        return self._get("series/tags", SeriesTags, [("series_id", series_id)], options)

    def series_item_tags(self, item: SeriesItem, **options: Any) -> str:
        """Tag names of a series item on one line, e.g. "japan, cpi, monthly". One request."""
        return self.series_tags(item.id, **options).one_line()

    def series_updates(self, **options: Any) -> SeriesUpdates:
        """Series sorted by when their observations were last updated."""
        return self._get("series/updates", SeriesUpdates, [], options)

    def series_vintagedates(self, series_id: str, **options: Any) -> SeriesVintageDates:
        return self._get("series/vintagedates", SeriesVintageDates, [("series_id", series_id)], options)

    # Sources

    def sources(self, **options: Any) -> Sources:
        return self._get("sources", Sources, [], options)

    def source(self, source_id: int, **options: Any) -> Source:
        return self._get("source", Source, [("source_id", source_id)], options)

    def source_releases(self, source_id: int, **options: Any) -> SourceReleases:
        return self._get("source/releases", SourceReleases, [("source_id", source_id)], options)

    # Tags

    def tags(self, **options: Any) -> Tags:
        """Get all tags. Use search_text= or tag_names= to narrow."""
        return self._get("tags", Tags, [], options)

    def related_tags(self, tag_names: str | list[str], **options: Any) -> RelatedTags:
        return self._get("related_tags", RelatedTags, [("tag_names", tag_names)], options)

    def tags_series(self, tag_names: str | list[str], **options: Any) -> TagsSeries:
        """Series matching all of tag_names, e.g. "cpi;usa;nation" or ["cpi", "usa"]."""
        return self._get("tags/series", TagsSeries, [("tag_names", tag_names)], options)
