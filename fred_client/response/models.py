"""
Typed FRED responses.

Entities are declared once; each endpoint's response is an envelope base (RealtimeWindow or Paging)
plus its payload list. Endpoint docs: https://fred.stlouisfed.org/docs/api/fred/
"""
from pydantic import ConfigDict, Field

from fred_client.response.base import FredModel, Paging, RealtimeWindow
from fred_client.response.series_items import SeriesItem, SeriesItems

__all__ = [
    "Categories",
    "Category",
    "CategoryRelatedTags",
    "CategorySeries",
    "CategoryTags",
    "Observation",
    "RelatedTags",
    "Release",
    "ReleaseDate",
    "ReleaseDates",
    "ReleaseElement",
    "ReleaseItem",
    "ReleaseRelatedTags",
    "ReleaseSeries",
    "ReleaseSources",
    "ReleaseTables",
    "ReleaseTags",
    "Releases",
    "ReleasesDates",
    "Series",
    "SeriesCategories",
    "SeriesItem",
    "SeriesItems",
    "SeriesObservations",
    "SeriesRelease",
    "SeriesSearch",
    "SeriesSearchRelatedTags",
    "SeriesSearchTags",
    "SeriesTags",
    "SeriesUpdates",
    "SeriesVintageDates",
    "Source",
    "SourceItem",
    "SourceReleases",
    "Sources",
    "Tag",
    "Tags",
    "TagsSeries",
]


# Entities


class Category(FredModel):
    id: int
    name: str
    parent_id: int
    notes: str | None = None

    def __str__(self) -> str:
        return f"id: {self.id}\nname: {self.name}\nparent_id: {self.parent_id}\nnotes: {self.notes}"


class Tag(FredModel):
    name: str
    group_id: str
    notes: str | None = None
    created: str
    popularity: int
    series_count: int

    def __str__(self) -> str:
        return f"name: {self.name}\ngroup_id: {self.group_id}\nnotes: {self.notes}\nseries_count: {self.series_count}"


class ReleaseItem(FredModel):
    id: int
    realtime_start: str
    realtime_end: str
    name: str
    press_release: bool
    link: str | None = None
    notes: str | None = None


class ReleaseDate(FredModel):
    """release_name is only present on /releases/dates rows."""

    release_id: int
    release_name: str | None = None
    date: str


class SourceItem(FredModel):
    id: int
    realtime_start: str
    realtime_end: str
    name: str
    link: str | None = None
    notes: str | None = None


class Observation(FredModel):
    realtime_start: str
    realtime_end: str
    date: str
    value: str  # "." marks a missing value

    def __str__(self) -> str:
        return f"{self.date}, {self.value}"


class ReleaseElement(FredModel):
    model_config = ConfigDict(populate_by_name=True)

    # FRED mixes numbers and numeric strings for ids in release tables
    element_id: int
    release_id: int | str
    series_id: str | None = None
    parent_id: int | str | None = None
    line: str
    element_type: str = Field(alias="type")
    name: str
    level: str
    children: list["ReleaseElement"] = Field(default_factory=list)


# Envelopes


class Categories(FredModel):
    """/category, /category/children, /category/related."""

    categories: list[Category]

    def __str__(self) -> str:
        return "\n\n".join(str(c) for c in self.categories)


class SeriesCategories(Categories):
    """/series/categories."""


class _TagList(Paging):
    tags: list[Tag]

    def names(self) -> list[str]:
        return [t.name for t in self.tags]

    def __str__(self) -> str:
        return "\n\n".join(f"{i}\n{tag}" for i, tag in enumerate(self.tags))


class CategoryTags(_TagList):
    """/category/tags."""


class CategoryRelatedTags(_TagList):
    """/category/related_tags."""


class ReleaseTags(_TagList):
    """/release/tags."""


class ReleaseRelatedTags(_TagList):
    """/release/related_tags."""


class SeriesSearchTags(_TagList):
    """/series/search/tags."""


class SeriesSearchRelatedTags(_TagList):
    """/series/search/related_tags."""


class SeriesTags(_TagList):
    """/series/tags."""

    def one_line(self) -> str:
        """Tag names, comma separated."""
        return ", ".join(self.names())


class Tags(_TagList):
    """/tags."""


class RelatedTags(_TagList):
    """/related_tags."""


class _SeriesList(Paging):
    seriess: SeriesItems

    def __str__(self) -> str:
        return str(self.seriess)


class CategorySeries(_SeriesList):
    """/category/series."""


class ReleaseSeries(_SeriesList):
    """/release/series."""


class SeriesSearch(_SeriesList):
    """/series/search."""


class TagsSeries(_SeriesList):
    """/tags/series."""

    def series_titles(self) -> str:
        return "".join(f"{title}\n" for title in self.seriess.titles())

    def series(self) -> SeriesItems:
        return self.seriess


class SeriesUpdates(_SeriesList):
    """/series/updates."""

    filter_variable: str
    filter_value: str


class Series(RealtimeWindow):
    """/series."""

    seriess: SeriesItems

    def __str__(self) -> str:
        return f"realtime_start: {self.realtime_start}\nrealtime_end: {self.realtime_end}\n\n{self.seriess}"


class Releases(Paging):
    """/releases."""

    releases: list[ReleaseItem]


class SourceReleases(Releases):
    """/source/releases."""


class Release(RealtimeWindow):
    """/release."""

    releases: list[ReleaseItem]


class SeriesRelease(Release):
    """/series/release."""


class ReleasesDates(Paging):
    """/releases/dates."""

    release_dates: list[ReleaseDate]


class ReleaseDates(ReleasesDates):
    """/release/dates."""


class ReleaseSources(RealtimeWindow):
    """/release/sources."""

    sources: list[SourceItem]


class Source(ReleaseSources):
    """/source."""


class Sources(Paging):
    """/sources."""

    sources: list[SourceItem]


class ReleaseTables(FredModel):
    """/release/tables. name/element_id/release_id are only set when element_id was requested."""

    name: str | None = None
    element_id: int | None = None
    release_id: int | str | None = None
    elements: dict[str, ReleaseElement]


class SeriesObservations(Paging):
    """/series/observations."""

    observation_start: str
    observation_end: str
    units: str
    output_type: int
    file_type: str
    observations: list[Observation]

    def __str__(self) -> str:
        """One "date, value" line per observation."""
        return "\n".join(str(o) for o in self.observations)


class SeriesVintageDates(Paging):
    """/series/vintagedates."""

    vintage_dates: list[str]
