"""
Series metadata records and the filterable SeriesItems collection.

Filters never touch the receiver; each returns a new SeriesItems in input order.
"""
from collections.abc import Iterable, Iterator

from pydantic import ConfigDict, RootModel

from fred_client.response.base import FredModel


class SeriesItem(FredModel):
    """One economic data series (as returned in ``seriess`` lists)."""

    id: str
    realtime_start: str
    realtime_end: str
    title: str
    observation_start: str
    observation_end: str
    frequency: str
    frequency_short: str | None = None
    units: str
    units_short: str
    seasonal_adjustment: str
    seasonal_adjustment_short: str
    last_updated: str
    popularity: int
    group_popularity: int | None = None
    notes: str | None = None

    def __str__(self) -> str:
        lines = [
            f"id: {self.id}",
            f"realtime_start: {self.realtime_start}",
            f"realtime_end: {self.realtime_end}",
            f"title: {self.title}",
            f"observation_start: {self.observation_start}",
            f"observation_end: {self.observation_end}",
            f"frequency: {self.frequency}",
            f"units: {self.units}",
            f"units_short: {self.units_short}",
            f"seasonal_adjustment: {self.seasonal_adjustment}",
            f"last_updated: {self.last_updated}",
        ]
        return "\n".join(lines)


class SeriesItems(RootModel[list[SeriesItem]]):
    model_config = ConfigDict(frozen=True, strict=True)

    def __iter__(self) -> Iterator[SeriesItem]:  # type: ignore[override]
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)

    def __getitem__(self, index: int) -> SeriesItem:
        return self.root[index]

    def __str__(self) -> str:
        return "\n\n".join(f"series {i}\n{item}" for i, item in enumerate(self.root))

    def _keep(self, items: Iterable[SeriesItem]) -> "SeriesItems":
        return SeriesItems(list(items))

    def exclude_phrases(self, phrases: Iterable[str]) -> "SeriesItems":
        """Drop series whose title contains any of ``phrases``."""
        phrases = list(phrases)
        return self._keep(s for s in self.root if not any(p in s.title for p in phrases))

    def has_phrase(self, phrase: str) -> "SeriesItems":
        """Keep series whose title contains ``phrase``."""
        return self._keep(s for s in self.root if phrase in s.title)

    def equals_one_of(self, titles: Iterable[str]) -> "SeriesItems":
        """Keep series whose title is exactly one of ``titles``."""
        wanted = set(titles)
        return self._keep(s for s in self.root if s.title in wanted)

    def only_include(self, phrases: Iterable[str]) -> "SeriesItems":
        """Keep series whose title contains at least one of ``phrases``."""
        phrases = list(phrases)
        return self._keep(s for s in self.root if any(p in s.title for p in phrases))

    def titles(self) -> list[str]:
        return [s.title for s in self.root]

    def ids(self) -> list[str]:
        return [s.id for s in self.root]
