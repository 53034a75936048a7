"""Shared bases for FRED response models: strict, frozen, envelope fields composed once."""
from pydantic import BaseModel, ConfigDict


class FredModel(BaseModel):
    # Strict: JSON types must match exactly (no "5" -> 5 coercion). Unknown keys are ignored.
    model_config = ConfigDict(frozen=True, strict=True, extra="ignore")


class RealtimeWindow(FredModel):
    realtime_start: str
    realtime_end: str


class Paging(RealtimeWindow):
    order_by: str
    sort_order: str
    count: int
    offset: int
    limit: int
