"""
Immutable records extracted from an SCE inventory page.

- CardInfo: a single trading card entry (name, image source, per-card credit value)
- GameInfo: the page-level record (title, aggregate credit value, cards in document order)

Defaults are per field and intentionally asymmetric: a missing card name or
image becomes an empty string, every other missing value stays None.
"""
from pydantic import BaseModel, ConfigDict


class CardInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = ""
    image: str = ""
    credits: str | None = None


class GameInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str | None = None
    total_credits: str | None = None
    cards: tuple[CardInfo, ...] = ()
