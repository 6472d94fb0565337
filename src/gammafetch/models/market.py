"""Market, Outcome - tradable questions within an event."""

from __future__ import annotations

import json
from datetime import datetime

from pydantic import BaseModel, Field

from gammafetch.models.base import Collection, GammaModel
from gammafetch.models.metadata import Category, ImageOptimization, Tag


class Outcome(BaseModel):
    """Single outcome (e.g. Yes/No token) in a market."""

    token_id: str
    name: str
    price: float = Field(..., ge=0, le=1, description="Probability/price in [0, 1]")


def _json_list(raw: str | None) -> list:
    if not raw:
        return []
    try:
        value = json.loads(raw)
    except (json.JSONDecodeError, TypeError):
        return []
    return value if isinstance(value, list) else []


class Market(GammaModel):
    """Gamma market as returned nested under an event.

    ``outcomes``, ``outcome_prices``, ``volume``, ``liquidity`` and
    ``clob_token_ids`` arrive as strings (JSON-encoded lists or decimal
    numbers) and are kept verbatim. Use ``volume_num`` / ``liquidity_num``
    for the numeric forms and ``parsed_outcomes()`` for the outcome list.
    """

    id: str | None = None
    question: str | None = None
    condition_id: str | None = Field(None, alias="conditionId")
    slug: str | None = None
    resolution_source: str | None = Field(None, alias="resolutionSource")
    end_date: datetime | None = Field(None, alias="endDate")
    start_date: datetime | None = Field(None, alias="startDate")
    description: str | None = None
    active: bool | None = None
    closed: bool | None = None
    archived: bool | None = None
    market_type: str | None = Field(None, alias="marketType")
    rewards_min_size: float | None = Field(None, alias="rewardsMinSize")
    rewards_max_spread: float | None = Field(None, alias="rewardsMaxSpread")
    outcomes: str | None = None
    outcome_prices: str | None = Field(None, alias="outcomePrices")
    volume: str | None = None
    liquidity: str | None = None
    category: str | None = None
    created_at: datetime | None = Field(None, alias="createdAt")
    updated_at: datetime | None = Field(None, alias="updatedAt")
    created_by: int | None = Field(None, alias="createdBy")
    updated_by: int | None = Field(None, alias="updatedBy")
    market_maker_address: str | None = Field(None, alias="marketMakerAddress")
    new: bool | None = None
    featured: bool | None = None
    restricted: bool | None = None
    volume_num: float | None = Field(None, alias="volumeNum")
    liquidity_num: float | None = Field(None, alias="liquidityNum")
    volume_24hr: float | None = Field(None, alias="volume24hr")
    volume_1wk: float | None = Field(None, alias="volume1wk")
    volume_1mo: float | None = Field(None, alias="volume1mo")
    volume_1yr: float | None = Field(None, alias="volume1yr")
    enable_order_book: bool | None = Field(None, alias="enableOrderBook")
    clob_token_ids: str | None = Field(None, alias="clobTokenIds")
    competitive: float | None = None
    spread: float | None = None
    last_trade_price: float | None = Field(None, alias="lastTradePrice")
    best_bid: float | None = Field(None, alias="bestBid")
    best_ask: float | None = Field(None, alias="bestAsk")
    image_optimized: ImageOptimization | None = Field(None, alias="imageOptimized")
    icon_optimized: ImageOptimization | None = Field(None, alias="iconOptimized")
    categories: Collection[Category] = ()
    tags: Collection[Tag] = ()
    comments_enabled: bool | None = Field(None, alias="commentsEnabled")

    def parsed_outcomes(self) -> list[Outcome]:
        """Build Outcome list from the JSON-encoded outcome fields.

        Outcomes whose price falls outside [0, 1] are skipped.
        """
        names = [str(n) for n in _json_list(self.outcomes)]
        try:
            prices = [float(p) for p in _json_list(self.outcome_prices)]
        except (TypeError, ValueError):
            prices = []
        token_ids = [str(t) for t in _json_list(self.clob_token_ids)]
        # Align lengths
        while len(prices) < len(names):
            prices.append(0.0)
        while len(token_ids) < len(names):
            token_ids.append("")
        return [
            Outcome(token_id=tid, name=name, price=price)
            for name, price, tid in zip(names, prices, token_ids)
            if 0.0 <= price <= 1.0
        ]
