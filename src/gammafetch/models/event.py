"""Event, EventsResponse - top-level Gamma records."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from gammafetch.models.base import Collection, GammaModel
from gammafetch.models.market import Market
from gammafetch.models.metadata import Category, EventCreator, ImageOptimization, Series, Tag


class Event(GammaModel):
    """Event grouping one or more markets (Polymarket event)."""

    id: str | None = None
    ticker: str | None = None
    slug: str | None = None
    title: str | None = None
    subtitle: str | None = None
    description: str | None = None
    resolution_source: str | None = Field(None, alias="resolutionSource")
    start_date: datetime | None = Field(None, alias="startDate")
    creation_date: datetime | None = Field(None, alias="creationDate")
    end_date: datetime | None = Field(None, alias="endDate")
    image: str | None = None
    icon: str | None = None
    active: bool | None = None
    closed: bool | None = None
    archived: bool | None = None
    new: bool | None = None
    featured: bool | None = None
    restricted: bool | None = None
    liquidity: float | None = None
    volume: float | None = None
    open_interest: float | None = Field(None, alias="openInterest")
    sort_by: str | None = Field(None, alias="sortBy")
    category: str | None = None
    subcategory: str | None = None
    published_at: str | None = None
    created_by: str | None = Field(None, alias="createdBy")
    updated_by: str | None = Field(None, alias="updatedBy")
    created_at: datetime | None = Field(None, alias="createdAt")
    updated_at: datetime | None = Field(None, alias="updatedAt")
    comments_enabled: bool | None = Field(None, alias="commentsEnabled")
    competitive: float | None = None
    volume_24hr: float | None = Field(None, alias="volume24hr")
    volume_1wk: float | None = Field(None, alias="volume1wk")
    volume_1mo: float | None = Field(None, alias="volume1mo")
    volume_1yr: float | None = Field(None, alias="volume1yr")
    featured_image: str | None = Field(None, alias="featuredImage")
    enable_order_book: bool | None = Field(None, alias="enableOrderBook")
    liquidity_amm: float | None = Field(None, alias="liquidityAmm")
    liquidity_clob: float | None = Field(None, alias="liquidityClob")
    neg_risk: bool | None = Field(None, alias="negRisk")
    neg_risk_market_id: str | None = Field(None, alias="negRiskMarketID")
    comment_count: int | None = Field(None, alias="commentCount")
    image_optimized: ImageOptimization | None = Field(None, alias="imageOptimized")
    icon_optimized: ImageOptimization | None = Field(None, alias="iconOptimized")
    featured_image_optimized: ImageOptimization | None = Field(None, alias="featuredImageOptimized")
    sub_events: Collection[str] = Field((), alias="subEvents")
    markets: Collection[Market] = ()
    series: Collection[Series] = ()
    categories: Collection[Category] = ()
    tags: Collection[Tag] = ()
    cyom: bool | None = None
    closed_time: datetime | None = Field(None, alias="closedTime")
    show_all_outcomes: bool | None = Field(None, alias="showAllOutcomes")
    show_market_images: bool | None = Field(None, alias="showMarketImages")
    enable_neg_risk: bool | None = Field(None, alias="enableNegRisk")
    series_slug: str | None = Field(None, alias="seriesSlug")
    live: bool | None = None
    ended: bool | None = None
    event_creators: Collection[EventCreator] = Field((), alias="eventCreators")


class EventsResponse(GammaModel):
    """Validated events from one /events call, in the order the server sent them."""

    events: tuple[Event, ...] = ()

    def __len__(self) -> int:
        return len(self.events)
