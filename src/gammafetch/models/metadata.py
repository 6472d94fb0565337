"""Tag, Category, Series, EventCreator, ImageOptimization - descriptive metadata."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from gammafetch.models.base import Collection, GammaModel


class ImageOptimization(GammaModel):
    """Optimized image metadata for one image role (image, icon, featured image)."""

    id: str | None = None
    image_url_source: str | None = Field(None, alias="imageUrlSource")
    image_url_optimized: str | None = Field(None, alias="imageUrlOptimized")
    image_size_kb_source: float | None = Field(None, alias="imageSizeKbSource")
    image_size_kb_optimized: float | None = Field(None, alias="imageSizeKbOptimized")
    image_optimized_complete: bool | None = Field(None, alias="imageOptimizedComplete")
    image_optimized_last_updated: str | None = Field(None, alias="imageOptimizedLastUpdated")
    rel_id: int | None = Field(None, alias="relID")
    field: str | None = None
    relname: str | None = None


class Tag(GammaModel):
    id: str | None = None
    label: str | None = None
    slug: str | None = None
    force_show: bool | None = Field(None, alias="forceShow")
    force_hide: bool | None = Field(None, alias="forceHide")
    is_carousel: bool | None = Field(None, alias="isCarousel")
    published_at: str | None = Field(None, alias="publishedAt")
    created_by: int | None = Field(None, alias="createdBy")
    updated_by: int | None = Field(None, alias="updatedBy")
    created_at: datetime | None = Field(None, alias="createdAt")
    updated_at: datetime | None = Field(None, alias="updatedAt")


class Category(GammaModel):
    id: str | None = None
    label: str | None = None
    parent_category: str | None = Field(None, alias="parentCategory")
    slug: str | None = None
    published_at: str | None = Field(None, alias="publishedAt")
    created_by: str | None = Field(None, alias="createdBy")
    updated_by: str | None = Field(None, alias="updatedBy")
    created_at: datetime | None = Field(None, alias="createdAt")
    updated_at: datetime | None = Field(None, alias="updatedAt")


class Series(GammaModel):
    """Recurring series an event belongs to (e.g. a weekly game slot)."""

    id: str | None = None
    ticker: str | None = None
    slug: str | None = None
    title: str | None = None
    subtitle: str | None = None
    series_type: str | None = Field(None, alias="seriesType")
    recurrence: str | None = None
    description: str | None = None
    image: str | None = None
    icon: str | None = None
    layout: str | None = None
    active: bool | None = None
    closed: bool | None = None
    archived: bool | None = None
    new: bool | None = None
    featured: bool | None = None
    restricted: bool | None = None
    published_at: str | None = Field(None, alias="publishedAt")
    created_by: str | None = Field(None, alias="createdBy")
    updated_by: str | None = Field(None, alias="updatedBy")
    created_at: datetime | None = Field(None, alias="createdAt")
    updated_at: datetime | None = Field(None, alias="updatedAt")
    comments_enabled: bool | None = Field(None, alias="commentsEnabled")
    competitive: str | None = None
    volume_24hr: float | None = Field(None, alias="volume24hr")
    volume: float | None = None
    liquidity: float | None = None
    start_date: datetime | None = Field(None, alias="startDate")
    comment_count: int | None = Field(None, alias="commentCount")
    categories: Collection[Category] = ()
    tags: Collection[Tag] = ()


class EventCreator(GammaModel):
    id: str | None = None
    creator_name: str | None = Field(None, alias="creatorName")
    creator_handle: str | None = Field(None, alias="creatorHandle")
    creator_url: str | None = Field(None, alias="creatorUrl")
    creator_image: str | None = Field(None, alias="creatorImage")
    created_at: datetime | None = Field(None, alias="createdAt")
    updated_at: datetime | None = Field(None, alias="updatedAt")
