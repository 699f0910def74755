"""
Records extracted from a WordPress WXR export.

All records are frozen dataclasses holding plain values; collections are
tuples, so a ``ParsedExport`` cannot be modified once the extractor has
built it.
"""

from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from enum import Enum
from typing import Any, Dict, Optional, Tuple

# Formats used by wp:post_date and friends
WP_DATE_FORMATS = ("%Y-%m-%d %H:%M:%S", "%Y-%m-%d")


def parse_wp_date(value: Optional[str]) -> Optional[datetime]:
    """
    Parses a date as found in a WXR export.

    Accepts the WordPress ``YYYY-MM-DD HH:MM:SS`` form, ISO 8601 and the
    RFC 822 form used by RSS ``pubDate``.

    Args:
        value: The raw date string

    Returns:
        The parsed datetime, or None when the value is empty or unparseable
        (WordPress writes ``0000-00-00 00:00:00`` for undated drafts)
    """
    if not value:
        return None
    value = value.strip()
    for fmt in WP_DATE_FORMATS:
        try:
            return datetime.strptime(value, fmt)
        except ValueError:
            pass
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        pass
    try:
        return parsedate_to_datetime(value)
    except (TypeError, ValueError, IndexError):
        return None


class PostType(str, Enum):
    POST = "post"
    PAGE = "page"

    @classmethod
    def from_raw(cls, value: Optional[str]) -> Optional["PostType"]:
        try:
            return cls(value)
        except ValueError:
            return None


class PostStatus(str, Enum):
    """Values of wp:status. Anything unrecognized maps to UNKNOWN."""

    PUBLISH = "publish"
    DRAFT = "draft"
    PENDING = "pending"
    PRIVATE = "private"
    FUTURE = "future"
    TRASH = "trash"
    UNKNOWN = "unknown"

    @classmethod
    def from_raw(cls, value: Optional[str]) -> "PostStatus":
        try:
            return cls(value)
        except ValueError:
            return cls.UNKNOWN


@dataclass(frozen=True)
class SiteInfo:
    title: str = ""
    link: str = ""
    description: str = ""
    language: str = ""
    pub_date: str = ""


@dataclass(frozen=True)
class Category:
    name: str
    slug: str = ""
    description: str = ""


@dataclass(frozen=True)
class Tag:
    name: str
    slug: str = ""


@dataclass(frozen=True)
class ContentItem:
    """A post or a page. ``status`` keeps the raw wp:status value."""

    title: str = ""
    link: str = ""
    pub_date: str = ""
    post_date: str = ""
    creator: str = ""
    content: str = ""
    excerpt: str = ""
    post_id: str = ""
    status: str = ""
    post_type: PostType = PostType.POST
    categories: Tuple[str, ...] = ()
    tags: Tuple[str, ...] = ()

    @property
    def status_kind(self) -> PostStatus:
        return PostStatus.from_raw(self.status)

    @property
    def creation_date(self) -> Optional[datetime]:
        return parse_wp_date(self.post_date)


@dataclass(frozen=True)
class ExportStats:
    posts: int = 0
    pages: int = 0
    categories: int = 0
    tags: int = 0

    @classmethod
    def from_export(cls, export: "ParsedExport") -> "ExportStats":
        return cls(
            posts=len(export.posts),
            pages=len(export.pages),
            categories=len(export.categories),
            tags=len(export.tags),
        )

    def as_dict(self) -> Dict[str, int]:
        return asdict(self)


@dataclass(frozen=True)
class ParsedExport:
    site_info: SiteInfo = field(default_factory=SiteInfo)
    categories: Tuple[Category, ...] = ()
    tags: Tuple[Tag, ...] = ()
    posts: Tuple[ContentItem, ...] = ()
    pages: Tuple[ContentItem, ...] = ()
    # item elements dropped because their post type is neither post nor page
    skipped_items: int = 0

    @property
    def total_items(self) -> int:
        return len(self.posts) + len(self.pages) + self.skipped_items

    @property
    def stats(self) -> ExportStats:
        return ExportStats.from_export(self)

    def as_dict(self) -> Dict[str, Any]:
        """Plain-data view used for YAML dumps."""

        def item_dict(item: ContentItem) -> Dict[str, Any]:
            data = asdict(item)
            data["post_type"] = item.post_type.value
            data["categories"] = list(item.categories)
            data["tags"] = list(item.tags)
            return data

        return {
            "site": asdict(self.site_info),
            "stats": self.stats.as_dict(),
            "categories": [asdict(c) for c in self.categories],
            "tags": [asdict(t) for t in self.tags],
            "posts": [item_dict(p) for p in self.posts],
            "pages": [item_dict(p) for p in self.pages],
        }


def sort_key(item: ContentItem) -> Tuple[bool, datetime]:
    """
    Sort key for newest-first ordering (used with ``reverse=True``).

    Items without a usable date get ``(False, datetime.min)`` so they land
    after every dated item.
    """
    date = item.creation_date
    if date is None:
        return (False, datetime.min)
    if date.tzinfo is not None:
        date = date.astimezone(timezone.utc).replace(tzinfo=None)
    return (True, date)
