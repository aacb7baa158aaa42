"""Data models for Open Graph meta generation."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union

from ogmeta.constants import (
    ATTACHMENT_POST_TYPE,
    META_KEYS,
    SUPPORT_EDITOR,
    SUPPORT_EXCERPT,
    SUPPORT_THUMBNAIL,
    SUPPORT_TITLE,
)


class PageKind(str, Enum):
    """Kind of page being rendered."""

    HOME = "home"
    FRONT_PAGE = "front_page"
    SINGULAR = "singular"
    TERM = "term"
    AUTHOR = "author"
    OTHER = "other"


@dataclass(frozen=True)
class Post:
    """A single content item (article, page, attachment)."""

    id: int
    type: str = "post"
    permalink: str = ""
    title: Optional[str] = None
    excerpt: Optional[str] = None
    content: Optional[str] = None
    thumbnail_id: Optional[int] = None

    @property
    def is_attachment(self) -> bool:
        """Whether the post is itself a media attachment."""
        return self.type == ATTACHMENT_POST_TYPE

    @property
    def has_thumbnail(self) -> bool:
        return bool(self.thumbnail_id)


@dataclass(frozen=True)
class Term:
    """A taxonomy classification value with its own archive listing."""

    id: int
    name: Optional[str] = None
    description: Optional[str] = None
    taxonomy: Optional[str] = None
    slug: Optional[str] = None


@dataclass(frozen=True)
class Author:
    """A user whose posts are listed on an author archive."""

    id: Optional[int] = None
    display_name: Optional[str] = None
    description: Optional[str] = None
    email: Optional[str] = None  # Only used to derive the avatar
    nicename: Optional[str] = None


@dataclass(frozen=True)
class PostTypeSupport:
    """Capability flags declared by a content type."""

    title: bool = False
    excerpt: bool = False
    editor: bool = False
    thumbnail: bool = False

    @classmethod
    def from_features(cls, features) -> "PostTypeSupport":
        """Build from an iterable of feature names, ignoring unknown ones."""
        names = set(features or ())
        return cls(
            title=SUPPORT_TITLE in names,
            excerpt=SUPPORT_EXCERPT in names,
            editor=SUPPORT_EDITOR in names,
            thumbnail=SUPPORT_THUMBNAIL in names,
        )

    def supports(self, feature: str) -> bool:
        return bool(getattr(self, feature, False))


Entity = Union[Post, Term, Author, None]

_ENTITY_TYPES = {
    PageKind.HOME: type(None),
    PageKind.FRONT_PAGE: (Post, type(None)),
    PageKind.SINGULAR: Post,
    PageKind.TERM: Term,
    PageKind.AUTHOR: Author,
    PageKind.OTHER: type(None),
}


@dataclass(frozen=True)
class ViewContext:
    """What kind of page is being rendered and the entity it displays.

    Built once at request entry. The kind/entity pairing is checked on
    construction so downstream code can rely on ``post``, ``term`` and
    ``author`` matching ``kind``.
    """

    kind: PageKind
    entity: Entity = None

    def __post_init__(self):
        kind = PageKind(self.kind)
        object.__setattr__(self, "kind", kind)
        if not isinstance(self.entity, _ENTITY_TYPES[kind]):
            raise ValueError(
                f"{kind.value} view cannot carry {type(self.entity).__name__}"
            )

    @classmethod
    def home(cls) -> "ViewContext":
        return cls(PageKind.HOME)

    @classmethod
    def front_page(cls, post: Optional[Post] = None) -> "ViewContext":
        return cls(PageKind.FRONT_PAGE, post)

    @classmethod
    def singular(cls, post: Post) -> "ViewContext":
        return cls(PageKind.SINGULAR, post)

    @classmethod
    def term(cls, term: Term) -> "ViewContext":
        return cls(PageKind.TERM, term)

    @classmethod
    def author(cls, author: Author) -> "ViewContext":
        return cls(PageKind.AUTHOR, author)

    @classmethod
    def other(cls) -> "ViewContext":
        return cls(PageKind.OTHER)

    @property
    def post(self) -> Optional[Post]:
        return self.entity if isinstance(self.entity, Post) else None

    @property
    def term_entity(self) -> Optional[Term]:
        return self.entity if isinstance(self.entity, Term) else None

    @property
    def author_entity(self) -> Optional[Author]:
        return self.entity if isinstance(self.entity, Author) else None


class MetaRecord(dict):
    """Unprefixed meta property names mapped to unescaped content.

    Known keys (see ``META_KEYS``) sort first in their fixed order; keys
    added by extension callbacks follow in insertion order.
    """

    @classmethod
    def merge(cls, partial: dict, defaults: dict) -> "MetaRecord":
        """Lay ``partial`` over ``defaults``; partial values win."""
        record = cls(defaults)
        record.update(partial)
        return record.ordered()

    def ordered(self) -> "MetaRecord":
        """Return a copy in emission order."""
        known = [key for key in META_KEYS if key in self]
        extra = [key for key in self if key not in META_KEYS]
        return MetaRecord((key, self[key]) for key in known + extra)

    def non_empty(self) -> "MetaRecord":
        return MetaRecord((key, value) for key, value in self.items() if value)


@dataclass
class SiteData:
    """In-memory host data backing a StaticSite."""

    post_types: dict[str, PostTypeSupport] = field(default_factory=dict)
    attachments: dict[int, dict[str, str]] = field(default_factory=dict)
    avatars: dict[str, str] = field(default_factory=dict)
    archive_images: Optional[dict[int, str]] = None
    term_links: dict[int, str] = field(default_factory=dict)
    taxonomies: dict[str, str] = field(default_factory=dict)
