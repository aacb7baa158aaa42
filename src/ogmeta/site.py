"""Host site boundary: the framework services the resolver reads from."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Tuple
import hashlib
import json
import logging

import yaml

from ogmeta.config import SiteConfig
from ogmeta.constants import (
    BUILTIN_POST_TYPE_SUPPORTS,
    BUILTIN_TAXONOMY_BASES,
    GRAVATAR_URL,
)
from ogmeta.escaping import esc_attr, esc_url
from ogmeta.exceptions import FixtureError, TermLinkError
from ogmeta.models import (
    Author,
    PageKind,
    Post,
    PostTypeSupport,
    SiteData,
    Term,
    ViewContext,
)

logger = logging.getLogger(__name__)

ArchiveImageLookup = Callable[[int], Optional[str]]


class HostSite(ABC):
    """Abstract base class defining the host framework services."""

    def __init__(self, config: Optional[SiteConfig] = None):
        self.config = config or SiteConfig()

    @abstractmethod
    def post_type_support(self, post_type: str) -> PostTypeSupport:
        """Capability flags declared by ``post_type``.

        Unknown post types support nothing.
        """
        pass

    def post_type_supports(self, post_type: str, feature: str) -> bool:
        return self.post_type_support(post_type).supports(feature)

    def permalink(self, post: Post) -> str:
        """Canonical URL of ``post``, unescaped."""
        return post.permalink or ""

    @abstractmethod
    def attachment_image_url(self, attachment_id: int, size: str) -> Optional[str]:
        """URL of the attachment image at a registered size, if any."""
        pass

    @abstractmethod
    def avatar_html(self, email: str, size: int) -> str:
        """Rendered avatar markup for ``email``."""
        pass

    @abstractmethod
    def author_posts_url(self, author: Author) -> str:
        """URL of the author's archive."""
        pass

    @abstractmethod
    def term_link(self, term: Term) -> str:
        """Canonical archive URL of ``term``.

        Raises:
            TermLinkError: If the link cannot be built
        """
        pass

    @property
    def archive_image_lookup(self) -> Optional[ArchiveImageLookup]:
        """Optional term-id to archive image integration."""
        return None


class StaticSite(HostSite):
    """Host site backed by in-memory data, typically loaded from a fixture."""

    def __init__(self, config: Optional[SiteConfig] = None, data: Optional[SiteData] = None):
        super().__init__(config)
        self.data = data or SiteData()

        post_types = {
            name: PostTypeSupport.from_features(features)
            for name, features in BUILTIN_POST_TYPE_SUPPORTS.items()
        }
        post_types.update(self.data.post_types)
        self._post_types = post_types

        self._taxonomies = dict(BUILTIN_TAXONOMY_BASES)
        self._taxonomies.update(self.data.taxonomies)

    @classmethod
    def from_dict(cls, site: Dict[str, Any]) -> "StaticSite":
        """Build from the ``site`` section of a fixture."""
        if not isinstance(site, dict):
            raise FixtureError("'site' must be a mapping")

        try:
            data = SiteData(
                post_types={
                    name: PostTypeSupport.from_features(features)
                    for name, features in (site.get("post_types") or {}).items()
                },
                attachments={
                    int(key): value if isinstance(value, dict) else {"*": value}
                    for key, value in (site.get("attachments") or {}).items()
                },
                avatars=dict(site.get("avatars") or {}),
                archive_images=(
                    {int(key): value for key, value in site["archive_images"].items()}
                    if site.get("archive_images") is not None else None
                ),
                term_links={int(key): value for key, value in (site.get("term_links") or {}).items()},
                taxonomies=dict(site.get("taxonomies") or {}),
            )
        except (AttributeError, TypeError, ValueError) as e:
            raise FixtureError(f"Invalid site data: {e}") from e

        try:
            config = SiteConfig.from_dict(site)
        except ValueError as e:
            raise FixtureError(f"Invalid site config: {e}") from e

        return cls(config, data)

    def post_type_support(self, post_type: str) -> PostTypeSupport:
        return self._post_types.get(post_type, PostTypeSupport())

    def attachment_image_url(self, attachment_id: int, size: str) -> Optional[str]:
        sizes = self.data.attachments.get(attachment_id)
        if not sizes:
            return None
        return sizes.get(size) or sizes.get("*")

    def avatar_html(self, email: str, size: int) -> str:
        if email in self.data.avatars:
            return self.data.avatars[email]

        digest = hashlib.md5(email.strip().lower().encode("utf-8")).hexdigest()
        src = esc_url(GRAVATAR_URL.format(hash=digest, size=size))
        size_attr = esc_attr(size)
        return (
            f"<img alt='' src='{src}' class='avatar avatar-{size_attr} photo' "
            f"height='{size_attr}' width='{size_attr}' />"
        )

    def author_posts_url(self, author: Author) -> str:
        base = self.config.site_url.rstrip("/")
        if author.nicename:
            return f"{base}/author/{author.nicename}/"
        return f"{base}/?author={author.id}"

    def term_link(self, term: Term) -> str:
        if term.id in self.data.term_links:
            return self.data.term_links[term.id]

        base = self._taxonomies.get(term.taxonomy)
        if base is None:
            raise TermLinkError(term.id, f"unknown taxonomy '{term.taxonomy}'")
        if not term.slug:
            raise TermLinkError(term.id, "term has no slug")

        return f"{self.config.site_url.rstrip('/')}/{base}/{term.slug}/"

    @property
    def archive_image_lookup(self) -> Optional[ArchiveImageLookup]:
        if self.data.archive_images is None:
            return None
        return self.data.archive_images.get


def view_from_dict(view: Dict[str, Any]) -> ViewContext:
    """Build a ViewContext from the ``view`` section of a fixture."""
    if not isinstance(view, dict) or "kind" not in view:
        raise FixtureError("'view' must be a mapping with a 'kind'")

    try:
        kind = PageKind(view["kind"])
    except ValueError as e:
        raise FixtureError(f"Unknown page kind: {view['kind']!r}") from e

    entity_types = {"post": Post, "term": Term, "author": Author}
    entity = None
    for key, entity_type in entity_types.items():
        if view.get(key) is not None:
            try:
                entity = entity_type(**view[key])
            except TypeError as e:
                raise FixtureError(f"Invalid {key}: {e}") from e
            break

    try:
        return ViewContext(kind, entity)
    except ValueError as e:
        raise FixtureError(str(e)) from e


def load_fixture(path: str) -> Tuple[StaticSite, ViewContext]:
    """Load a site and a view from a YAML or JSON fixture file.

    Args:
        path: Path to the fixture

    Returns:
        Tuple of (StaticSite, ViewContext)

    Raises:
        FixtureError: If the file is missing or malformed
    """
    file_path = Path(path)
    if not file_path.exists():
        raise FixtureError(f"Fixture not found: {path}")

    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            if file_path.suffix == '.json':
                data = json.load(f)
            else:
                data = yaml.safe_load(f)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise FixtureError(f"Cannot parse {path}: {e}") from e

    if not isinstance(data, dict):
        raise FixtureError(f"{path} must contain a mapping")

    logger.debug(f"Loaded fixture {path}")
    return StaticSite.from_dict(data.get("site") or {}), view_from_dict(data.get("view"))
