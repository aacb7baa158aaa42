"""Open Graph meta tag generation for content-managed sites."""

__version__ = "0.1.0"

from ogmeta.models import (
    PageKind,
    Post,
    Term,
    Author,
    PostTypeSupport,
    ViewContext,
    MetaRecord,
)
from ogmeta.hooks import FilterRegistry
from ogmeta.site import HostSite, StaticSite
from ogmeta.resolver import MetaResolver
from ogmeta.emitter import TagEmitter
from ogmeta.renderer import HeadRenderer
from ogmeta.config import SiteConfig, settings
from ogmeta.exceptions import OgMetaError, TermLinkError, FixtureError

__all__ = [
    # Core
    "MetaResolver",
    "TagEmitter",
    "HeadRenderer",
    "FilterRegistry",
    # Host boundary
    "HostSite",
    "StaticSite",
    # Models
    "PageKind",
    "Post",
    "Term",
    "Author",
    "PostTypeSupport",
    "ViewContext",
    "MetaRecord",
    # Config
    "SiteConfig",
    "settings",
    # Errors
    "OgMetaError",
    "TermLinkError",
    "FixtureError",
]
