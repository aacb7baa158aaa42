# src/ogmeta/constants.py
"""Centralized constants for Open Graph meta generation.

Values that a site owner may want to change live on SiteConfig in
config.py; everything here is fixed protocol or host-framework behaviour.
"""

# =============================================================================
# Meta record keys
# =============================================================================

# Fixed key order of a MetaRecord; extra keys follow in insertion order
META_KEYS = (
    "admins",
    "app_id",
    "description",
    "image",
    "locale",
    "site_name",
    "title",
    "type",
    "url",
)

# Keys emitted under the Facebook namespace instead of Open Graph
FB_KEYS = frozenset({"admins", "app_id"})

FB_PREFIX = "fb:"
OG_PREFIX = "og:"

# Key whose value is escaped as a URL rather than as an attribute
URL_KEY = "url"

# og:type values per page kind
TYPE_ARTICLE = "article"
TYPE_WEBSITE = "website"
TYPE_AUTHOR = "author"

# Locale for which og:locale is left out
BASELINE_LOCALE = "en_US"


# =============================================================================
# Extension points
# =============================================================================

DEFAULT_FILTER_PREFIX = "og_meta_tags"

# Display filters applied to post fields before they reach the record
TITLE_FILTER = "the_title"
EXCERPT_FILTER = "the_excerpt"

# Action fired once per rendered page head
HEAD_ACTION = "head"

DEFAULT_PRIORITY = 10


# =============================================================================
# Content types and images
# =============================================================================

# Post type capability names
SUPPORT_TITLE = "title"
SUPPORT_EXCERPT = "excerpt"
SUPPORT_EDITOR = "editor"
SUPPORT_THUMBNAIL = "thumbnail"

ATTACHMENT_POST_TYPE = "attachment"

# Capabilities of the built-in post types
BUILTIN_POST_TYPE_SUPPORTS = {
    "post": ("title", "editor", "excerpt", "thumbnail"),
    "page": ("title", "editor", "thumbnail"),
    "attachment": ("title",),
}

# Built-in taxonomies and the URL base of their archives
BUILTIN_TAXONOMY_BASES = {
    "category": "category",
    "post_tag": "tag",
}

DEFAULT_IMAGE_SIZE = "medium"
DEFAULT_AVATAR_SIZE = 50

GRAVATAR_URL = "https://secure.gravatar.com/avatar/{hash}?s={size}&d=mm&r=g"


# =============================================================================
# Excerpts
# =============================================================================

DEFAULT_EXCERPT_LENGTH = 55
DEFAULT_EXCERPT_MORE = " [&hellip;]"


# =============================================================================
# HTML
# =============================================================================

# Tree builder used for avatar parsing unless configured otherwise
DEFAULT_HTML_PARSER = "lxml"

# Builder bundled with beautifulsoup4, always available
FALLBACK_HTML_PARSER = "html.parser"

# Elements whose text content is removed along with their tags
STRIP_WITH_CONTENT_TAGS = ("script", "style")

# Schemes esc_url lets through
ALLOWED_URL_PROTOCOLS = frozenset({
    "http", "https", "ftp", "ftps", "mailto", "news", "irc", "irc6", "ircs",
    "gopher", "nntp", "feed", "telnet", "mms", "rtsp", "sms", "svn", "tel",
    "fax", "xmpp", "webcal", "urn",
})
