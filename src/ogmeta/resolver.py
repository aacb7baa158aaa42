"""Meta resolver: maps the current view to an Open Graph meta record."""

import logging
from typing import Dict, Optional

from ogmeta.constants import (
    BASELINE_LOCALE,
    EXCERPT_FILTER,
    SUPPORT_EDITOR,
    SUPPORT_EXCERPT,
    SUPPORT_THUMBNAIL,
    SUPPORT_TITLE,
    TITLE_FILTER,
    TYPE_ARTICLE,
    TYPE_AUTHOR,
    TYPE_WEBSITE,
)
from ogmeta.escaping import esc_url
from ogmeta.exceptions import TermLinkError
from ogmeta.hooks import FilterRegistry
from ogmeta.models import Author, MetaRecord, PageKind, Post, Term, ViewContext
from ogmeta.site import HostSite
from ogmeta.text import extract_single_img_src, strip_all_tags, trim_words

logger = logging.getLogger(__name__)


def _absint(value) -> int:
    try:
        return abs(int(value))
    except (TypeError, ValueError):
        return 0


class MetaResolver:
    """Selects meta values for the page being rendered.

    Exactly one branch runs per view, picked in this order: home,
    singular or front page, term listing, author archive. Every other
    view gets the defaults only. Missing entity fields leave their key
    unset; nothing in resolution raises for incomplete input.
    """

    def __init__(self, site: HostSite, filters: Optional[FilterRegistry] = None):
        """Initialize resolver.

        Args:
            site: Host site services and configuration
            filters: Extension point registry (a private one if omitted)
        """
        self.site = site
        self.config = site.config
        self.filters = filters or FilterRegistry()

    @property
    def filter_prefix(self) -> str:
        return self.config.filter_prefix

    def defaults(self) -> Dict[str, str]:
        """Record values used where a branch sets nothing."""
        return {
            "admins": self.config.fb_admins,
            "app_id": self.config.fb_app_id,
            "description": "",
            "image": "",
            "site_name": self.config.site_name,
            "title": "",
            "type": TYPE_ARTICLE,
            "url": "",
            "locale": "",
        }

    def resolve(self, view: ViewContext) -> MetaRecord:
        """Build the meta record for ``view``.

        Args:
            view: The page being rendered

        Returns:
            MetaRecord in emission order. Empty when the singular branch
            had no permalink to point at.
        """
        partial = self._dispatch(view)
        if partial is None:
            return MetaRecord()

        record = MetaRecord.merge(partial, self.defaults())

        locale = self.config.locale
        if locale != BASELINE_LOCALE:
            record["locale"] = locale

        record["description"] = strip_all_tags(record["description"])

        record = self.filters.apply_filters(self.filter_prefix, record, view)
        return MetaRecord(record).ordered()

    def _dispatch(self, view: ViewContext) -> Optional[dict]:
        kind = view.kind
        if kind is PageKind.HOME:
            return self.resolve_home()
        if kind in (PageKind.SINGULAR, PageKind.FRONT_PAGE):
            return self.resolve_singular(view.post)
        if kind is PageKind.TERM:
            return self.resolve_term(view.term_entity)
        if kind is PageKind.AUTHOR:
            return self.resolve_author(view.author_entity)
        return {}

    def resolve_home(self) -> dict:
        """Values for the blog home page."""
        output = {
            "description": self.config.tagline,
            "title": self.config.site_name,
            "type": TYPE_WEBSITE,
            "url": self.config.site_url,
        }

        return self.filters.apply_filters(f"{self.filter_prefix}_home", output)

    def resolve_author(self, author: Author) -> dict:
        """Values for an author archive."""
        output = {"type": TYPE_AUTHOR}

        if author.description is not None:
            output["description"] = author.description

        if author.email is not None:
            image = extract_single_img_src(
                self.site.avatar_html(author.email, self.config.avatar_size),
                self.config.html_parser,
            )
            if image:
                output["image"] = image

        if author.display_name is not None:
            output["title"] = author.display_name

        if author.id is not None:
            output["url"] = self.site.author_posts_url(author)

        output = self.filters.apply_filters(f"{self.filter_prefix}_author", output, author)
        if author.id is not None:
            output = self.filters.apply_filters(
                f"{self.filter_prefix}_author_{author.id}", output, author
            )

        return output

    def resolve_term(self, term: Term) -> dict:
        """Values for a category, tag or custom taxonomy listing."""
        output = {}

        if term.name is not None:
            output["title"] = term.name

        if term.description is not None:
            output["description"] = term.description

        if term.id is not None:
            if term.taxonomy is not None:
                try:
                    output["url"] = self.site.term_link(term)
                except TermLinkError as e:
                    logger.debug(f"No archive link: {e}")

            lookup = self.site.archive_image_lookup
            if lookup is not None:
                image = lookup(term.id)
                if image:
                    output["image"] = image

        output = self.filters.apply_filters(f"{self.filter_prefix}_term", output, term)
        if term.taxonomy is not None:
            output = self.filters.apply_filters(
                f"{self.filter_prefix}_term_{term.taxonomy}", output, term
            )

        return output

    def resolve_singular(self, post: Optional[Post]) -> Optional[dict]:
        """Values for a single content item or the static front page.

        Returns:
            None when the item has no usable permalink
        """
        permalink = esc_url(self.site.permalink(post)) if post is not None else ""
        if not permalink:
            logger.debug("Singular view without permalink, no meta emitted")
            return None

        post_type = post.type
        support = self.site.post_type_support(post_type)
        output = {"url": permalink}

        if support.supports(SUPPORT_TITLE):
            title = self.filters.apply_filters(TITLE_FILTER, post.title or "", post)
            if title:
                output["title"] = title

        if support.supports(SUPPORT_EXCERPT) or support.supports(SUPPORT_EDITOR):
            excerpt = self.filters.apply_filters(EXCERPT_FILTER, self._excerpt(post), post)
            if excerpt:
                output["description"] = excerpt

        if support.supports(SUPPORT_THUMBNAIL):
            image = self._image(post)
            if image:
                output["image"] = image

        output = self.filters.apply_filters(
            f"{self.filter_prefix}_singular", output, post, post_type
        )
        output = self.filters.apply_filters(
            f"{self.filter_prefix}_singular_{post_type}", output, post, post_type
        )

        return output

    def _excerpt(self, post: Post) -> str:
        if post.excerpt:
            return post.excerpt
        return trim_words(post.content, self.config.excerpt_length, self.config.excerpt_more)

    def _image(self, post: Post) -> Optional[str]:
        image_id = _absint(
            self.filters.apply_filters(f"{self.filter_prefix}_default_image_id", 0)
        )
        if post.has_thumbnail:
            image_id = post.thumbnail_id
        if post.is_attachment:
            image_id = post.id

        if not image_id:
            return None

        return self.site.attachment_image_url(image_id, self.config.image_size)
