"""Example usage of ogmeta - tags for a single article with a custom filter."""

import sys

from ogmeta import (
    FilterRegistry,
    HeadRenderer,
    MetaResolver,
    Post,
    SiteConfig,
    StaticSite,
    ViewContext,
)
from ogmeta.models import SiteData


def main():
    """Print the head tags for an example article."""

    # Site values come from OGMETA_* variables or a .env file
    config = SiteConfig.from_env()
    if not config.site_name:
        config.site_name = "Example Site"
        config.site_url = "https://example.com"

    site = StaticSite(config, SiteData(attachments={10: {"medium": "https://example.com/hero-300x200.jpg"}}))
    filters = FilterRegistry()

    # Facebook app id for every page
    def add_app_id(record, view):
        record["app_id"] = "987654321"
        return record

    filters.add_filter(config.filter_prefix, add_app_id)

    renderer = HeadRenderer(MetaResolver(site, filters))
    renderer.install()

    post = Post(
        id=1,
        permalink=f"{config.site_url}/hello-world/",
        title="Hello world",
        content="<p>Welcome to the site. This is the first post.</p>",
        thumbnail_id=10,
    )

    sys.stdout.write(renderer.render_head(ViewContext.singular(post)))


if __name__ == "__main__":
    main()
