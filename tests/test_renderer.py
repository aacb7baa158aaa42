"""Tests for head rendering."""

import io

import pytest
from ogmeta.config import SiteConfig
from ogmeta.hooks import FilterRegistry
from ogmeta.models import Post, ViewContext
from ogmeta.renderer import HeadRenderer
from ogmeta.resolver import MetaResolver
from ogmeta.site import StaticSite


@pytest.fixture
def renderer():
    site = StaticSite(SiteConfig(site_name="Acme & Co", tagline="Widgets", site_url="https://acme.test", locale="fr_FR"))
    return HeadRenderer(MetaResolver(site, FilterRegistry()))


class TestHeadRenderer:
    """Test suite for HeadRenderer."""

    def test_print_meta(self, renderer):
        stream = io.StringIO()
        renderer.print_meta(ViewContext.home(), stream)

        lines = stream.getvalue().splitlines()
        assert '<meta property="og:title" content="Acme &amp; Co">' in lines
        assert '<meta property="og:locale" content="fr_FR">' in lines

    def test_render_head_requires_install(self, renderer):
        assert renderer.render_head(ViewContext.home()) == ""

        renderer.install()

        assert '<meta property="og:type" content="website">' in renderer.render_head(ViewContext.home())

    def test_install_twice_registers_once(self, renderer):
        renderer.install()
        renderer.install()

        head = renderer.render_head(ViewContext.home())

        assert head.count('og:title') == 1

    def test_other_head_actions_run_too(self, renderer):
        renderer.install()
        renderer.filters.add_action("head", lambda view, stream: stream.write("<!-- end -->\n"), priority=99)

        head = renderer.render_head(ViewContext.home())

        assert head.endswith("<!-- end -->\n")

    def test_preview_document(self, renderer):
        html = renderer.render_preview(ViewContext.home())

        assert html.startswith("<!DOCTYPE html>")
        assert '<html lang="fr-FR">' in html
        assert "<title>Acme &amp; Co</title>" in html
        # Tags are inserted already escaped, not escaped twice
        assert '<meta property="og:title" content="Acme &amp; Co">' in html
        assert "&amp;amp;" not in html
        assert '<body data-view="home">' in html

    def test_preview_for_empty_record(self, renderer):
        html = renderer.render_preview(ViewContext.singular(Post(id=1)))

        assert "No Open Graph data for this view." in html
        assert "<meta property" not in html

    def test_custom_template_dir(self, tmp_path):
        (tmp_path / "head.html.j2").write_text("{% for tag in tags %}{{ tag }}|{% endfor %}")
        site = StaticSite(SiteConfig(site_name="Acme"))
        renderer = HeadRenderer(MetaResolver(site), template_dir=str(tmp_path))

        html = renderer.render_preview(ViewContext.other())

        assert html == (
            '<meta property="og:site_name" content="Acme">|'
            '<meta property="og:type" content="article">|'
        )
