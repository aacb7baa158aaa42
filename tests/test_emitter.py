"""Tests for the tag emitter."""

import io

import pytest
from ogmeta.config import SiteConfig
from ogmeta.emitter import TagEmitter
from ogmeta.models import MetaRecord, Post, PostTypeSupport, SiteData, ViewContext
from ogmeta.resolver import MetaResolver
from ogmeta.site import StaticSite


class TestTagEmitter:
    """Test suite for TagEmitter."""

    @pytest.fixture
    def emitter(self):
        return TagEmitter()

    def test_prefixes(self, emitter):
        """Test fb: for admins and app_id, og: for everything else."""
        assert emitter.get_prefix("admins") == "fb:"
        assert emitter.get_prefix("app_id") == "fb:"
        for key in ("title", "description", "image", "url", "type", "locale", "site_name", "video"):
            assert emitter.get_prefix(key) == "og:"

    def test_emit_format(self, emitter):
        tags = emitter.emit({"title": "Acme"})

        assert tags == ['<meta property="og:title" content="Acme">']

    def test_facebook_keys_emitted_with_fb_prefix(self, emitter):
        tags = emitter.emit(MetaRecord(admins="100", app_id="200", title="Acme"))

        assert tags == [
            '<meta property="fb:admins" content="100">',
            '<meta property="fb:app_id" content="200">',
            '<meta property="og:title" content="Acme">',
        ]

    def test_empty_values_skipped(self, emitter):
        record = MetaRecord(description="", image="", title="Acme", url="", locale=None)

        assert emitter.emit(record) == ['<meta property="og:title" content="Acme">']

    def test_empty_record(self, emitter):
        assert emitter.emit(MetaRecord()) == []

    def test_record_order_preserved(self, emitter):
        record = MetaRecord([("url", "https://a.test/"), ("description", "d"), ("audio", "x.mp3")])

        properties = [tag.split('"')[1] for tag in emitter.emit(record)]

        assert properties == ["og:url", "og:description", "og:audio"]

    def test_generic_values_attribute_escaped(self, emitter):
        tags = emitter.emit({"title": 'Tom & "Jerry"', "description": "<b>bold</b>"})

        assert tags == [
            '<meta property="og:title" content="Tom &amp; &#34;Jerry&#34;">',
            '<meta property="og:description" content="&lt;b&gt;bold&lt;/b&gt;">',
        ]

    def test_url_value_url_escaped(self, emitter):
        tags = emitter.emit({"url": 'https://a.test/?q="x"&y=1'})

        assert tags == ['<meta property="og:url" content="https://a.test/?q=x&#038;y=1">']

    def test_url_escaping_to_empty(self, emitter):
        tags = emitter.emit({"title": "t", "url": "%0a"})

        assert tags == [
            '<meta property="og:title" content="t">',
            '<meta property="og:url" content="">',
        ]

    def test_image_is_not_url_escaped(self, emitter):
        tags = emitter.emit({"image": "https://a.test/i.png?a=1&b=2"})

        assert tags == ['<meta property="og:image" content="https://a.test/i.png?a=1&amp;b=2">']

    def test_property_name_escaped(self, emitter):
        tags = emitter.emit({'x"y': "value"})

        assert tags == ['<meta property="og:x&#34;y" content="value">']

    def test_write(self, emitter):
        stream = io.StringIO()
        emitter.write(MetaRecord(title="A", type="website"), stream)

        assert stream.getvalue() == (
            '<meta property="og:title" content="A">\n'
            '<meta property="og:type" content="website">\n'
        )


class TestResolveAndEmit:
    """End-to-end properties of resolving then emitting."""

    @pytest.fixture
    def site(self):
        return StaticSite(
            SiteConfig(site_name="Acme", tagline="Widgets", site_url="https://acme.test"),
            SiteData(post_types={"product": PostTypeSupport.from_features(["title"])}),
        )

    def _emit(self, site, view):
        return TagEmitter().emit(MetaResolver(site).resolve(view))

    def test_home_tags(self, site):
        assert self._emit(site, ViewContext.home()) == [
            '<meta property="og:description" content="Widgets">',
            '<meta property="og:site_name" content="Acme">',
            '<meta property="og:title" content="Acme">',
            '<meta property="og:type" content="website">',
            '<meta property="og:url" content="https://acme.test">',
        ]

    def test_no_description_tag_without_excerpt_support(self, site):
        product = Post(id=1, type="product", permalink="https://acme.test/p/", title="P", excerpt="Excerpt")

        tags = self._emit(site, ViewContext.singular(product))

        assert not any("og:description" in tag for tag in tags)
        assert '<meta property="og:title" content="P">' in tags

    def test_empty_permalink_emits_nothing(self, site):
        assert self._emit(site, ViewContext.singular(Post(id=1, title="Hi"))) == []

    @pytest.mark.parametrize("locale, expected", [
        ("fr_FR", ['<meta property="og:locale" content="fr_FR">']),
        ("en_US", []),
    ])
    def test_locale_tag(self, locale, expected):
        site = StaticSite(SiteConfig(site_name="Acme", locale=locale))

        tags = self._emit(site, ViewContext.home())

        assert [tag for tag in tags if "og:locale" in tag] == expected

    def test_description_free_of_markup(self, site):
        post = Post(
            id=1, permalink="https://acme.test/x/",
            excerpt='<p class="lead">Hello <a href="/">world</a></p>',
        )

        tags = self._emit(site, ViewContext.singular(post))

        assert '<meta property="og:description" content="Hello world">' in tags
