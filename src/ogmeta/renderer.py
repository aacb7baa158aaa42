"""Head rendering: wires the resolver and emitter into a page render."""

import io
import logging
from pathlib import Path
from typing import Optional, TextIO

from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup

from ogmeta.constants import HEAD_ACTION
from ogmeta.emitter import TagEmitter
from ogmeta.hooks import FilterRegistry
from ogmeta.models import ViewContext
from ogmeta.resolver import MetaResolver

logger = logging.getLogger(__name__)


class HeadRenderer:
    """Writes Open Graph tags into the document head of a rendered page."""

    def __init__(
        self,
        resolver: MetaResolver,
        emitter: Optional[TagEmitter] = None,
        template_dir: Optional[str] = None,
    ):
        """Initialize head renderer.

        Args:
            resolver: Resolver for the site being rendered
            emitter: Tag formatter
            template_dir: Directory containing Jinja2 templates
        """
        self.resolver = resolver
        self.emitter = emitter or TagEmitter()

        template_path = Path(template_dir) if template_dir else Path(__file__).parent / "templates"
        self.env = Environment(
            loader=FileSystemLoader(str(template_path)),
            autoescape=select_autoescape(['html', 'j2']),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )

    @property
    def filters(self) -> FilterRegistry:
        return self.resolver.filters

    def install(self) -> None:
        """Hook ``print_meta`` onto the head action of the resolver's registry.

        Installing again leaves a single registration.
        """
        self.filters.remove_action(HEAD_ACTION, self.print_meta)
        self.filters.add_action(HEAD_ACTION, self.print_meta)

    def print_meta(self, view: ViewContext, stream: TextIO) -> None:
        """Resolve ``view`` and write its tags to ``stream``."""
        record = self.resolver.resolve(view)
        self.emitter.write(record, stream)

    def render_head(self, view: ViewContext) -> str:
        """Run the head action for ``view`` and return what it wrote."""
        buffer = io.StringIO()
        self.filters.do_action(HEAD_ACTION, view, buffer)
        return buffer.getvalue()

    def render_preview(self, view: ViewContext) -> str:
        """Render a minimal HTML document carrying the tags for ``view``."""
        record = self.resolver.resolve(view)
        tags = [Markup(tag) for tag in self.emitter.emit(record)]

        template = self.env.get_template('head.html.j2')
        html = template.render(
            title=record.get("title") or record.get("site_name") or "",
            lang=(self.resolver.config.locale or "").replace("_", "-"),
            tags=tags,
            record=record,
            kind=view.kind.value,
        )
        logger.debug(f"Rendered preview with {len(tags)} tags for {view.kind.value} view")
        return html
