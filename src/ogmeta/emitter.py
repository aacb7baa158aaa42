# src/ogmeta/emitter.py
"""Turns a meta record into escaped <meta> tags."""

from typing import List, Mapping, TextIO

from ogmeta.constants import FB_KEYS, FB_PREFIX, OG_PREFIX, URL_KEY
from ogmeta.escaping import esc_attr, esc_url


class TagEmitter:
    """Formats meta records as Open Graph ``<meta property>`` tags."""

    TAG_TEMPLATE = '<meta property="{property}" content="{content}">'

    @staticmethod
    def get_prefix(key: str) -> str:
        """Namespace prefix for an unprefixed property name."""
        return FB_PREFIX if key in FB_KEYS else OG_PREFIX

    def format_tag(self, key: str, value: str) -> str:
        """Format one tag; ``url`` is escaped as a URL, the rest as attributes."""
        escape_value = esc_url if key == URL_KEY else esc_attr
        return self.TAG_TEMPLATE.format(
            property=esc_attr(self.get_prefix(key) + key),
            content=escape_value(value),
        )

    def emit(self, record: Mapping[str, str]) -> List[str]:
        """Tags for every non-empty value, in record order."""
        return [
            self.format_tag(key, value)
            for key, value in record.items()
            if value
        ]

    def write(self, record: Mapping[str, str], stream: TextIO) -> None:
        """Write the tags to ``stream``, one per line."""
        for tag in self.emit(record):
            stream.write(tag + "\n")
