"""Exception types raised by ogmeta."""


class OgMetaError(Exception):
    """Base class for all ogmeta errors."""


class TermLinkError(OgMetaError):
    """Raised by a host site when a term's archive link cannot be built."""

    def __init__(self, term_id, reason: str = "unresolvable term link"):
        self.term_id = term_id
        self.reason = reason
        super().__init__(f"Term {term_id}: {reason}")


class FixtureError(OgMetaError):
    """Raised when a site/view fixture is malformed."""
