"""Error raised when a specifier cannot be parsed as a URL."""


class MalformedSpecifierError(ValueError):
    """Raised for a remote specifier with a bad scheme, host or port."""

    def __init__(self, specifier: str, reason: str) -> None:
        """Record the offending specifier alongside the reason."""
        super().__init__(f"Malformed specifier {specifier!r}: {reason}")
        self.specifier = specifier
        self.reason = reason
