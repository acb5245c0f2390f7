"""Custom exceptions for jbchannel."""


class JBChannelError(Exception):
    """Base exception for all jbchannel errors."""

    pass


class ConfigError(JBChannelError):
    """Configuration-related errors."""

    pass


class InvalidConfigError(ConfigError):
    """Invalid configuration data."""

    pass


class CatalogError(JBChannelError):
    """Catalog lookup errors."""

    pass


class UnknownShowError(CatalogError):
    """Show identifier is not in the registry or has no feed."""

    def __init__(self, show_id: str | None, reason: str | None = None) -> None:
        self.show_id = show_id
        message = f"Unknown show identifier: {show_id!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class UnsupportedImageTypeError(CatalogError):
    """Requested channel image type is not served."""

    def __init__(self, image_type: object) -> None:
        self.image_type = image_type
        super().__init__(f"Unsupported image type: {image_type}")


class FeedError(JBChannelError):
    """Feed retrieval errors."""

    pass


class FeedUnavailableError(FeedError):
    """Feed could not be fetched or parsed.

    Covers network failures, non-2xx responses, and malformed XML alike.
    """

    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"Feed unavailable: {url}: {reason}")
