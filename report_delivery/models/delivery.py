"""Delivery provider keys."""

from enum import Enum


class DeliveryProvider(str, Enum):
    """Known delivery backends, keyed by their selector string."""

    INTERNAL = "internal"
    YANDEX = "yandex"
    KAZPOST = "kazpost"

    @classmethod
    def from_key(cls, key: "str | DeliveryProvider | None") -> "DeliveryProvider":
        """
        Resolve a selector string to a provider.

        Matching is case-insensitive and ignores surrounding whitespace.
        Anything unrecognised, including ``None`` and the empty string,
        resolves to ``INTERNAL``.
        """
        if isinstance(key, cls):
            return key
        normalized = (key or "").strip().lower()
        try:
            return cls(normalized)
        except ValueError:
            return cls.INTERNAL

    @classmethod
    def is_known(cls, key: str | None) -> bool:
        """Return True if key names a provider without falling back."""
        return (key or "").strip().lower() in {member.value for member in cls}
