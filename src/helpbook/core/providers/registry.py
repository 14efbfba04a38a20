"""Registry of content providers keyed by identifier"""

from typing import Any

from helpbook.core.providers.base import ContentProvider
from helpbook.core.providers.hugo import HugoContentProvider


DEFAULT_PROVIDER = 'hugo'

_PROVIDERS: dict[str, type[ContentProvider]] = {}


def register_provider(cls: type[ContentProvider]) -> type[ContentProvider]:
    """Register a provider class under its identifier; usable as a decorator."""
    if not cls.identifier:
        raise ValueError(f"{cls.__name__} has no identifier")
    _PROVIDERS[cls.identifier] = cls
    return cls


def available_providers() -> dict[str, type[ContentProvider]]:
    return dict(sorted(_PROVIDERS.items()))


def get_provider(identifier: str = DEFAULT_PROVIDER, **options: Any) -> ContentProvider:
    """Instantiate the provider registered as identifier with the given options."""
    try:
        cls = _PROVIDERS[identifier]
    except KeyError:
        known = ', '.join(sorted(_PROVIDERS)) or 'none'
        raise ValueError(f"Unknown content provider '{identifier}' (available: {known})") from None
    return cls(**options)


register_provider(HugoContentProvider)
