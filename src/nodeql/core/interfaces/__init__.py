"""Capability interfaces for nodeql."""

from nodeql.core.interfaces.local_id_accessor import ILocalIdAccessor
from nodeql.core.interfaces.object_fetcher import IObjectFetcher
from nodeql.core.interfaces.type_resolver import ITypeResolver, TypeResolution

__all__ = [
    "IObjectFetcher",
    "ITypeResolver",
    "ILocalIdAccessor",
    "TypeResolution",
]
