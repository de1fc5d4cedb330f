"""Utility helpers for nodeql."""

from nodeql.utils.encoding import base64, unbase64

__all__ = ["base64", "unbase64"]
