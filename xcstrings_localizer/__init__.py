"""Localize Xcode string catalogs with an AI translation service."""

__version__ = "0.2.0"
