# wordhoard\__init__.py
"""
Wordhoard - Community Dictionary Backend.

This package contains the lexicon store (sharded Word documents), the
voting/moderation protocol layered on top of it, and the HTTP adapter that
exposes both, following Hexagonal Architecture (Ports & Adapters).
"""

__version__ = "1.0.0"
