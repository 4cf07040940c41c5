"""
Core Ports (Interfaces).

Protocols the infrastructure adapters must implement, so the store can be
backed by JSON files, memory, or anything else holding ordered records.
"""

from .lexicon_store import ILexiconStore, IShard
from .shard_storage import IShardStorage

__all__ = [
    "ILexiconStore",
    "IShard",
    "IShardStorage",
]
