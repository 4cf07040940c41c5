# wordhoard\adapters\persistence\json_storage.py
import json
import os
from pathlib import Path
from typing import Any, Dict, List

import aiofiles
import aiofiles.os
import structlog

from wordhoard.core.domain.exceptions import StorageFault
from wordhoard.core.ports.shard_storage import IShardStorage

logger = structlog.get_logger()

_PREFIX = "shard-"
_SUFFIX = ".json"


class JsonShardStorage(IShardStorage):
    """
    Concrete implementation of the shard storage using local JSON files.

    Layout: {base_path}/shard-<hex(key)>.json, each file a JSON array of Word
    documents. The key is hex-encoded so any characters a word may start with
    ('.', '/', non-Latin letters) give a safe file name.

    Every write goes to a temporary file that is then renamed over the target,
    so a crash mid-write never leaves a truncated shard.
    """

    def __init__(self, base_path: str):
        self.base_path = Path(base_path)
        self.base_path.mkdir(parents=True, exist_ok=True)

    def _get_file_path(self, key: str) -> Path:
        return self.base_path / f"{_PREFIX}{key.encode('utf-8').hex()}{_SUFFIX}"

    async def _read(self, key: str) -> List[Dict[str, Any]]:
        path = self._get_file_path(key)
        if not await aiofiles.os.path.exists(path):
            return []

        try:
            async with aiofiles.open(path, mode="r", encoding="utf-8") as f:
                content = await f.read()
            data = json.loads(content) if content else []
        except (OSError, ValueError) as e:
            logger.error("shard_read_failed", shard=key, path=str(path), error=str(e))
            raise StorageFault(f"could not read shard '{key}'") from e

        if not isinstance(data, list):
            logger.error("shard_read_failed", shard=key, path=str(path), error="not a JSON array")
            raise StorageFault(f"shard '{key}' is not a JSON array")
        return data

    async def _write(self, key: str, records: List[Dict[str, Any]]) -> None:
        path = self._get_file_path(key)
        tmp_path = path.with_name(path.name + ".tmp")

        try:
            async with aiofiles.open(tmp_path, mode="w", encoding="utf-8") as f:
                await f.write(json.dumps(records, indent=2, ensure_ascii=False))
            await aiofiles.os.replace(tmp_path, path)
        except OSError as e:
            logger.error("shard_write_failed", shard=key, path=str(path), error=str(e))
            raise StorageFault(f"could not save shard '{key}'") from e

    # --- Interface Implementation ---

    async def load(self, key: str) -> List[Dict[str, Any]]:
        return await self._read(key)

    async def append(self, key: str, record: Dict[str, Any]) -> None:
        records = await self._read(key)
        records.append(record)
        await self._write(key, records)
        logger.debug("shard_record_appended", shard=key, size=len(records))

    async def replace(self, key: str, index: int, record: Dict[str, Any]) -> None:
        records = await self._read(key)
        if not 0 <= index < len(records):
            raise StorageFault(f"shard '{key}' has no record at position {index}")
        records[index] = record
        await self._write(key, records)

    async def keys(self) -> List[str]:
        keys = []
        for path in self.base_path.glob(f"{_PREFIX}*{_SUFFIX}"):
            encoded = path.name[len(_PREFIX):-len(_SUFFIX)]
            try:
                keys.append(bytes.fromhex(encoded).decode("utf-8"))
            except ValueError:
                logger.warning("shard_file_unrecognized", path=str(path))
        return keys

    async def health_check(self) -> bool:
        """Checks if the data directory is accessible."""
        return self.base_path.exists() and os.access(self.base_path, os.R_OK | os.W_OK)
