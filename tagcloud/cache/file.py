"""JSON-file cache: one file per cloud under a cache directory."""

from pathlib import Path
from typing import Optional, Union
from urllib.parse import quote

from pydantic import ValidationError

from tagcloud.cache.base import CACHE_KEY_PREFIX, CloudCache
from tagcloud.config import settings
from tagcloud.errors import CacheUnavailable
from tagcloud.models.tag import TagCloudSnapshot
from tagcloud.utils.logging import get_logger

logger = get_logger(__name__)


class FileCache(CloudCache):
    def __init__(self, directory: Optional[Union[str, Path]] = None) -> None:
        self.directory = Path(directory or settings.TAGCLOUD_CACHE_DIR)

    def _path(self, key: str) -> Path:
        # Cloud ids are opaque, so "/" or ".." must not leave the cache directory.
        return self.directory / f"{quote(key, safe='')}.json"

    def cache_get(self, key: str) -> Optional[TagCloudSnapshot]:
        path = self._path(key)
        try:
            raw = path.read_bytes()
        except FileNotFoundError:
            return None
        except OSError as exc:
            logger.error("Cache read failed for %s: %s", path, exc)
            raise CacheUnavailable(f"Could not read {path}: {exc}") from exc

        try:
            return TagCloudSnapshot.model_validate_json(raw)
        except ValidationError as exc:
            logger.error("Corrupt cache file %s: %s", path, exc)
            raise CacheUnavailable(f"Cache file {path} is corrupt") from exc

    def cache_set(self, key: str, snapshot: TagCloudSnapshot) -> None:
        path = self._path(key)
        tmp_path = path.with_suffix(".json.tmp")
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(snapshot.model_dump_json(), encoding="utf-8")
            tmp_path.replace(path)
        except OSError as exc:
            logger.error("Cache write failed for %s: %s", path, exc)
            raise CacheUnavailable(f"Could not write {path}: {exc}") from exc

    def cache_clear(self, key: Optional[str] = None) -> None:
        if key is not None:
            paths = [self._path(key)]
        elif self.directory.is_dir():
            paths = list(self.directory.glob(f"{CACHE_KEY_PREFIX}*.json"))
        else:
            paths = []

        for path in paths:
            try:
                path.unlink()
            except FileNotFoundError:
                continue
            except OSError as exc:
                logger.error("Cache delete failed for %s: %s", path, exc)
                raise CacheUnavailable(f"Could not remove {path}: {exc}") from exc
