"""crawl_cache.storage: чтение, запись и удаление файлов кэша по пути."""

from __future__ import annotations

import contextlib
import os
from pathlib import Path
from typing import Optional, Sequence, Union

from crawl_cache.errors import StorageError
from crawl_cache.logger import logger

__all__: Sequence[str] = (
    "read_cache",
    "remove_cache",
    "ensure_parent",
    "write_cache",
)

PathT = Union[str, os.PathLike]


def read_cache(cache_path: PathT) -> Optional[str]:
    """Возвращает содержимое файла кэша или None, если файла нет или он не читается как текст."""
    p = Path(cache_path)
    if not p.is_file():
        return None
    try:
        with p.open("r", encoding="utf-8", newline="") as fh:
            return fh.read()
    except (OSError, UnicodeDecodeError) as exc:
        logger.debug("Unreadable cache file %s: %s", p, exc)
        return None


def remove_cache(cache_path: PathT) -> bool:
    """Удаляет файл кэша. Отсутствующий файл считается успешно удалённым."""
    p = Path(cache_path)
    if not p.is_file():
        return True
    try:
        p.unlink()
    except OSError as exc:
        logger.warning("Cannot remove cache file %s: %s", p, exc)
        return False
    logger.debug("Removed cache file %s", p)
    return True


def ensure_parent(cache_path: PathT) -> Path:
    """Создаёт все недостающие родительские каталоги и возвращает путь к ним."""
    parent = Path(cache_path).parent
    try:
        parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise StorageError(cache_path, f"cannot create directory {parent}: {exc}") from exc
    return parent


def write_cache(cache_path: PathT, content: str) -> None:
    """
    Создаёт (или обрезает) файл и записывает текст в UTF-8 как есть.

    Файл открыт без буферизации, поэтому данные передаются ОС при write;
    ошибка последующего flush игнорируется.
    """
    p = Path(cache_path)
    try:
        data = memoryview(content.encode("utf-8"))
        with p.open("wb", buffering=0) as fh:
            while data:
                data = data[fh.write(data):]
            with contextlib.suppress(OSError):
                fh.flush()
    except (OSError, UnicodeEncodeError) as exc:
        raise StorageError(cache_path, f"cannot write cache file {p}: {exc}") from exc
    logger.debug("Wrote %d chars to %s", len(content), p)
