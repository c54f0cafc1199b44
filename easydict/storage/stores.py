"""
Persistent client stores for search history, the word notebook and known words.

Each store is an explicit object over a JSON file backend so callers pass
it where it is needed instead of sharing module-level lists. Loading never
fails: a missing or unreadable file yields an empty store. Saving raises
StorageError, and a store keeps its previous contents when a save fails.
"""

import json
from pathlib import Path
from typing import List, Optional, Set

from loguru import logger

from easydict.config import DATA_DIR, STORAGE_CONFIG
from easydict.errors import StorageError


class JsonFileBackend:
    """
    Stores a list of strings as a JSON array on disk.

    Args:
        path: File to read and write; parent directories are created on save
    """

    def __init__(self, path: Path):
        self.path = Path(path)

    def load(self) -> List[str]:
        if not self.path.exists():
            return []
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.error(f"Failed to load {self.path.name}: {str(e)}")
            return []
        if not isinstance(data, list):
            logger.error(f"Ignoring {self.path.name}: expected a JSON array")
            return []
        return [str(item) for item in data]

    def save(self, items: List[str]) -> None:
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(json.dumps(items, ensure_ascii=False, indent=2), encoding="utf-8")
            tmp_path.replace(self.path)
        except OSError as e:
            logger.error(f"Failed to save {self.path.name}: {str(e)}")
            raise StorageError(f"Failed to save {self.path.name}: {str(e)}")


def default_backend(key: str, data_dir: Optional[Path] = None) -> JsonFileBackend:
    """Backend for one of the `STORAGE_CONFIG` files (`history_file`, ...)."""
    return JsonFileBackend((data_dir or DATA_DIR) / STORAGE_CONFIG[key])


class HistoryStore:
    """
    Recent searches, most recent first.

    Words are stored lowercased; searching a word again moves it to the front.
    """

    def __init__(self, backend: JsonFileBackend, max_size: int = STORAGE_CONFIG["max_history"]):
        self.backend = backend
        self.max_size = max_size
        self._items: List[str] = []
        self.load()

    def load(self) -> List[str]:
        self._items = [w.lower() for w in self.backend.load()][:self.max_size]
        return self.items()

    def add(self, word: str) -> None:
        key = word.strip().lower()
        if not key:
            return
        items = [key] + [w for w in self._items if w != key]
        self._commit(items[:self.max_size])

    def remove(self, word: str) -> bool:
        key = word.strip().lower()
        if key not in self._items:
            return False
        self._commit([w for w in self._items if w != key])
        return True

    def clear(self) -> None:
        self._commit([])

    def _commit(self, items: List[str]) -> None:
        """Persist `items`, replacing the in-memory list only once saved."""
        self.backend.save(items)
        self._items = items

    def items(self) -> List[str]:
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)


class NotebookStore:
    """
    Saved words, newest first, in the casing they were saved with.

    Uniqueness is case-insensitive. The order can be rearranged with `move`.
    """

    def __init__(self, backend: JsonFileBackend):
        self.backend = backend
        self._items: List[str] = []
        self.load()

    def load(self) -> List[str]:
        self._items = self.backend.load()
        return self.items()

    def contains(self, word: str) -> bool:
        key = word.strip().lower()
        return any(item.lower() == key for item in self._items)

    def add(self, word: str) -> bool:
        """Save a word; returns False if it was blank or already saved."""
        w = word.strip()
        if not w or self.contains(w):
            return False
        self._commit([w] + self._items)
        return True

    def remove(self, word: str) -> bool:
        key = word.strip().lower()
        remaining = [item for item in self._items if item.lower() != key]
        if len(remaining) == len(self._items):
            return False
        self._commit(remaining)
        return True

    def toggle(self, word: str) -> bool:
        """Add or remove a word; returns whether it is saved afterwards."""
        if self.contains(word):
            self.remove(word)
            return False
        return self.add(word)

    def move(self, old_index: int, new_index: int) -> None:
        """
        Move the word at `old_index` to `new_index`.

        Raises:
            IndexError: If either index is out of range
        """
        size = len(self._items)
        if not (0 <= old_index < size and 0 <= new_index < size):
            raise IndexError(f"Notebook index out of range (size {size})")
        if old_index == new_index:
            return
        items = list(self._items)
        items.insert(new_index, items.pop(old_index))
        self._commit(items)

    def clear(self) -> None:
        self._commit([])

    def _commit(self, items: List[str]) -> None:
        self.backend.save(items)
        self._items = items

    def items(self) -> List[str]:
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)


class KnownWordsStore:
    """Vocabulary words the user has marked as known, stored lowercased."""

    def __init__(self, backend: JsonFileBackend):
        self.backend = backend
        self._words: Set[str] = set()
        self.load()

    def load(self) -> List[str]:
        self._words = {w.strip().lower() for w in self.backend.load() if w.strip()}
        return self.items()

    def is_known(self, word: str) -> bool:
        return word.strip().lower() in self._words

    def toggle(self, word: str) -> bool:
        """Flip the known flag; returns whether the word is known afterwards."""
        key = word.strip().lower()
        if not key:
            return False
        words = self._words ^ {key}
        self.backend.save(sorted(words))
        self._words = words
        return key in words

    def items(self) -> List[str]:
        return sorted(self._words)

    def __len__(self) -> int:
        return len(self._words)
