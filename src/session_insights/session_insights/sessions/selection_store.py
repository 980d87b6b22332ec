from __future__ import annotations

from typing import MutableMapping, Optional, Protocol

from ..core.constants import SELECTION_KEY_CENTER, SELECTION_KEY_GRADE, SELECTION_KEY_WEEK
from ..core.enums import FilterField
from .model import Selection

SELECTION_KEYS = {
    FilterField.GRADE: SELECTION_KEY_GRADE,
    FilterField.CENTER: SELECTION_KEY_CENTER,
    FilterField.WEEK: SELECTION_KEY_WEEK,
}


class SelectionStore(Protocol):
    """Key-value string store scoped to the session-info view."""

    def get(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set(self, key: str, value: str) -> None:
        raise NotImplementedError

    def remove(self, key: str) -> None:
        raise NotImplementedError


class InMemorySelectionStore(SelectionStore):
    def __init__(self, initial: Optional[dict[str, str]] = None):
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = str(value)

    def remove(self, key: str) -> None:
        self._data.pop(key, None)


class FlaskSessionSelectionStore(SelectionStore):
    """Adapter over `flask.session` (or any mutable mapping)."""

    def __init__(self, session: MutableMapping):
        self._session = session

    def get(self, key: str) -> Optional[str]:
        value = self._session.get(key)
        return str(value) if value is not None else None

    def set(self, key: str, value: str) -> None:
        self._session[key] = str(value)

    def remove(self, key: str) -> None:
        self._session.pop(key, None)


class SelectionMemory:
    """Remember the last chosen grade/center/week across visits."""

    def __init__(self, store: SelectionStore):
        self._store = store

    def restore(self) -> Selection:
        return Selection.of(
            grade=self._store.get(SELECTION_KEY_GRADE),
            center=self._store.get(SELECTION_KEY_CENTER),
            week=self._store.get(SELECTION_KEY_WEEK),
        )

    def remember(self, field: FilterField, value) -> None:
        key = SELECTION_KEYS[field]
        if value is None or str(value).strip() == "":
            self._store.remove(key)
        else:
            self._store.set(key, str(value))

    def clear(self, field: Optional[FilterField] = None) -> None:
        fields = [field] if field is not None else list(FilterField)
        for f in fields:
            self._store.remove(SELECTION_KEYS[f])
