"""Drink repositories persisted as JSON blobs in a key-value store."""

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Generic, TypeVar
from uuid import UUID

from pydantic import ValidationError

from drink_tracker.adapters.debounce import Debouncer
from drink_tracker.adapters.kv_store import KeyValueStore
from drink_tracker.adapters.records import (
    decode_events,
    decode_presets,
    decode_profile,
    encode_events,
    encode_presets,
    encode_profile,
)
from drink_tracker.domain.drinks import ConsumptionEvent, ConsumptionPreset
from drink_tracker.domain.profile import UserPhysiology
from drink_tracker.services.events import (
    EventRepository,
    PresetRepository,
    ProfileRepository,
)

_logger = logging.getLogger(__name__)

EVENTS_KEY = "drink_records"
PRESETS_KEY = "drink_presets"
PROFILE_KEY = "user_profile"

T = TypeVar("T")
Listener = Callable[[], None]


def _load(store: KeyValueStore, key: str, decode: Callable[[bytes], T]) -> T | None:
    raw = store.get(key)
    if raw is None:
        return None
    try:
        value = decode(raw)
    except ValidationError:
        _logger.exception("Failed to decode stored data: key=%s", key)
        return None
    _logger.info("Loaded stored data: key=%s bytes=%s", key, len(raw))
    return value


@dataclass
class _PersistedState(ABC):
    """Debounced writer plus synchronous change listeners."""

    store: KeyValueStore
    debounce_seconds: float = 0.5
    _listeners: list[Listener] = field(default_factory=list, init=False, repr=False)
    _writer: Debouncer = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._writer = Debouncer(self._persist, self.debounce_seconds)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call ``listener`` after every change; returns an unsubscribe hook."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def flush(self) -> None:
        """Write pending changes immediately."""
        self._writer.flush()

    def _changed(self) -> None:
        self._writer.trigger()
        for listener in list(self._listeners):
            listener()

    @abstractmethod
    def _persist(self) -> None:
        """Write the current state to the store."""


@dataclass
class _KeyValueCollection(_PersistedState, Generic[T]):
    key: str = ""
    encode: Callable[[list[T]], bytes] | None = None
    decode: Callable[[bytes], list[T]] | None = None
    _items: list[T] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self) -> None:
        super().__post_init__()
        self._items = _load(self.store, self.key, self.decode) or []

    def _upsert(self, item: T, item_id: UUID) -> None:
        items = list(self._items)
        for index, existing in enumerate(items):
            if existing.id == item_id:
                items[index] = item
                break
        else:
            items.append(item)
        self._items = items
        self._changed()

    def _delete(self, item_id: UUID) -> None:
        items = [item for item in self._items if item.id != item_id]
        if len(items) == len(self._items):
            return
        self._items = items
        self._changed()

    def _persist(self) -> None:
        snapshot = self._items
        self.store.set(self.key, self.encode(snapshot))
        _logger.debug("Persisted %s: count=%s", self.key, len(snapshot))


@dataclass
class KeyValueEventRepository(_KeyValueCollection[ConsumptionEvent], EventRepository):
    """Drink records stored under ``drink_records``."""

    key: str = EVENTS_KEY
    encode: Callable[[list[ConsumptionEvent]], bytes] | None = encode_events
    decode: Callable[[bytes], list[ConsumptionEvent]] | None = decode_events

    def list_events(self) -> list[ConsumptionEvent]:
        return list(self._items)

    def upsert_event(self, event: ConsumptionEvent) -> None:
        self._upsert(event, event.id)

    def delete_event(self, event_id: UUID) -> None:
        self._delete(event_id)


@dataclass
class KeyValuePresetRepository(
    _KeyValueCollection[ConsumptionPreset], PresetRepository
):
    """Quick-add presets stored under ``drink_presets``."""

    key: str = PRESETS_KEY
    encode: Callable[[list[ConsumptionPreset]], bytes] | None = encode_presets
    decode: Callable[[bytes], list[ConsumptionPreset]] | None = decode_presets

    def list_presets(self) -> list[ConsumptionPreset]:
        return list(self._items)

    def upsert_preset(self, preset: ConsumptionPreset) -> None:
        self._upsert(preset, preset.id)

    def delete_preset(self, preset_id: UUID) -> None:
        self._delete(preset_id)


@dataclass
class KeyValueProfileRepository(_PersistedState, ProfileRepository):
    """User profile stored under ``user_profile``."""

    _profile: UserPhysiology | None = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        super().__post_init__()
        self._profile = _load(self.store, PROFILE_KEY, decode_profile)

    def get_profile(self) -> UserPhysiology:
        """Return the stored profile, or defaults when none was saved."""
        return self._profile or UserPhysiology()

    def save_profile(self, profile: UserPhysiology) -> None:
        self._profile = profile
        self._changed()

    def _persist(self) -> None:
        if self._profile is None:
            return
        self.store.set(PROFILE_KEY, encode_profile(self._profile))
        _logger.debug("Persisted %s", PROFILE_KEY)
