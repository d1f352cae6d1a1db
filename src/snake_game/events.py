"""
Game events and the bus that carries them between systems.

Writers append to the bus; every consuming system owns an EventReader that
remembers how far it has read, so several systems can observe the same events
independently. Events live for the tick they were sent in and the one after,
then they are dropped by `EventBus.update()`.
"""
from enum import Enum
from typing import List


class GameEvent(Enum):
    GROWTH = "growth"
    GAME_OVER = "game_over"
    FOOD_SPAWNED = "food_spawned"
    FOOD_ROTTED = "food_rotted"


class EventReader:
    def __init__(self, start: int = 0):
        self.cursor = start  # absolute index of the next unread event

    def read(self, bus: "EventBus") -> List[GameEvent]:
        events = bus.since(self.cursor)
        self.cursor = bus.total
        return events


class EventBus:
    def __init__(self):
        self._previous: List[GameEvent] = []
        self._current: List[GameEvent] = []
        self._dropped = 0  # events discarded before _previous[0]

    @property
    def total(self) -> int:
        """Number of events ever sent."""
        return self._dropped + len(self._previous) + len(self._current)

    def send(self, event: GameEvent) -> None:
        self._current.append(event)

    def reader(self) -> EventReader:
        """A reader that only sees events sent from now on."""
        return EventReader(self.total)

    def since(self, cursor: int) -> List[GameEvent]:
        retained = self._previous + self._current
        start = max(cursor - self._dropped, 0)
        return retained[start:]

    def update(self) -> None:
        """Swap buffers; call once per tick before any system runs."""
        self._dropped += len(self._previous)
        self._previous = self._current
        self._current = []

    def current(self) -> List[GameEvent]:
        """Events sent since the last update()."""
        return list(self._current)

    def __len__(self) -> int:
        return len(self._previous) + len(self._current)
