"""Tests for the event bus and its readers."""

from snake_game.events import EventBus, GameEvent


class TestEventBus:
    """Tests for EventBus and EventReader."""

    def test_readers_have_independent_cursors(self):
        """Two readers both observe every event once."""
        bus = EventBus()
        a, b = bus.reader(), bus.reader()
        bus.send(GameEvent.GROWTH)
        bus.send(GameEvent.FOOD_SPAWNED)

        assert a.read(bus) == [GameEvent.GROWTH, GameEvent.FOOD_SPAWNED]
        assert a.read(bus) == []
        assert b.read(bus) == [GameEvent.GROWTH, GameEvent.FOOD_SPAWNED]

    def test_new_reader_skips_earlier_events(self):
        """A reader only sees events sent after it was created."""
        bus = EventBus()
        bus.send(GameEvent.GAME_OVER)
        reader = bus.reader()
        bus.send(GameEvent.FOOD_ROTTED)
        assert reader.read(bus) == [GameEvent.FOOD_ROTTED]

    def test_events_survive_one_update_then_drop(self):
        """Events are double-buffered: visible for their tick and the next."""
        bus = EventBus()
        reader = bus.reader()
        bus.send(GameEvent.GROWTH)

        bus.update()
        assert len(bus) == 1
        assert bus.current() == []

        bus.update()
        assert len(bus) == 0
        assert reader.read(bus) == []

    def test_reader_resumes_after_dropped_events(self):
        """A lagging reader picks up at the oldest retained event."""
        bus = EventBus()
        reader = bus.reader()
        bus.send(GameEvent.GROWTH)
        bus.update()
        bus.update()
        bus.send(GameEvent.FOOD_SPAWNED)
        assert reader.read(bus) == [GameEvent.FOOD_SPAWNED]
        assert reader.cursor == bus.total == 2

    def test_current_lists_events_since_last_update(self):
        """current() is this tick's events only."""
        bus = EventBus()
        bus.send(GameEvent.GROWTH)
        bus.update()
        bus.send(GameEvent.GAME_OVER)
        assert bus.current() == [GameEvent.GAME_OVER]
