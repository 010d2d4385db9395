"""
Tests for the input layer.

Tests cover:
- InputEvent validation
- InputManager with a mock source
- MouseInputSource converting pygame events
"""

import pygame
import pytest
from typing import List

from models import Vector2D
from pilotlou.games.input import EventType, InputEvent, InputManager
from pilotlou.games.input.sources.base import InputSource
from pilotlou.games.input.sources.mouse import MouseInputSource


class MockInputSource(InputSource):
    """Mock implementation of InputSource for testing."""

    def __init__(self):
        self.events: List[InputEvent] = []
        self.update_calls = 0
        self.last_dt = 0.0

    def poll_events(self) -> List[InputEvent]:
        events = self.events.copy()
        self.events.clear()
        return events

    def update(self, dt: float) -> None:
        self.update_calls += 1
        self.last_dt = dt


def click_at(x, y, t=1.0):
    return InputEvent(position=Vector2D(x=x, y=y), timestamp=t, event_type=EventType.CLICK)


def move_to(x, y, t=1.0):
    return InputEvent(position=Vector2D(x=x, y=y), timestamp=t, event_type=EventType.MOVE)


class TestInputEvent:

    def test_default_type_is_click(self):
        event = InputEvent(position=Vector2D(x=1, y=2), timestamp=0.5)
        assert event.event_type == EventType.CLICK

    def test_negative_timestamp_rejected(self):
        with pytest.raises(ValueError):
            click_at(0, 0, t=-1.0)

    def test_immutable(self):
        event = click_at(0, 0)
        with pytest.raises(AttributeError):
            event.timestamp = 2.0

    def test_str(self):
        assert "type=click" in str(click_at(1, 2))


class TestInputManager:

    def test_without_source(self):
        manager = InputManager()
        assert not manager.has_source()
        manager.update(0.016)
        assert manager.get_events() == []

    def test_update_forwards_dt(self):
        source = MockInputSource()
        manager = InputManager(source)
        manager.update(0.016)
        assert source.update_calls == 1
        assert source.last_dt == 0.016

    def test_get_events_drains_source(self):
        source = MockInputSource()
        manager = InputManager(source)
        source.events.append(click_at(1, 2))
        assert len(manager.get_events()) == 1
        assert manager.get_events() == []

    def test_set_source(self):
        manager = InputManager()
        source = MockInputSource()
        manager.set_source(source)
        assert manager.get_source() is source

    def test_clear_events(self):
        source = MockInputSource()
        manager = InputManager(source)
        source.events.append(click_at(1, 2))
        manager.clear_events()
        assert manager.get_events() == []

    def test_consecutive_moves_coalesced(self):
        """Only the last move of each run survives; clicks keep their place."""
        source = MockInputSource()
        manager = InputManager(source)
        source.events.extend([
            move_to(1, 1), move_to(2, 2), click_at(3, 3), move_to(4, 4), move_to(5, 5),
        ])
        events = manager.get_events()
        assert [e.event_type for e in events] == [EventType.MOVE, EventType.CLICK, EventType.MOVE]
        assert events[0].position == Vector2D(x=2, y=2)
        assert events[2].position == Vector2D(x=5, y=5)

    def test_coalescing_can_be_disabled(self):
        source = MockInputSource()
        manager = InputManager(source, coalesce=False)
        source.events.extend([move_to(1, 1), move_to(2, 2)])
        assert len(manager.get_events()) == 2


class TestMouseInputSource:
    """MouseInputSource pygame event processing."""

    @pytest.fixture
    def display(self, pygame_init):
        pygame.display.set_mode((100, 100))
        pygame.event.clear()
        yield

    def test_starts_empty(self):
        assert MouseInputSource().poll_events() == []

    def test_left_click_creates_click_event(self, display):
        source = MouseInputSource()
        pygame.event.post(pygame.event.Event(pygame.MOUSEBUTTONDOWN, {'button': 1, 'pos': (15, 25)}))
        source.update(0.016)

        events = source.poll_events()
        assert len(events) == 1
        assert events[0].event_type == EventType.CLICK
        assert events[0].position == Vector2D(x=15.0, y=25.0)
        assert isinstance(events[0].position.x, float)

    def test_other_buttons_ignored(self, display):
        source = MouseInputSource()
        for button in (2, 3):
            pygame.event.post(pygame.event.Event(pygame.MOUSEBUTTONDOWN, {'button': button, 'pos': (5, 5)}))
        source.update(0.016)
        assert source.poll_events() == []

    def test_motion_creates_move_event(self, display):
        source = MouseInputSource()
        pygame.event.post(pygame.event.Event(
            pygame.MOUSEMOTION, {'pos': (40, 60), 'rel': (1, 1), 'buttons': (0, 0, 0)}
        ))
        source.update(0.016)

        events = source.poll_events()
        assert [e.event_type for e in events] == [EventType.MOVE]
        assert events[0].position == Vector2D(x=40.0, y=60.0)

    def test_order_preserved(self, display):
        source = MouseInputSource()
        pygame.event.post(pygame.event.Event(
            pygame.MOUSEMOTION, {'pos': (1, 1), 'rel': (0, 0), 'buttons': (0, 0, 0)}
        ))
        pygame.event.post(pygame.event.Event(pygame.MOUSEBUTTONDOWN, {'button': 1, 'pos': (2, 2)}))
        source.update(0.016)
        assert [e.event_type for e in source.poll_events()] == [EventType.MOVE, EventType.CLICK]

    def test_non_mouse_events_reposted(self, display):
        source = MouseInputSource()
        pygame.event.post(pygame.event.Event(pygame.KEYDOWN, {'key': pygame.K_ESCAPE}))
        source.update(0.016)

        assert source.poll_events() == []
        keys = [e for e in pygame.event.get() if e.type == pygame.KEYDOWN]
        assert len(keys) == 1
        assert keys[0].key == pygame.K_ESCAPE

    def test_clear(self, display):
        source = MouseInputSource()
        pygame.event.post(pygame.event.Event(pygame.MOUSEBUTTONDOWN, {'button': 1, 'pos': (2, 2)}))
        source.update(0.016)
        source.clear()
        assert source.poll_events() == []
