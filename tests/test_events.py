import dataclasses
from pathlib import Path

import pytest

from voidengine.display.enums import Button, ButtonAction, Key, KeyAction, KeyMod
from voidengine.display.events import (
    DropEvent,
    KeyboardKeyEvent,
    MouseButtonEvent,
    MousePositionEvent,
    WindowCloseEvent,
    WindowEvents,
    WindowFocusEvent,
    WindowSizeEvent,
)
from voidengine.utility.bit_mask import BitMask


class NotAWindowEvent:
    pass


def test_listener_receives_window_size_event():
    events = WindowEvents()
    received = []
    events.add_listener(WindowSizeEvent, received.append)
    events.emit(WindowSizeEvent(size=(800.0, 600.0)))
    events.poll()
    assert received == [WindowSizeEvent(size=(800.0, 600.0))]


def test_emitting_a_type_constructs_a_default_event():
    events = WindowEvents()
    received = []
    events.add_listener(WindowCloseEvent, received.append)
    events.emit(WindowCloseEvent)
    events.poll()
    assert received == [WindowCloseEvent()]


def test_listeners_only_see_their_own_type():
    events = WindowEvents()
    sizes = []
    focus = []
    events.add_listener(WindowSizeEvent, sizes.append)
    events.add_listener(WindowFocusEvent, focus.append)
    events.emit(WindowFocusEvent(focused=True))
    events.poll()
    assert sizes == []
    assert focus == [WindowFocusEvent(focused=True)]


def test_events_are_dispatched_in_order():
    events = WindowEvents()
    seen = []
    events.add_listener(MousePositionEvent, lambda e: seen.append(e.position))
    events.emit(MousePositionEvent((1.0, 2.0)))
    events.emit(MousePositionEvent((3.0, 4.0)))
    events.poll()
    assert seen == [(1.0, 2.0), (3.0, 4.0)]


def test_removed_listener_is_not_called():
    events = WindowEvents()
    seen = []
    listener_id = events.add_listener(WindowSizeEvent, seen.append)
    events.remove_listener(WindowSizeEvent, listener_id)
    events.emit(WindowSizeEvent((10.0, 20.0)))
    events.poll()
    assert seen == []


def test_foreign_event_types_are_rejected():
    events = WindowEvents()
    with pytest.raises(TypeError):
        events.add_listener(NotAWindowEvent, lambda e: None)
    with pytest.raises(TypeError):
        events.emit(NotAWindowEvent())


def test_every_window_event_type_is_accepted():
    events = WindowEvents()
    received = []
    for event_type in WindowEvents.event_types:
        events.add_listener(event_type, received.append)
        events.emit(event_type)
    events.poll()
    assert [type(e) for e in received] == list(WindowEvents.event_types)


def test_keyboard_key_event_carries_modifiers():
    mods = BitMask(KeyMod.SHIFT)
    mods.set(KeyMod.CONTROL)
    event = KeyboardKeyEvent(key=Key.A, scancode=30, action=KeyAction.PRESS, mods=mods)
    assert event.mods.is_set(KeyMod.SHIFT)
    assert event.mods.is_set(KeyMod.CONTROL)
    assert not event.mods.is_set(KeyMod.ALT)
    assert event.key == 65


def test_default_input_events():
    assert KeyboardKeyEvent().key is Key.NONE
    assert KeyboardKeyEvent().mods == BitMask()
    button = MouseButtonEvent()
    assert button.button is Button.LEFT
    assert button.action is ButtonAction.RELEASE


def test_events_are_immutable():
    event = DropEvent(paths=(Path("a.txt"),))
    assert event.paths == (Path("a.txt"),)
    with pytest.raises(dataclasses.FrozenInstanceError):
        event.paths = ()  # type: ignore[misc]