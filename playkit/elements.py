"""A tree of rectangular elements with draw and mouse events."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional, Protocol

from playkit.rect import Point, Rectangle

_log = logging.getLogger(__name__)


class _Handler(Protocol):
    def on_draw(self, event: DrawEvent) -> None: ...

    def on_mouse_button_pressed(self, event: MouseButtonPressedEvent) -> None: ...

    def on_mouse_button_released(self, event: MouseButtonReleasedEvent) -> None: ...

    def on_mouse_position(self, event: MousePositionEvent) -> None: ...


@dataclass(frozen=True)
class MouseButtonPressedEvent:
    """Sent to the element on which the mouse button was pressed."""

    cursor: Point = Point()

    def dispatch(self, handler: _Handler) -> None:
        handler.on_mouse_button_pressed(self)


@dataclass(frozen=True)
class MouseButtonReleasedEvent:
    """Sent to the element on which the mouse button was released."""

    cursor: Point = Point()

    def dispatch(self, handler: _Handler) -> None:
        handler.on_mouse_button_released(self)


@dataclass(frozen=True)
class MousePositionEvent:
    """Sent to capturing elements with the cursor position."""

    cursor: Point = Point()

    def dispatch(self, handler: _Handler) -> None:
        handler.on_mouse_position(self)


@dataclass(frozen=True)
class DrawEvent:
    """Sent to elements when they need to draw themselves."""

    def dispatch(self, handler: _Handler) -> None:
        handler.on_draw(self)


def send_event(element: _Handler, event: Any) -> None:
    """Deliver an event to an element."""
    event.dispatch(element)


class Element:
    """A rectangular area in its parent's coordinates.

    Events are passed to listeners registered with ``listen``; subclasses may
    override the handlers instead.
    """

    def __init__(self, ui: UI, rect: Rectangle) -> None:
        self.ui = ui
        self.rect = rect
        self._listeners: dict[type, list[Callable[[Any], None]]] = {}

    def listen(self, event_type: type, fn: Callable[[Any], None]) -> None:
        """Call ``fn`` with every event of ``event_type`` this element handles."""
        self._listeners.setdefault(event_type, []).append(fn)

    def _emit(self, event: Any) -> None:
        for fn in self._listeners.get(type(event), ()):
            fn(event)

    def add_child(self, child: Element) -> None:
        self.ui.attach(child, self)

    def on_draw(self, event: DrawEvent) -> None:
        self._emit(event)

    def on_mouse_button_pressed(self, event: MouseButtonPressedEvent) -> None:
        self._emit(event)

    def on_mouse_button_released(self, event: MouseButtonReleasedEvent) -> None:
        self._emit(event)

    def on_mouse_position(self, event: MousePositionEvent) -> None:
        self._emit(event)


class MouseManager:
    """Tracks the left button and sends press, release and position events."""

    def __init__(self, ui: UI) -> None:
        self.ui = ui
        self.captured: dict[Element, None] = {}
        self._button_down = False
        self._cursor = Point()

    def update(self, cursor: Point, pressed: bool) -> None:
        """Process one frame with the given cursor and left-button state."""
        self._cursor = cursor
        if self.captured:
            self._send(lambda el, pt: send_event(el, MousePositionEvent(pt)))
        if pressed and not self._button_down:
            self._send(lambda el, pt: send_event(el, MouseButtonPressedEvent(pt)))
            self._button_down = True
        elif not pressed and self._button_down:
            self._send(lambda el, pt: send_event(el, MouseButtonReleasedEvent(pt)))
            self._button_down = False

    def _send(self, fn: Callable[[Element, Point], None]) -> None:
        if not self.captured:
            element, rect = self.ui.element_at(self._cursor)
            fn(element, self._cursor.sub(rect.min))
            return
        for element in list(self.captured):
            rect = self.ui.screen_rect(element)
            fn(element, self._cursor.sub(rect.min))

    def capture(self, element: Element) -> None:
        self.captured[element] = None

    def uncapture(self, element: Element) -> None:
        self.captured.pop(element, None)


class UI:
    """Keeps the element tree, the current screen and the mouse state."""

    def __init__(self, screen_width: int, screen_height: int) -> None:
        self.screen_width = screen_width
        self.screen_height = screen_height
        self.screen: Any = None
        self.elements: dict[Element, Optional[Element]] = {}
        self.mouse = MouseManager(self)
        self.root = Element(self, Rectangle(Point(0, 0), Point(screen_width, screen_height)))

    def attach(self, child: Element, parent: Optional[Element]) -> None:
        """Record ``parent`` as the parent of ``child``."""
        self.elements[child] = parent

    def screen_rect(self, element: Element) -> Rectangle:
        """Return the element's rectangle in screen coordinates."""
        if element is self.root:
            return self.root.rect
        parent = self.elements.get(element)
        if parent is None:
            return self.root.rect
        parent_rect = self.screen_rect(parent)
        lo = parent_rect.min.add(element.rect.min)
        return Rectangle(lo, lo.add(element.rect.size()))

    def element_at(self, point: Point) -> tuple[Element, Rectangle]:
        """Return the deepest element under ``point`` and its screen rectangle.

        When no single such element exists the root is returned.
        """
        under = [el for el in self.elements if point.in_rect(self.screen_rect(el))]
        candidates = list(under)
        for element in under:
            ancestors = []
            current = element
            while current in self.elements:
                current = self.elements[current]
                ancestors.append(current)
            candidates = [c for c in candidates if not any(c is a for a in ancestors)]
        if len(candidates) != 1:
            _log.warning("element_at: %d elements under point, want 1; using root",
                         len(candidates))
            return self.root, self.root.rect
        return candidates[0], self.screen_rect(candidates[0])

    def capture_mouse(self, element: Element) -> None:
        """Send all mouse input to ``element`` until released."""
        self.mouse.capture(element)

    def uncapture_mouse(self, element: Element) -> None:
        self.mouse.uncapture(element)

    def update(self, cursor: Point, pressed: bool) -> None:
        self.mouse.update(cursor, pressed)

    def draw(self, screen: Any) -> None:
        """Remember the screen and ask every attached element to draw."""
        self.screen = screen
        event = DrawEvent()
        for element in list(self.elements):
            send_event(element, event)