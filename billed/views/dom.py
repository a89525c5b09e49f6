"""Minimal form document: elements found by test id, class lists and awaitable event dispatch."""

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import Any

from billed.models.upload import UploadedFile

logger = logging.getLogger(__name__)

Listener = Callable[["Event"], Any]

__all__ = ["Document", "Element", "Event", "FileInput", "Form", "Listener", "UploadedFile"]


@dataclass
class Event:
    type: str
    target: Element | None = None
    default_prevented: bool = False

    def prevent_default(self) -> None:
        self.default_prevented = True

    @classmethod
    def change(cls, target: Element) -> Event:
        return cls("change", target)

    @classmethod
    def submit(cls, target: Element) -> Event:
        return cls("submit", target)


@dataclass(eq=False)
class Element:
    tag: str
    test_id: str = ""
    name: str = ""
    value: str = ""
    attributes: dict[str, str] = field(default_factory=dict)
    class_list: set[str] = field(default_factory=set)
    children: list[Element] = field(default_factory=list)
    _listeners: dict[str, list[Listener]] = field(default_factory=dict, repr=False)

    def add_event_listener(self, event_type: str, listener: Listener) -> None:
        self._listeners.setdefault(event_type, []).append(listener)

    async def dispatch_event(self, event: Event) -> bool:
        """Run the listeners in registration order, awaiting coroutine results.

        Returns False when a listener called ``prevent_default()``.
        """
        if event.target is None:
            event.target = self
        logger.debug("Dispatching %s on %s", event.type, self.test_id or self.tag)
        for listener in list(self._listeners.get(event.type, [])):
            result = listener(event)
            if inspect.isawaitable(result):
                await result
        return not event.default_prevented

    def walk(self) -> Iterator[Element]:
        yield self
        for child in self.children:
            yield from child.walk()


@dataclass(eq=False)
class FileInput(Element):
    tag: str = "input"
    files: list[UploadedFile] = field(default_factory=list)


@dataclass(eq=False)
class Form(Element):
    tag: str = "form"

    def field(self, test_id: str) -> Element:
        for element in self.walk():
            if element is not self and element.test_id == test_id:
                return element
        raise LookupError(f"No field with test id {test_id!r} in form {self.test_id!r}")

    def values(self) -> dict[str, str]:
        return {element.name: element.value for element in self.walk() if element.name and element is not self}


class Document:
    def __init__(self, *roots: Element) -> None:
        self.body: list[Element] = list(roots)

    def _elements(self) -> Iterator[Element]:
        for root in self.body:
            yield from root.walk()

    def query_all(self, test_id: str) -> list[Element]:
        return [element for element in self._elements() if element.test_id == test_id]

    def get_by_test_id(self, test_id: str) -> Element:
        matches = self.query_all(test_id)
        if not matches:
            raise LookupError(f"Unable to find an element by test id {test_id!r}")
        return matches[0]
