"""Change notifications and the priority-ordered hook lists that carry them."""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import count
from typing import Any, Callable, Generic, List, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class PreChange:
    """Text in ``[start, end)`` is about to be deleted or replaced."""

    start: int
    end: int

    @property
    def length(self) -> int:
        return self.end - self.start


@dataclass(frozen=True, slots=True)
class PostChange:
    """Text in ``[start, end)`` was just inserted.

    ``removed_length`` is how much text the same low-level edit removed;
    zero means a pure insertion.
    """

    start: int
    end: int
    removed_length: int = 0

    @property
    def length(self) -> int:
        return self.end - self.start

    @property
    def is_insertion(self) -> bool:
        return self.removed_length == 0


@dataclass(slots=True)
class _Observer:
    callback: Callable[[Any], None]
    priority: int
    order: int


@dataclass(slots=True)
class Subscription:
    """Handle returned by ``HookList.add``; ``cancel`` unregisters."""

    _cancel: Callable[[], None]
    active: bool = field(default=True)

    def cancel(self) -> None:
        if self.active:
            self.active = False
            self._cancel()


class HookList(Generic[T]):
    """Synchronous observer list ordered by priority, highest first.

    Observers sharing a priority run in registration order. Delivery happens
    on the caller's thread; an observer's exception propagates to ``emit``.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self._observers: List[_Observer] = []
        self._counter = count()

    def __len__(self) -> int:
        return len(self._observers)

    def add(self, callback: Callable[[T], None], *, priority: int = 0) -> Subscription:
        observer = _Observer(callback, priority, next(self._counter))
        self._observers.append(observer)
        self._observers.sort(key=lambda item: (-item.priority, item.order))
        return Subscription(lambda: self._remove(observer))

    def _remove(self, observer: _Observer) -> None:
        try:
            self._observers.remove(observer)
        except ValueError:
            pass

    def emit(self, payload: T) -> None:
        # Snapshot so observers may unsubscribe while being notified.
        for observer in tuple(self._observers):
            observer.callback(payload)


__all__ = ["HookList", "PostChange", "PreChange", "Subscription"]
