"""Registries of observers that engine stages notify in turn."""

from __future__ import annotations

from typing import Generic, Iterator, Optional, TypeVar

T = TypeVar("T")


class ObserverSubject(Generic[T]):
    """An ordered set of observers whose freed slots are reused.

    Removing an observer leaves an empty slot in its place, so the others
    keep their positions; the next observer added fills the first free slot.
    """

    def __init__(self) -> None:
        self._slots: list[Optional[T]] = []

    def add_observer(self, observer: T) -> None:
        """Register an observer in the first free slot, or at the end."""
        for index, slot in enumerate(self._slots):
            if slot is None:
                self._slots[index] = observer
                return
        self._slots.append(observer)

    def remove_observer(self, observer: T) -> None:
        """Free the slot of a registered observer.

        Raises ValueError if the observer is not registered.
        """
        for index, slot in enumerate(self._slots):
            if slot is observer:
                self._slots[index] = None
                return
        raise ValueError("Observer does not exist")

    def observers(self) -> tuple[Optional[T], ...]:
        """All slots in order, with None where an observer was removed."""
        return tuple(self._slots)

    def __iter__(self) -> Iterator[T]:
        """Iterate over the registered observers, skipping free slots."""
        return (slot for slot in list(self._slots) if slot is not None)