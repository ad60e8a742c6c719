"""Single-use permission token, re-armed once per target command cycle."""

from __future__ import annotations


class Gate:
    """Plain boolean ticket scoped to one editing surface.

    Notifications are delivered synchronously on the command thread, so
    check-and-close in ``try_consume`` cannot interleave with another caller.
    """

    __slots__ = ("_open",)

    def __init__(self) -> None:
        self._open = False

    @property
    def is_open(self) -> bool:
        return self._open

    def arm(self) -> None:
        self._open = True

    def close(self) -> None:
        self._open = False

    def try_consume(self) -> bool:
        if not self._open:
            return False
        self._open = False
        return True

    def __repr__(self) -> str:
        return f"Gate(open={self._open})"


__all__ = ["Gate"]
