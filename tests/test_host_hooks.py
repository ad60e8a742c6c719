from __future__ import annotations

from typing import List, Optional

import pytest

from change_highlight.host import CommandLoop, HookList, UnknownCommandError


def test_hooks_run_by_priority_then_registration() -> None:
    hooks: HookList[int] = HookList("test")
    calls: List[str] = []
    hooks.add(lambda value: calls.append(f"a{value}"))
    hooks.add(lambda value: calls.append(f"b{value}"), priority=10)
    hooks.add(lambda value: calls.append(f"c{value}"))
    hooks.add(lambda value: calls.append(f"d{value}"), priority=-5)

    hooks.emit(1)

    assert calls == ["b1", "a1", "c1", "d1"]


def test_subscription_cancel_is_idempotent() -> None:
    hooks: HookList[int] = HookList("test")
    calls: List[int] = []
    subscription = hooks.add(calls.append)

    subscription.cancel()
    subscription.cancel()
    hooks.emit(3)

    assert calls == []
    assert len(hooks) == 0
    assert subscription.active is False


def test_observer_may_unsubscribe_during_emit() -> None:
    hooks: HookList[int] = HookList("test")
    calls: List[str] = []
    subscription = None

    def once(value: int) -> None:
        calls.append("once")
        assert subscription is not None
        subscription.cancel()

    subscription = hooks.add(once)
    hooks.add(lambda value: calls.append("always"))

    hooks.emit(1)
    hooks.emit(2)

    assert calls == ["once", "always", "always"]


def test_command_loop_announces_cycle_before_body() -> None:
    loop = CommandLoop()
    order: List[str] = []
    loop.pre_command.add(lambda name: order.append(f"pre:{name}"))
    loop.register("undo", lambda: order.append(f"body:{loop.current_command}"))

    loop.execute("undo")

    assert order == ["pre:undo", "body:undo"]
    assert loop.current_command == "undo"
    assert loop.cycles == 1


def test_command_loop_passes_arguments_and_returns_result() -> None:
    loop = CommandLoop()
    loop.register("add", lambda a, b=0: a + b)

    assert loop.execute("add", 2, b=3) == 5


def test_unknown_command_raises_without_starting_cycle() -> None:
    loop = CommandLoop()
    seen: List[Optional[str]] = []
    loop.pre_command.add(seen.append)

    with pytest.raises(UnknownCommandError) as info:
        loop.execute("nope")

    assert "nope" in str(info.value)
    assert seen == []
    assert loop.current_command is None


def test_duplicate_registration_requires_replace() -> None:
    loop = CommandLoop()
    loop.register("undo", lambda: 1)

    with pytest.raises(ValueError):
        loop.register("undo", lambda: 2)

    loop.register("undo", lambda: 3, replace=True)
    assert loop.execute("undo") == 3
    assert loop.commands() == ("undo",)
