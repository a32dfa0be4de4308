import threading

import pytest

from playkit.actor import (
    ALPHABET,
    MessageQueue,
    Pid,
    ProcessRegistry,
    RootContext,
    SpawnOptions,
    System,
    new_id,
    thread_scheduler,
)


def run_now(fn):
    fn()


def test_new_id_default_size_and_alphabet():
    value = new_id()
    assert len(value) == 21
    assert set(value) <= set(ALPHABET)


def test_new_id_rejects_non_positive_size():
    with pytest.raises(ValueError):
        new_id(0)


def test_queue_is_fifo_and_pop_empty_returns_none():
    q = MessageQueue()
    assert q.pop() is None
    q.push("a")
    q.push("b")
    assert q.pop() == "a"
    assert q.pop() == "b"
    assert q.pop() is None


def test_messages_delivered_in_order_with_own_pid():
    root = RootContext(System())
    seen = []
    pid = root.spawn(
        SpawnOptions(receiver=lambda ctx: seen.append((ctx.pid, ctx.message)), scheduler=run_now)
    )
    for i in range(5):
        root.send(pid, i)
    assert seen == [(pid, i) for i in range(5)]


def test_root_context_has_no_pid_or_message():
    root = RootContext(System())
    assert root.pid is None
    assert root.message is None


def test_send_to_unknown_pid_raises():
    system = System()
    with pytest.raises(KeyError):
        system.send(Pid("missing"), "Hello, World!")


def test_local_pid_wraps_identifier():
    assert System().local_pid("abc") == Pid("abc")


def test_registry_add_and_lookup():
    system = System()
    registry = ProcessRegistry(system)
    marker = object()
    pid = registry.add_process("p1", marker)
    assert pid == Pid("p1")
    assert registry.from_id("p1") is marker
    assert registry.from_id("p2") is None


def test_custom_spawner_is_used():
    system = System()
    root = RootContext(system)
    calls = []

    def spawner(s):
        calls.append(s)
        return Pid("custom")

    pid = root.spawn(SpawnOptions(receiver=lambda ctx: None, spawner=spawner))
    assert pid == Pid("custom")
    assert calls == [system]
    assert system.process_registry.from_id("custom") is None


def test_custom_queue_factory_is_used():
    made = []

    def factory():
        q = MessageQueue(3)
        made.append(q)
        return q

    root = RootContext(System())
    seen = []
    pid = root.spawn(
        SpawnOptions(receiver=lambda ctx: seen.append(ctx.message), queue_factory=factory, scheduler=run_now)
    )
    root.send(pid, "x")
    assert len(made) == 1
    assert seen == ["x"]


def test_receiver_can_forward_through_context():
    root = RootContext(System())
    sink = []
    target = root.spawn(SpawnOptions(receiver=lambda ctx: sink.append(ctx.message), scheduler=run_now))
    relay = root.spawn(
        SpawnOptions(receiver=lambda ctx: ctx.send(target, ctx.message.upper()), scheduler=run_now)
    )
    root.send(relay, "hello")
    assert sink == ["HELLO"]


def test_thread_scheduler_delivers_all_messages_in_order():
    root = RootContext(System())
    seen = []
    done = threading.Event()

    def receive(ctx):
        seen.append((ctx.pid, ctx.message))
        if len(seen) == 8:
            done.set()

    pid = root.spawn(SpawnOptions(receiver=receive, scheduler=thread_scheduler))
    for i in range(8):
        root.send(pid, i)
    assert done.wait(5) is True
    assert seen == [(pid, i) for i in range(8)]