"""A small actor runtime: processes with mailboxes that are drained on demand."""

from __future__ import annotations

import logging
import queue
import secrets
import threading
import time
from dataclasses import dataclass
from typing import Any, Callable, Optional, Protocol

ALPHABET = "_-0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
DEFAULT_ID_SIZE = 21
DEFAULT_QUEUE_SIZE = 10


def new_id(size: int = DEFAULT_ID_SIZE) -> str:
    """Return a random URL-safe identifier of ``size`` characters."""
    if size <= 0:
        raise ValueError("size must be positive")
    return "".join(secrets.choice(ALPHABET) for _ in range(size))


@dataclass(frozen=True)
class Pid:
    """The address of a process."""

    id: str


class Context(Protocol):
    @property
    def pid(self) -> Optional[Pid]: ...

    @property
    def message(self) -> Any: ...

    def spawn(self, options: SpawnOptions) -> Pid: ...

    def send(self, pid: Pid, message: Any) -> None: ...


Receiver = Callable[[Context], None]
Scheduler = Callable[[Callable[[], None]], Any]


class MessageQueue:
    """A bounded FIFO mailbox; ``push`` blocks when full, ``pop`` never blocks."""

    def __init__(self, size: int = DEFAULT_QUEUE_SIZE) -> None:
        self._queue: queue.Queue[Any] = queue.Queue(maxsize=size)

    def push(self, message: Any) -> None:
        self._queue.put(message)

    def pop(self) -> Any:
        """Return the next message, or None when the mailbox is empty."""
        try:
            return self._queue.get_nowait()
        except queue.Empty:
            return None


def thread_scheduler(fn: Callable[[], None]) -> threading.Thread:
    """Run ``fn`` on a new daemon thread."""
    thread = threading.Thread(target=fn, daemon=True)
    thread.start()
    return thread


class Process:
    """A mailbox with a receiver; a drain is scheduled when messages arrive."""

    def __init__(
        self,
        mailbox: MessageQueue,
        receiver: Receiver,
        scheduler: Scheduler,
        parent: Context,
        options: SpawnOptions,
    ) -> None:
        self.mailbox = mailbox
        self.receiver = receiver
        self.scheduler = scheduler
        self.parent = parent
        self.options = options
        self.pid: Optional[Pid] = None
        self._pending = 0
        self._running = False
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return max(self._pending, 0)

    def send_message(self, message: Any) -> None:
        self.mailbox.push(message)
        with self._lock:
            self._pending += 1
            start = not self._running
            self._running = True
        if start:
            self.scheduler(self._drain)

    def _drain(self) -> None:
        try:
            while True:
                while (message := self.mailbox.pop()) is not None:
                    with self._lock:
                        self._pending -= 1
                    self.receiver(ProcessContext(self, message))
                with self._lock:
                    if self._pending <= 0:
                        self._running = False
                        return
        except BaseException:
            with self._lock:
                self._running = False
            raise


class ProcessContext:
    """The context handed to a receiver for one message."""

    def __init__(self, process: Process, message: Any) -> None:
        self._process = process
        self.message = message

    @property
    def pid(self) -> Optional[Pid]:
        return self._process.pid

    def spawn(self, options: SpawnOptions) -> Pid:
        return self._process.parent.spawn(options)

    def send(self, pid: Pid, message: Any) -> None:
        self._process.parent.send(pid, message)


class PidBuilder(Protocol):
    def local_pid(self, pid_id: str) -> Pid: ...


class ProcessRegistry:
    """Maps process identifiers to processes."""

    def __init__(self, pid_builder: PidBuilder) -> None:
        self._pid_builder = pid_builder
        self._processes: dict[str, Process] = {}
        self._lock = threading.Lock()

    def next_id(self) -> str:
        return new_id()

    def from_id(self, pid_id: str) -> Optional[Process]:
        with self._lock:
            return self._processes.get(pid_id)

    def add_process(self, pid_id: str, process: Process) -> Pid:
        with self._lock:
            self._processes[pid_id] = process
        return self._pid_builder.local_pid(pid_id)


@dataclass
class SpawnOptions:
    """How to build a process: its receiver and optional overrides."""

    receiver: Receiver
    queue_factory: Optional[Callable[[], MessageQueue]] = None
    spawner: Optional[Callable[[System], Pid]] = None
    scheduler: Optional[Scheduler] = None

    def spawn(self, system: System, parent: Context) -> Pid:
        if self.spawner is not None:
            return self.spawner(system)
        return _default_spawn(system, parent, self)

    def _mailbox(self) -> MessageQueue:
        if self.queue_factory is not None:
            return self.queue_factory()
        return MessageQueue(DEFAULT_QUEUE_SIZE)

    def _scheduler(self) -> Scheduler:
        return self.scheduler if self.scheduler is not None else thread_scheduler


def _default_spawn(system: System, parent: Context, options: SpawnOptions) -> Pid:
    pid_id = system.process_registry.next_id()
    process = Process(
        mailbox=options._mailbox(),
        receiver=options.receiver,
        scheduler=options._scheduler(),
        parent=parent,
        options=options,
    )
    pid = system.process_registry.add_process(pid_id, process)
    process.pid = pid
    return pid


class System:
    """An actor system: a logger, an identifier and a process registry."""

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self.logger = logger if logger is not None else logging.getLogger(__name__)
        self.id = new_id()
        self.process_registry = ProcessRegistry(self)

    def local_pid(self, pid_id: str) -> Pid:
        return Pid(pid_id)

    def send(self, pid: Pid, message: Any) -> None:
        process = self.process_registry.from_id(pid.id)
        if process is None:
            raise KeyError(f"unknown process {pid.id!r}")
        process.send_message(message)


class RootContext:
    """The top-level context, which has no process of its own."""

    def __init__(self, system: System) -> None:
        self.system = system

    @property
    def pid(self) -> Optional[Pid]:
        return None

    @property
    def message(self) -> Any:
        return None

    def spawn(self, options: SpawnOptions) -> Pid:
        return options.spawn(self.system, self)

    def send(self, pid: Pid, message: Any) -> None:
        self.system.send(pid, message)


def main(argv: Optional[list[str]] = None) -> int:
    """Spawn a printing actor and send it two bursts of greetings."""
    logging.basicConfig(level=logging.DEBUG)
    root = RootContext(System(logging.getLogger()))
    pid = root.spawn(SpawnOptions(receiver=lambda ctx: print(ctx.pid.id, ctx.message)))
    for _ in range(4):
        root.send(pid, "Hello, World!")
    time.sleep(1)
    print("Sending messages again...")
    for _ in range(4):
        root.send(pid, "Hello, World!")
    time.sleep(1)
    return 0