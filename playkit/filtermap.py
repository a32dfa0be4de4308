"""Concurrent filter-map over a sequence, in three styles."""

from __future__ import annotations

import queue
import threading
from typing import Callable, Iterable, Sequence, TypeVar

T = TypeVar("T")
R = TypeVar("R")

FilterMapFn = Callable[[T], "tuple[R, bool]"]

_DONE = object()


def odd_to_float(value: int) -> tuple[float, bool]:
    """Keep odd numbers, converted to float; drop even ones."""
    if value % 2 == 0:
        return 0.0, False
    return float(value), True


def _worker(source: queue.Queue, sink: queue.Queue, fn: Callable) -> None:
    while (item := source.get()) is not _DONE:
        result, keep = fn(item)
        if keep:
            sink.put(result)


def _run_workers(source: queue.Queue, sink: queue.Queue, fn: Callable, count: int) -> None:
    workers = [
        threading.Thread(target=_worker, args=(source, sink, fn), daemon=True) for _ in range(count)
    ]
    for worker in workers:
        worker.start()
    for worker in workers:
        worker.join()


def _drain(q: queue.Queue) -> list:
    results = []
    while True:
        try:
            results.append(q.get_nowait())
        except queue.Empty:
            return results


def filter_map_buffered(items: Sequence[T], fn: Callable, max_concurrency: int) -> list:
    """Queue every item up front, then let the workers consume them."""
    if max_concurrency < 1:
        return []
    source: queue.Queue = queue.Queue()
    for item in items:
        source.put(item)
    for _ in range(max_concurrency):
        source.put(_DONE)
    sink: queue.Queue = queue.Queue()
    _run_workers(source, sink, fn, max_concurrency)
    return _drain(sink)


def filter_map_streaming(items: Iterable[T], fn: Callable, max_concurrency: int) -> list:
    """Feed items through small queues with a producer and a closer thread."""
    if max_concurrency < 1:
        return []
    source: queue.Queue = queue.Queue(maxsize=1)
    sink: queue.Queue = queue.Queue(maxsize=1)

    def produce() -> None:
        for item in items:
            source.put(item)
        for _ in range(max_concurrency):
            source.put(_DONE)

    def work_then_close() -> None:
        _run_workers(source, sink, fn, max_concurrency)
        sink.put(_DONE)

    threading.Thread(target=produce, daemon=True).start()
    threading.Thread(target=work_then_close, daemon=True).start()
    results = []
    while (value := sink.get()) is not _DONE:
        results.append(value)
    return results


def filter_map_semaphore(items: Iterable[T], fn: Callable, max_concurrency: int) -> list:
    """Start one thread per item, at most ``max_concurrency`` at a time."""
    if max_concurrency < 1:
        raise ValueError("max_concurrency must be at least 1")
    slots = threading.Semaphore(max_concurrency)
    results: list = []
    lock = threading.Lock()

    def run(item: T) -> None:
        try:
            value, keep = fn(item)
            if keep:
                with lock:
                    results.append(value)
        finally:
            slots.release()

    for item in items:
        slots.acquire()
        threading.Thread(target=run, args=(item,), daemon=True).start()
    for _ in range(max_concurrency):
        slots.acquire()
    return results