# -*- coding: utf-8 -*-
"""
parallel.py - Order-preserving parallel filtering of subset enumerations.

Candidates are cut into consecutive chunks of the enumeration order,
each chunk is filtered by one worker process of a fixed-size pool, and
chunk results are concatenated in submission order. The output is
therefore identical to the serial scan.

Work functions are module-level callables `fn(context, item)`. The
context (a matroid, a nullity cache, a dependent family ...) is shipped
once to every worker when the pool starts, so it must be picklable;
work functions are pickled by reference.
"""

from collections import deque
from concurrent.futures import ProcessPoolExecutor
from itertools import islice, repeat
from typing import Any, Callable, Iterable, Iterator, List, Optional, TypeVar

T = TypeVar('T')
R = TypeVar('R')

# Context of the current worker process, installed by the pool initializer
_context: Any = None


def _install(context: Any):
    global _context
    _context = context


def _chunks(items: Iterable[T], size: int) -> Iterator[List[T]]:
    it = iter(items)
    while True:
        chunk = list(islice(it, size))
        if not chunk:
            return
        yield chunk


def _filter_chunk(predicate: Callable[[Any, T], bool], chunk: List[T]) -> List[T]:
    return [item for item in chunk if predicate(_context, item)]


def _map_chunk(fn: Callable[[Any, T], R], chunk: List[T]) -> List[R]:
    return [fn(_context, item) for item in chunk]


def _pool(workers: int, context: Any) -> ProcessPoolExecutor:
    return ProcessPoolExecutor(max_workers=workers, initializer=_install, initargs=(context,))


def iter_filter(predicate: Callable[[Any, T], bool], items: Iterable[T],
                workers: int = 1, chunk_size: int = 2048, context: Any = None) -> Iterator[T]:
    """
    Lazily yield items with predicate(context, item) true, in input order.

    With workers > 1 at most 2 * workers chunks are in flight, so the
    enumeration is never fully materialized.
    """
    if workers <= 1:
        for item in items:
            if predicate(context, item):
                yield item
        return

    with _pool(workers, context) as pool:
        pending = deque()
        for chunk in _chunks(items, chunk_size):
            pending.append(pool.submit(_filter_chunk, predicate, chunk))
            if len(pending) >= 2 * workers:
                yield from pending.popleft().result()
        while pending:
            yield from pending.popleft().result()


def parallel_filter(predicate: Callable[[Any, T], bool], items: Iterable[T],
                    workers: int = 1, chunk_size: int = 2048,
                    limit: Optional[int] = None,
                    on_limit: Optional[Callable[[int], None]] = None,
                    context: Any = None) -> List[T]:
    """
    Filter items, merged in enumeration order.

    If limit is set and more than `limit` items pass, on_limit(count) is
    called (it is expected to raise) and scanning stops.
    """
    kept = []
    for item in iter_filter(predicate, items, workers, chunk_size, context):
        kept.append(item)
        if limit is not None and len(kept) > limit:
            if on_limit is not None:
                on_limit(len(kept))
            break
    return kept


def parallel_map(fn: Callable[[Any, T], R], items: Iterable[T], workers: int = 1,
                 chunk_size: int = 64, context: Any = None) -> List[R]:
    """fn(context, item) over items, results in input order."""
    if workers <= 1:
        return [fn(context, item) for item in items]
    results = []
    with _pool(workers, context) as pool:
        for chunk in pool.map(_map_chunk, repeat(fn), _chunks(items, chunk_size)):
            results.extend(chunk)
    return results


__all__ = ['iter_filter', 'parallel_filter', 'parallel_map']
