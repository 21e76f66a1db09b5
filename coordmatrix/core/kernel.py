# -*- coding: utf-8 -*-
"""
kernel.py - Row-parallel matrix product

A fixed pool of worker threads pulls row indices off a bounded queue.
Each worker owns the rows it is handed and writes them straight into the
output; rows are disjoint so the output needs no lock.

Completion is structural: the dispatcher blocks on `Queue.join()`, which
only returns once every dispatched row has been both taken and finished
(`task_done`). Only then are the workers told to stop.
"""

import logging
import queue
import threading
from typing import List, Optional

import numpy as np

logger = logging.getLogger(__name__)

DEFAULT_WORKERS = 2  # Pool size; independent of matrix size

_STOP = None  # Sentinel, one per worker


def _product_row(a: np.ndarray, b: np.ndarray, i: int) -> np.ndarray:
    """Row i of a @ b, accumulated over k in a private buffer."""
    sums = np.zeros(b.shape[1], dtype=np.float64)
    for k in range(a.shape[1]):
        sums += a[i, k] * b[k]
    return sums


def parallel_product(
    a: np.ndarray,
    b: np.ndarray,
    out: np.ndarray,
    workers: Optional[int] = None
) -> np.ndarray:
    """
    Write a @ b into out using a pool of worker threads.

    Args:
        a: (M, K) array, read-only for the duration of the call
        b: (K, N) array, read-only for the duration of the call
        out: (M, N) array receiving the product; must not overlap a or b
        workers: pool size (default DEFAULT_WORKERS)

    Returns:
        out

    Raises:
        ValueError: if workers < 1
        Any exception raised by a worker, re-raised after the pool stops
    """
    n_workers = DEFAULT_WORKERS if workers is None else int(workers)
    if n_workers < 1:
        raise ValueError(f"workers must be >= 1, got {workers}")

    n_rows = a.shape[0]
    rows: queue.Queue = queue.Queue(maxsize=n_workers)
    failures: List[BaseException] = []

    def worker():
        while True:
            i = rows.get()
            if i is _STOP:
                rows.task_done()
                return
            try:
                if not failures:
                    out[i, :] = _product_row(a, b, i)
            except Exception as e:  # surfaced to the caller below
                failures.append(e)
            finally:
                rows.task_done()

    logger.debug("product %dx%d @ %dx%d on %d workers",
                 a.shape[0], a.shape[1], b.shape[0], b.shape[1], n_workers)

    pool = [threading.Thread(target=worker, daemon=True) for _ in range(n_workers)]
    for t in pool:
        t.start()

    for i in range(n_rows):
        rows.put(i)
    rows.join()  # Barrier: every row received AND written

    for _ in pool:
        rows.put(_STOP)
    for t in pool:
        t.join()

    if failures:
        raise failures[0]
    return out


__all__ = ['DEFAULT_WORKERS', 'parallel_product']
