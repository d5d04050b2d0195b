# ==============================================================================
# File: noise_rng/workers.py
# Purpose: Fan a single seeded sequence out over worker threads. Each task
#          owns its own SequenceGenerator copy positioned at the start of its
#          block, so the assembled result equals a single-threaded replay.
# ==============================================================================
from __future__ import annotations
import concurrent.futures
import logging
import os
from typing import List, Optional, Tuple

import numpy as np

from .core.errors import InvalidArgument
from .core.sequence import SequenceGenerator

logger = logging.getLogger(__name__)


def fork_generators(seed: int, workers: int, stride: int, start: int = 0) -> List[SequenceGenerator]:
    """Worker ``k`` gets a fresh generator positioned at ``start + k * stride``."""
    if workers <= 0:
        raise InvalidArgument(f"workers must be > 0, got {workers}")
    root = SequenceGenerator(seed, start)
    return [root.fork(k * stride) for k in range(workers)]


def _split_blocks(count: int, workers: int) -> List[Tuple[int, int]]:
    """(offset, length) pairs covering [0, count) in contiguous blocks."""
    base, extra = divmod(count, workers)
    blocks = []
    offset = 0
    for k in range(workers):
        length = base + (1 if k < extra else 0)
        if length:
            blocks.append((offset, length))
        offset += length
    return blocks


def _draw_task(rng: SequenceGenerator, length: int) -> np.ndarray:
    out = np.empty(length, dtype=np.uint32)
    for i in range(length):
        out[i] = rng.next_u32()
    return out


def draw_parallel(seed: int, count: int, workers: Optional[int] = None, start: int = 0) -> np.ndarray:
    """
    ``count`` draws from position ``start`` of ``seed``, computed in parallel.

    Completion order of the tasks does not matter: every block is written back
    at its own offset.
    """
    if count < 0:
        raise InvalidArgument(f"count must be >= 0, got {count}")
    if workers is None:
        workers = os.cpu_count() or 1
    if workers <= 0:
        raise InvalidArgument(f"workers must be > 0, got {workers}")

    result = np.empty(count, dtype=np.uint32)
    blocks = _split_blocks(count, workers)
    logger.info("Drawing %d values for seed %d on %d worker(s)", count, seed, len(blocks))

    root = SequenceGenerator(seed, start)
    with concurrent.futures.ThreadPoolExecutor(max_workers=max(1, len(blocks))) as executor:
        future_to_block = {
            executor.submit(_draw_task, root.fork(offset), length): (offset, length)
            for offset, length in blocks
        }
        for future in concurrent.futures.as_completed(future_to_block):
            offset, length = future_to_block[future]
            result[offset:offset + length] = future.result()
            logger.debug("Block [%d, %d) done", offset, offset + length)

    return result
