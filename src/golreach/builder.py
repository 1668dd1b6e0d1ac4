import logging
import os
from concurrent.futures import FIRST_EXCEPTION, ThreadPoolExecutor, wait

from golreach.encoder import encode_transition
from golreach.errors import ConfigurationError, RelationBuildError

log = logging.getLogger(__name__)


def partition(total, workers):
    """
    Split [0, total) into at most `workers` contiguous half-open chunks.

    Every chunk gets total // chunks indices; the last chunk also takes the
    remainder. With fewer indices than workers, each index is its own chunk.
    """
    if workers < 1:
        raise ConfigurationError(f"worker count must be at least 1, got {workers}")
    if total <= 0:
        return []

    chunks = min(workers, total)
    size = total // chunks
    bounds = [(k * size, (k + 1) * size) for k in range(chunks)]
    bounds[-1] = (bounds[-1][0], total)
    return bounds


def build_chunk(layout, generations, start, stop, encode=encode_transition):
    """OR together the transitions of generations[start:stop]."""
    t = layout.engine.false()
    try:
        for i in range(start, stop):
            t.or_with(encode(layout, generations[i]))
    except BaseException:
        t.release()
        raise
    log.debug("chunk [%d, %d) done", start, stop)
    return t


def build_transition_relation(layout, generations, workers=None, encode=encode_transition):
    """
    Build T = OR_i transition(generations[i]) for i in [0, len(generations) - 1).

    The index range is partitioned and each chunk is folded by its own pool
    worker. The caller waits for all of them before joining partial results
    in chunk order. If any worker fails, pending chunks are cancelled, the
    partial relations already built are released and RelationBuildError is
    raised for the first failing chunk.
    """
    if workers is None:
        workers = os.cpu_count() or 1

    chunks = partition(len(generations) - 1, workers)
    log.info("building transition relation: %d transition(s) in %d chunk(s)",
             max(len(generations) - 1, 0), len(chunks))

    with ThreadPoolExecutor(max_workers=max(len(chunks), 1)) as pool:
        futures = [
            pool.submit(build_chunk, layout, generations, start, stop, encode)
            for start, stop in chunks
        ]
        done, pending = wait(futures, return_when=FIRST_EXCEPTION)

        failed = next(
            (i for i, f in enumerate(futures) if f in done and f.exception() is not None),
            None,
        )
        if failed is not None:
            for f in pending:
                f.cancel()
            wait(futures)
            for f in futures:
                if not f.cancelled() and f.exception() is None:
                    f.result().release()
            cause = futures[failed].exception()
            log.error("transition chunk %s failed: %r", chunks[failed], cause)
            raise RelationBuildError(chunks[failed], cause) from cause

    res = layout.engine.false()
    for f in futures:
        res.or_with(f.result())
    return res
