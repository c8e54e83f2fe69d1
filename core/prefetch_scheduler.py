#!/usr/bin/env python3
"""
Speculative prefetching of entry pages
Starts one fetch per search result while the user is still choosing, then
hands out the result for whichever candidate gets picked
"""

import logging
import queue
import threading
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Sequence

from .errors import FetchError, MissingResult
from .search_models import Candidate

logger = logging.getLogger(__name__)


@dataclass
class PendingFetch:
    """Outcome of one prefetch worker, exactly one of document/error is set"""
    index: int
    document: Any = None
    error: Optional[FetchError] = None

    @property
    def failed(self) -> bool:
        return self.error is not None


class Rendezvous:
    """Single-consumer side of the prefetch channel.

    Completions arrive in any order; everything drained from the channel is
    buffered by candidate index so nothing is lost before the selection is
    known.
    """

    def __init__(self, channel: "queue.Queue[PendingFetch]", expected: int):
        self.channel = channel
        self.expected = expected
        self.received = 0
        self.results: Dict[int, PendingFetch] = {}
        self.start_time = time.time()

    def _receive(self) -> PendingFetch:
        pending = self.channel.get()
        self.received += 1
        if pending.index in self.results:
            # Each worker reports once; a duplicate means the bookkeeping is broken
            raise RuntimeError(f"Candidate {pending.index} was reported twice")
        if (pending.document is None) == (pending.error is None):
            raise RuntimeError(f"Candidate {pending.index} needs exactly one of document or error")
        self.results[pending.index] = pending

        if pending.failed:
            logger.debug(f"Prefetch {pending.index} failed: {pending.error}")
        else:
            logger.debug(f"Prefetch {pending.index} arrived after {time.time() - self.start_time:.2f}s")
        return pending

    def resolve(self, selected_index: int) -> Any:
        """Block until the outcome for ``selected_index`` is known.

        Returns the parsed document or raises the worker's ``FetchError``.
        Resolving the same index again returns the buffered outcome.
        """
        while selected_index not in self.results:
            if self.received >= self.expected:
                raise MissingResult(selected_index)
            self._receive()

        pending = self.results[selected_index]
        if pending.failed:
            raise pending.error
        return pending.document

    def discard(self):
        """Drop buffered outcomes; workers still running finish unobserved"""
        stats = self.get_stats()
        logger.debug(f"Discarding prefetch results: {stats}")
        self.results.clear()

    def get_stats(self) -> Dict[str, int]:
        return {
            'expected': self.expected,
            'received': self.received,
            'buffered': len(self.results),
            'failed': sum(1 for pending in self.results.values() if pending.failed),
        }


class PrefetchScheduler:
    """Launches one worker thread per candidate"""

    def __init__(self, fetch_and_parse: Callable[[str], Any]):
        self.fetch_and_parse = fetch_and_parse
        self.workers: List[threading.Thread] = []

    def schedule(self, candidates: Sequence[Candidate]) -> Rendezvous:
        """Start fetching every candidate and return immediately"""
        channel: "queue.Queue[PendingFetch]" = queue.Queue()

        for candidate in candidates:
            worker = threading.Thread(
                target=self._prefetch_worker,
                args=(candidate, channel),
                name=f"PrefetchWorker-{candidate.index}",
                daemon=True
            )
            worker.start()
            self.workers.append(worker)

        logger.info(f"Started {len(candidates)} prefetch workers")
        return Rendezvous(channel, expected=len(candidates))

    def _prefetch_worker(self, candidate: Candidate, channel: "queue.Queue[PendingFetch]"):
        """Fetch one candidate and report the outcome exactly once"""
        pending = PendingFetch(index=candidate.index)
        try:
            pending.document = self.fetch_and_parse(candidate.locator)
        except FetchError as e:
            pending.error = e
        except Exception as e:
            logger.error(f"Prefetch worker for '{candidate.label}' crashed: {e}")
            error = FetchError(f"Unexpected error while loading {candidate.locator}: {e}", candidate.locator)
            error.__cause__ = e
            pending.error = error
        except BaseException as e:
            pending.error = FetchError(f"Prefetch of {candidate.locator} was interrupted: {e!r}", candidate.locator)
            raise
        finally:
            channel.put(pending)

    def join(self, timeout: Optional[float] = None):
        """Wait for every worker to finish (used by tests and orderly shutdown)"""
        for worker in self.workers:
            worker.join(timeout=timeout)
