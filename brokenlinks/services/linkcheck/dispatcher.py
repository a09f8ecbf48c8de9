from __future__ import annotations

import queue
import threading
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Optional, Set

from brokenlinks.core.logging import get_logger
from .frontier import Frontier
from .models import CrawlError, CrawlReport, ErrorKind, Outcome

logger = get_logger("brokenlinks.dispatcher")

Process = Callable[[str, Callable[[str], None]], Outcome]
OnOutcome = Callable[[Outcome], None]


class Dispatcher:
    """Single consumer over one channel, feeding a fixed worker pool.

    Workers put discovered URLs (``str``) on the channel and, once their
    pipeline run is over, the resulting ``Outcome``. Only the consumer loop
    in :meth:`run` touches the frontier and the in-flight counter.

    A worker always posts its outcome after its URLs, so when the in-flight
    set empties every URL it found has already been consumed: the crawl is
    complete. While URLs are in flight the loop keeps waiting in ``timeout``
    steps; only after ``stall_timeout`` of silence (never less than
    ``timeout``) does it give up, report each abandoned URL as KO and set
    ``CrawlReport.quiescent``.
    """

    def __init__(
        self,
        process: Process,
        workers: int = 4,
        timeout: float = 10.0,
        stall_timeout: Optional[float] = None,
        frontier: Optional[Frontier] = None,
        on_outcome: Optional[OnOutcome] = None,
    ):
        if workers < 1:
            raise ValueError("workers must be >= 1")
        if timeout <= 0:
            raise ValueError("timeout must be > 0")
        self.process = process
        self.workers = workers
        self.timeout = timeout
        self.stall_timeout = max(timeout, stall_timeout or 0.0)
        self.frontier = frontier if frontier is not None else Frontier()
        self.on_outcome = on_outcome
        self._channel: "queue.Queue[object]" = queue.Queue()
        self._in_flight: Set[str] = set()
        self._stopped = threading.Event()

    def submit(self, url: str) -> None:
        """Hand a discovered URL to the consumer; safe from any thread, never blocks."""
        self._channel.put(url)

    def _work(self, url: str) -> None:
        if self._stopped.is_set():
            return
        try:
            outcome = self.process(url, self.submit)
        except Exception as exc:
            logger.exception("unexpected failure while checking %s", url)
            outcome = Outcome.failure(url, CrawlError(ErrorKind.IO, repr(exc)))
        self._channel.put(outcome)

    def _record(self, report: CrawlReport, outcome: Outcome) -> None:
        report.outcomes.append(outcome)
        if self.on_outcome is not None:
            self.on_outcome(outcome)

    def _abandon(self, report: CrawlReport) -> None:
        report.quiescent = True
        report.abandoned = len(self._in_flight)
        logger.warning(
            "no result for %ss, giving up on %d URL(s) still in flight",
            self.stall_timeout,
            len(self._in_flight),
        )
        self._stopped.set()
        detail = f"no result after {self.stall_timeout:g}s"
        for url in sorted(self._in_flight):
            self._record(report, Outcome.failure(url, CrawlError(ErrorKind.TRANSPORT, detail)))
        self._in_flight.clear()

    def run(self, seed: str) -> CrawlReport:
        report = CrawlReport(base=seed)
        start = time.perf_counter()
        pool = ThreadPoolExecutor(max_workers=self.workers, thread_name_prefix="brokenlinks")
        self.submit(seed)
        silent = 0.0
        try:
            while True:
                try:
                    msg = self._channel.get(timeout=self.timeout)
                except queue.Empty:
                    # workers are still busy: a slow fetch is not quiescence
                    silent += self.timeout
                    if silent < self.stall_timeout:
                        logger.debug("waiting on %d URL(s) in flight", len(self._in_flight))
                        continue
                    self._abandon(report)
                    break
                silent = 0.0

                if isinstance(msg, Outcome):
                    if msg.url not in self._in_flight:
                        continue
                    self._in_flight.discard(msg.url)
                    self._record(report, msg)
                elif self.frontier.add(msg):
                    self._in_flight.add(msg)
                    logger.debug("scheduled %s (%d in flight)", msg, len(self._in_flight))
                    pool.submit(self._work, msg)

                if not self._in_flight and self._channel.empty():
                    break
        finally:
            # running workers are bounded by the client timeouts; queued ones are dropped
            pool.shutdown(wait=True, cancel_futures=True)

        report.visited = len(report.outcomes)
        report.elapsed = time.perf_counter() - start
        logger.debug("crawl finished: %d urls in %.2fs", report.visited, report.elapsed)
        return report
