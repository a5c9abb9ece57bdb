"""Hash fan-out pool: parallel digests over a bounded candidate queue."""

import logging
import queue
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Iterator, List, Optional
from shared.config.config import config
from shared.domain.models import DigestRecord, LineRef, WorkItem
from shared.exceptions import HasherFailureError
from shared.factories.hasher_factory import HasherFactory, create_hasher, validate_algorithms
from scanner.infrastructure.cancellation import CancellationToken

logger = logging.getLogger(__name__)

# Input sentinel, one per worker, queued by close()
_CLOSE = object()

# Output marker, posted by every worker when it exits
_WORKER_DONE = object()


def clamp_workers(num_workers: Optional[int]) -> int:
    """Clamp a requested worker count to [1, MAX_WORKER_THREADS]."""
    requested = num_workers if num_workers is not None else config.WORKER_THREADS
    return max(1, min(requested, config.MAX_WORKER_THREADS))


class HashFanoutPool:
    """
    Pool of hashing threads fed from one bounded queue.

    Every candidate submitted yields exactly one DigestRecord per
    configured algorithm, unless the run is cancelled first. Records
    arrive in whatever order the workers finish them.

    Each worker builds its own hashers through the factory at startup and
    resets them between candidates; no hasher is ever touched by two
    threads.

    Blocking points (submit on a full queue, workers on an empty one)
    wake up every QUEUE_POLL_INTERVAL to check the cancellation token,
    so cancelling never leaves a thread stuck on a queue nobody serves.

    Usage:
        with HashFanoutPool(["md5", "sha1"], num_workers=4) as pool:
            pool.submit(b"password")
            pool.close()
            for record in pool.results():
                ...
            pool.join()
    """

    def __init__(
        self,
        algorithms: List[str],
        num_workers: Optional[int] = None,
        queue_size: Optional[int] = None,
        hasher_factory: HasherFactory = create_hasher,
        cancellation: Optional[CancellationToken] = None,
        poll_interval: Optional[float] = None,
    ) -> None:
        self.algorithms = validate_algorithms(algorithms)
        self.num_workers = clamp_workers(num_workers)
        self.cancellation = cancellation if cancellation is not None else CancellationToken()
        self.submitted = 0

        self._hasher_factory = hasher_factory
        self._poll_interval = (
            poll_interval if poll_interval is not None else config.QUEUE_POLL_INTERVAL
        )
        self._input: queue.Queue = queue.Queue(maxsize=max(1, queue_size or config.INPUT_QUEUE_SIZE))
        self._output: queue.Queue = queue.Queue()
        self._executor: Optional[ThreadPoolExecutor] = None
        self._futures: List[Future] = []
        self._closed = False

    def __enter__(self) -> "HashFanoutPool":
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        # Workers only exit on close or cancel; make sure one of them happened
        if exc_type is not None or not self._closed:
            self.cancellation.cancel("pool exited before input was closed")
        self._shutdown()
        return False

    def start(self) -> None:
        """Start the worker threads."""
        if self._executor is not None:
            raise RuntimeError("Pool already started")

        self._executor = ThreadPoolExecutor(
            max_workers=self.num_workers,
            thread_name_prefix="hash-worker",
        )
        self._futures = [
            self._executor.submit(self._worker, worker_id)
            for worker_id in range(self.num_workers)
        ]
        logger.debug(
            f"Started {self.num_workers} hash workers "
            f"(algorithms={','.join(self.algorithms)}, queue_size={self._input.maxsize})"
        )

    def submit(self, data: bytes, source: Optional[LineRef] = None) -> bool:
        """
        Queue candidate bytes for hashing, blocking while the queue is full.

        Returns:
            True if queued, False if the run was cancelled first.
        """
        if self._closed:
            raise RuntimeError("Cannot submit to a closed pool")
        if not self._put(WorkItem(data=data, source=source)):
            return False
        self.submitted += 1
        return True

    def close(self) -> None:
        """Signal that no more candidates will be submitted. Idempotent."""
        if self._closed:
            return
        self._closed = True
        for _ in range(self.num_workers):
            if not self._put(_CLOSE):
                break

    def results(self) -> Iterator[DigestRecord]:
        """
        Yield digest records until every worker has exited.

        Safe to abandon early; workers never block on the output queue.
        """
        remaining = self.num_workers
        while remaining:
            record = self._output.get()
            if record is _WORKER_DONE:
                remaining -= 1
                continue
            yield record

    def join(self) -> None:
        """
        Wait for all workers to exit.

        Raises:
            HasherFailureError: First failure raised by any worker.
        """
        self._shutdown()
        for future in self._futures:
            error = future.exception()
            if error is not None:
                raise error

    def _shutdown(self) -> None:
        if self._executor is not None:
            self._executor.shutdown(wait=True)

    def _put(self, item: object) -> bool:
        """Put with backpressure; gives up only when the run is cancelled."""
        while not self.cancellation.is_cancelled():
            try:
                self._input.put(item, timeout=self._poll_interval)
                return True
            except queue.Full:
                continue
        return False

    def _worker(self, worker_id: int) -> int:
        """
        Hash candidates until the input is closed or the run is cancelled.

        A hasher failure cancels the whole run and is raised to join().

        Returns:
            Number of candidates hashed by this worker.
        """
        processed = 0
        algorithm = None
        try:
            hashers = []
            for algorithm in self.algorithms:
                hashers.append(self._hasher_factory(algorithm))

            while True:
                try:
                    item = self._input.get(timeout=self._poll_interval)
                except queue.Empty:
                    if self.cancellation.is_cancelled():
                        break
                    continue

                if item is _CLOSE or self.cancellation.is_cancelled():
                    break

                for hasher in hashers:
                    algorithm = hasher.algorithm
                    hasher.reset()
                    hasher.update(item.data)
                    self._output.put(DigestRecord(
                        digest=hasher.digest(),
                        algorithm=algorithm,
                        source=item.source,
                    ))
                processed += 1

            logger.debug(f"Hash worker {worker_id} exiting after {processed} candidates")
            return processed

        except Exception as e:
            logger.error(
                f"Hash worker {worker_id}: hasher {algorithm} failed "
                f"after {processed} candidates: {e}",
                exc_info=True,
            )
            self.cancellation.cancel(f"hasher {algorithm} failed")
            raise HasherFailureError(str(algorithm), str(e)) from e

        finally:
            self._output.put(_WORKER_DONE)
