"""Match coordinator: wordlists -> hash pool -> target digest membership."""

import logging
import re
from concurrent.futures import ThreadPoolExecutor
from contextlib import closing
from typing import Iterable, List, Optional
from shared.config.config import config
from shared.domain.consts import ResultStatus, DigestDisplay
from shared.domain.models import DigestRecord, MatchResultPayload
from shared.domain.status import CoordinatorState
from shared.exceptions import HashCheckError
from shared.factories.hasher_factory import HasherFactory, create_hasher, validate_algorithms
from shared.text.normalizer import normalize, variants
from scanner.infrastructure.cancellation import CancellationToken
from scanner.infrastructure.line_streamer import numbered_lines_from_files
from scanner.services.hash_pool import HashFanoutPool

logger = logging.getLogger(__name__)

HEX_DIGEST_PATTERN = re.compile(r"^[0-9a-f]+$")


def encode_candidate(text: str) -> bytes:
    """
    Bytes that get hashed for a candidate string.

    Lines decoded by the streamer round-trip to their raw bytes. Any other
    lone surrogate is encoded as-is instead of failing the check.
    """
    try:
        return text.encode("utf-8", "surrogateescape")
    except UnicodeEncodeError:
        return text.encode("utf-8", "surrogatepass")


class MatchCoordinator:
    """
    Runs one password check at a time against a list of wordlists.

    States: IDLE -> PREPARING -> STREAMING -> (MATCHED | EXHAUSTED | ERROR) -> DONE.

    The target digest set is built once per run from every variant of the
    password and every algorithm. A reader thread then streams the
    wordlists into the hash pool, one submission per line variant, while
    the calling thread drains digests and tests membership. The first
    digest found in the target set wins and cancels the rest of the run;
    which one is found first is not defined.
    """

    def __init__(
        self,
        algorithms: Optional[List[str]] = None,
        workers: Optional[int] = None,
        queue_size: Optional[int] = None,
        hasher_factory: HasherFactory = create_hasher,
    ) -> None:
        self.algorithms = validate_algorithms(
            algorithms if algorithms is not None else config.DEFAULT_ALGORITHMS
        )
        self.workers = workers
        self.queue_size = queue_size
        self.hasher_factory = hasher_factory
        self.state = CoordinatorState.IDLE

    def _transition(self, state: CoordinatorState) -> None:
        logger.debug(f"Coordinator {self.state.value} -> {state.value}")
        self.state = state

    def target_digests(self, password: str) -> frozenset[bytes]:
        """Digests of every variant of password under every algorithm."""
        self._transition(CoordinatorState.PREPARING)
        hashers = [self.hasher_factory(algorithm) for algorithm in self.algorithms]
        digests = set()
        for variant in variants(password):
            data = encode_candidate(variant)
            for hasher in hashers:
                hasher.reset()
                hasher.update(data)
                digests.add(hasher.digest())
        return frozenset(digests)

    def hashed_target_digests(self, value: str) -> frozenset[bytes]:
        """
        Treat value as a hex digest and return it as the only target.

        Returns an empty set when value is not hex or its length does not
        match the digest size of any configured algorithm.
        """
        self._transition(CoordinatorState.PREPARING)
        candidate = normalize(value)
        if not HEX_DIGEST_PATTERN.match(candidate) or len(candidate) % 2:
            return frozenset()

        sizes = {self.hasher_factory(algorithm).digest_size for algorithm in self.algorithms}
        if len(candidate) // 2 not in sizes:
            return frozenset()
        return frozenset({bytes.fromhex(candidate)})

    def find_match(self, password: str, files: Iterable[str]) -> MatchResultPayload:
        """Check password, and its variants, against the wordlists."""
        self.state = CoordinatorState.IDLE
        return self.run(self.target_digests(password), files)

    def find_hashed_match(self, value: str, files: Iterable[str]) -> MatchResultPayload:
        """Check whether value is the hex digest of any wordlist line variant."""
        self.state = CoordinatorState.IDLE
        targets = self.hashed_target_digests(value)
        if not targets:
            logger.debug("Value is not a digest of any configured algorithm; skipping scan")
            self._transition(CoordinatorState.EXHAUSTED)
            self._transition(CoordinatorState.DONE)
            return MatchResultPayload(status=ResultStatus.NOT_FOUND, matched=False)
        return self.run(targets, files)

    def run(self, targets: frozenset[bytes], files: Iterable[str]) -> MatchResultPayload:
        """
        Stream the wordlists through the hash pool and test each digest.

        Returns:
            MatchResultPayload with status MATCHED, NOT_FOUND, or ERROR.
        """
        files = list(files)
        token = CancellationToken()
        pool = HashFanoutPool(
            self.algorithms,
            num_workers=self.workers,
            queue_size=self.queue_size,
            hasher_factory=self.hasher_factory,
            cancellation=token,
        )

        self._transition(CoordinatorState.STREAMING)
        logger.info(
            f"Scanning {len(files)} wordlist(s) with {pool.num_workers} worker(s), "
            f"algorithms={','.join(self.algorithms)}, targets={len(targets)}"
        )

        try:
            with ThreadPoolExecutor(max_workers=1, thread_name_prefix="wordlist-reader") as reader_executor:
                with pool:
                    reader = reader_executor.submit(self._feed, pool, files)
                    record = self._first_match(pool, targets, token)
                    if record is None:
                        pool.join()
                        reader.result()
        except Exception as e:
            return self._handle_run_error(e, pool)

        if record is not None:
            return self._handle_match(record, pool)

        self._transition(CoordinatorState.EXHAUSTED)
        logger.info(f"No match after {pool.submitted} candidate variants")
        self._transition(CoordinatorState.DONE)
        return MatchResultPayload(
            status=ResultStatus.NOT_FOUND,
            matched=False,
            candidates_submitted=pool.submitted,
        )

    def _feed(self, pool: HashFanoutPool, files: List[str]) -> None:
        """Reader task: submit every variant of every line, then close the pool."""
        try:
            with closing(numbered_lines_from_files(files)) as lines:
                for ref in lines:
                    for variant in variants(ref.text):
                        if not pool.submit(encode_candidate(variant), ref):
                            logger.debug(f"Reader stopped at {ref.path}:{ref.line_number}: run cancelled")
                            return
        finally:
            pool.close()

    @staticmethod
    def _first_match(
        pool: HashFanoutPool,
        targets: frozenset[bytes],
        token: CancellationToken,
    ) -> Optional[DigestRecord]:
        for record in pool.results():
            if record.digest in targets:
                token.cancel("match found")
                return record
        return None

    def _handle_match(self, record: DigestRecord, pool: HashFanoutPool) -> MatchResultPayload:
        self._transition(CoordinatorState.MATCHED)
        source = record.source
        logger.info(
            f"Match found via {record.algorithm} "
            f"(digest {record.digest.hex()[:DigestDisplay.PREFIX_LENGTH]}...)"
            + (f" at {source.path}:{source.line_number}" if source else "")
        )
        self._transition(CoordinatorState.DONE)
        return MatchResultPayload(
            status=ResultStatus.MATCHED,
            matched=True,
            source_file=source.path if source else None,
            line_number=source.line_number if source else None,
            matched_line=source.text if source else None,
            algorithm=record.algorithm,
            candidates_submitted=pool.submitted,
        )

    def _handle_run_error(self, error: Exception, pool: HashFanoutPool) -> MatchResultPayload:
        self._transition(CoordinatorState.ERROR)
        logger.error(f"Match run failed after {pool.submitted} candidate variants: {error}", exc_info=True)
        self._transition(CoordinatorState.DONE)
        return MatchResultPayload(
            status=ResultStatus.ERROR,
            matched=False,
            candidates_submitted=pool.submitted,
            error_message=str(error),
        )


def find_match(
    password: str,
    files: Iterable[str],
    algorithms: Optional[List[str]] = None,
    workers: Optional[int] = None,
) -> MatchResultPayload:
    """Check password against the wordlists and report where it matched."""
    return MatchCoordinator(algorithms=algorithms, workers=workers).find_match(password, files)


def matches(
    password: str,
    files: Iterable[str],
    algorithms: Optional[List[str]] = None,
    workers: Optional[int] = None,
) -> bool:
    """
    Return True if password, or one of its variants, is in any wordlist.

    Missing wordlists are skipped and do not make the check fail.

    Raises:
        UnknownAlgorithmError: If an algorithm id is not registered.
        HashCheckError: If the check could not run to completion.
    """
    result = find_match(password, files, algorithms=algorithms, workers=workers)
    if result.status == ResultStatus.ERROR:
        raise HashCheckError(result.error_message)
    return result.matched


def find_hashed_match(
    value: str,
    files: Iterable[str],
    algorithms: Optional[List[str]] = None,
    workers: Optional[int] = None,
) -> MatchResultPayload:
    """Check whether value is the hex digest of a wordlist line variant."""
    return MatchCoordinator(algorithms=algorithms, workers=workers).find_hashed_match(value, files)


def matches_hashed(
    value: str,
    files: Iterable[str],
    algorithms: Optional[List[str]] = None,
    workers: Optional[int] = None,
) -> bool:
    """
    Return True if value is the hex digest of a wordlist line variant.

    Raises:
        HashCheckError: If the check could not run to completion.
    """
    result = find_hashed_match(value, files, algorithms=algorithms, workers=workers)
    if result.status == ResultStatus.ERROR:
        raise HashCheckError(result.error_message)
    return result.matched
