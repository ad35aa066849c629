"""Pool of unique ids assigned to created customers.

The pool starts from a list of reserved ids and expands on demand by
drawing fresh candidates from an IdSourcePort.
"""

import logging
import threading
from collections.abc import Iterable

from .errors import IdPoolExhaustedError
from .ports import IdSourcePort

logger = logging.getLogger(__name__)

DEFAULT_BATCH_SIZE = 25
CUSTOMER_ID_SEEDS = (892474, 643270, 286516, 412396, 456454, 651286)


class IdPool:
    """Dispenses ids that are never repeated over the pool's lifetime.

    Ids are handed out in pool order. When every id has been dispensed,
    the pool grows by batch_size ids drawn from the source. Each drawn
    candidate is checked against every id ever added to the pool, not
    only the dispensed ones.

    next() holds a lock across the bounds check, expansion and cursor
    advance, so a pool may be shared between threads.
    """

    def __init__(
        self,
        source: IdSourcePort,
        initial: Iterable[int] | None = None,
        batch_size: int = DEFAULT_BATCH_SIZE,
        max_attempts_factor: int = 100,
    ):
        if batch_size <= 0:
            raise ValueError(f"batch_size must be positive, got {batch_size}")
        self.source = source
        self.batch_size = batch_size
        self.max_attempts_factor = max_attempts_factor
        self._ids: list[int] = []
        self._known: set[int] = set()
        self._current = 0
        self._lock = threading.Lock()
        for id_ in initial or ():
            self._append(id_)

    @property
    def size(self) -> int:
        """Number of ids added to the pool so far."""
        return len(self._ids)

    @property
    def dispensed(self) -> int:
        return self._current

    @property
    def remaining(self) -> int:
        return len(self._ids) - self._current

    def next(self) -> int:
        """Return the next id, expanding the pool if it is exhausted.

        Raises:
            IdPoolExhaustedError: If the source cannot produce enough
                fresh ids.
        """
        with self._lock:
            if self._current >= len(self._ids):
                self._expand(self.batch_size)
            id_ = self._ids[self._current]
            self._current += 1
            return id_

    def _append(self, id_: int) -> bool:
        if id_ <= 0:
            raise ValueError(f"pool ids must be positive, got {id_}")
        if id_ in self._known:
            return False
        self._known.add(id_)
        self._ids.append(id_)
        return True

    def _expand(self, count: int) -> None:
        added = 0
        attempts = 0
        max_attempts = count * self.max_attempts_factor
        while added < count:
            if attempts >= max_attempts:
                logger.error(
                    f"Id source produced only {added} of {count} fresh ids "
                    f"in {attempts} draws"
                )
                raise IdPoolExhaustedError(
                    f"could not draw {count} fresh ids after {attempts} attempts"
                )
            attempts += 1
            if self._append(self.source.draw()):
                added += 1
        logger.debug(f"Expanded id pool by {added} ids to {len(self._ids)}")
