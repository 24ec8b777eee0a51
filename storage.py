import threading

from errors import CounterUnavailable

# [Requirement] Counts live only in process memory.
# No persistence: a restart starts every resource back at zero.
DEFAULT_LOCK_TIMEOUT = 1.0


class ViewCounter:
    """
    Thread-safe map of resource key -> view count.

    One lock guards the whole map. The critical section is only
    "read-or-insert, increment, read back", so rendering happens outside it.
    """

    def __init__(self, lock_timeout=DEFAULT_LOCK_TIMEOUT):
        self._counts = {}
        self._lock = threading.Lock()
        self._lock_timeout = lock_timeout

    def _acquire(self):
        if not self._lock.acquire(timeout=self._lock_timeout):
            raise CounterUnavailable(f"lock not acquired within {self._lock_timeout}s")

    def increment_and_get(self, key):
        """
        Adds one view to `key` and returns the new count (first view -> 1).

        Raises CounterUnavailable when the lock is busy or the key cannot be
        stored. Either way the map is left as it was, so the next call works.
        """
        self._acquire()
        try:
            # A single dict store: it either happens or the map is untouched
            count = self._counts.get(key, 0) + 1
            self._counts[key] = count
            return count
        except Exception as exc:
            raise CounterUnavailable(f"increment failed: {exc!r}") from exc
        finally:
            self._lock.release()

    def get(self, key):
        """
        Current count without counting a view (0 if never seen).
        Not used by the routes, which always count; kept for tests and debugging.
        """
        self._acquire()
        try:
            return self._counts.get(key, 0)
        finally:
            self._lock.release()

    def stats(self, top=10):
        """
        Snapshot for the /stats endpoint.
        The copy is taken under the lock, sorting happens outside it.
        """
        self._acquire()
        try:
            snapshot = dict(self._counts)
        finally:
            self._lock.release()

        leaders = sorted(snapshot.items(), key=lambda item: (-item[1], item[0]))[:top]
        return {
            "resources_count": len(snapshot),
            "total_views": sum(snapshot.values()),
            "top_resources": [{"key": key, "views": views} for key, views in leaders],
        }

    def check(self):
        """Health check: Returns True if the counter lock can be taken."""
        try:
            self._acquire()
        except CounterUnavailable:
            return False
        self._lock.release()
        return True
