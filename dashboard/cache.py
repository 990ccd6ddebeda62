# dashboard/cache.py

import logging
import threading
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


class ViewCache:
    """
    Rendered listing views keyed by their path.

    Listing routes fill it; actions call ``invalidate`` after a committed
    mutation so the next visit recomputes the view from the store.

    Each path carries a generation that ``invalidate`` bumps. A listing reads
    the generation before querying and hands it to ``put``; a view computed
    before an invalidation is dropped instead of stored.
    """

    def __init__(self) -> None:
        self._views: Dict[str, Any] = {}
        self._generations: Dict[str, int] = {}
        self._lock = threading.Lock()

    def get(self, path: str) -> Optional[Any]:
        with self._lock:
            return self._views.get(path)

    def generation(self, path: str) -> int:
        with self._lock:
            return self._generations.get(path, 0)

    def put(self, path: str, value: Any, generation: int) -> bool:
        with self._lock:
            if self._generations.get(path, 0) != generation:
                logger.debug("Discarded stale view for %s", path)
                return False
            self._views[path] = value
            return True

    def invalidate(self, path: str) -> None:
        with self._lock:
            self._views.pop(path, None)
            self._generations[path] = self._generations.get(path, 0) + 1
        logger.debug("Invalidated cached view %s", path)
