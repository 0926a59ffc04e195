"""Progress reporting for a generation run."""

import logging
from typing import Callable

from app.models import CrawlProgress, ProgressStatus

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[CrawlProgress], None]


class ProgressReporter:
    """Forwards progress events to an optional callback.

    The callback is invoked synchronously, in emission order. Errors raised
    by the callback are logged and dropped so they never reach the pipeline.
    """

    def __init__(self, callback: ProgressCallback | None = None):
        self.callback = callback

    def emit(
        self,
        status: ProgressStatus,
        message: str,
        current: int | None = None,
        total: int | None = None,
    ) -> None:
        """Build a progress event and hand it to the callback.

        Args:
            status: Pipeline phase (crawling, enhancing, complete, error)
            message: Human readable description
            current: Index of the item being processed
            total: Number of items in the batch
        """
        if self.callback is None:
            return

        event = CrawlProgress(status=status, message=message, current=current, total=total)
        try:
            self.callback(event)
        except Exception as e:
            logger.error(f"Progress callback failed for {status} event: {e}")
