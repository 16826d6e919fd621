"""Image lifecycle service: wait for images to become available or go away."""

import time
from typing import Callable, Optional

from config.schemas.timeouts_schema import TimeoutsConfig
from domain.base.ports.logging_port import LoggingPort, NullLoggingPort
from domain.base.ports.resource_port import ImageRefreshPort
from domain.image.aggregate import Image
from infrastructure.resilience.convergence import ConvergenceCell, image_available, image_deleted
from infrastructure.resilience.retry import BoundedRetryPoller


class ImageLifecycleService:
    """
    Block until images reach AVAILABLE or DELETED.

    Snapshots are refreshed through ``ImageRefreshPort`` within the image
    timeouts of :class:`TimeoutsConfig`. An image landing in a fatal status
    raises ``InvalidStateError``.
    """

    def __init__(
        self,
        images: ImageRefreshPort,
        timeouts: Optional[TimeoutsConfig] = None,
        logger: Optional[LoggingPort] = None,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._images = images
        self._timeouts = timeouts or TimeoutsConfig()
        self._logger = logger or NullLoggingPort()
        self._clock = clock
        self._sleep = sleep

    def _poller(self, timeout: float) -> BoundedRetryPoller:
        return BoundedRetryPoller(
            timeout,
            clock=self._clock,
            sleep=self._sleep,
            logger=self._logger,
            **self._timeouts.polling(),
        )

    def await_available(self, image_id: str, image: Optional[Image] = None) -> Optional[Image]:
        """
        Wait until an image is AVAILABLE.

        Args:
            image_id: Image to watch
            image: Snapshot already known to the caller, if any

        Returns:
            The available image, or None if it did not become available in time

        Raises:
            InvalidStateError: If the image reaches ERROR or DELETED
        """
        self._logger.debug(">> awaiting image(%s) available", image_id)
        cell = ConvergenceCell(image)
        poller = image_available(image_id, self._images.get_image, cell, self._logger)
        converged = self._poller(self._timeouts.image_available).apply(poller.check)
        self._logger.debug("<< image(%s) available(%s)", image_id, converged)
        return cell.get() if converged else None

    def await_deleted(self, image_id: str) -> bool:
        """
        Wait until an image is DELETED or no longer listed.

        Raises:
            InvalidStateError: If the image reaches ERROR
        """
        self._logger.debug(">> awaiting image(%s) deleted", image_id)
        poller = image_deleted(image_id, self._images.get_image, logger=self._logger)
        converged = self._poller(self._timeouts.image_deleted).apply(poller.check)
        self._logger.debug("<< image(%s) deleted(%s)", image_id, converged)
        return converged
