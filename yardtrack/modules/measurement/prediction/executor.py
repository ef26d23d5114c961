from concurrent.futures import ThreadPoolExecutor

from yardtrack.utils.logger import get_logger
from yardtrack.utils.settings.prediction import PredictionSettings

logger = get_logger(__name__)


def create_training_pool(
    settings: PredictionSettings | None = None,
) -> ThreadPoolExecutor:
    """Bounded pool that model fits are queued onto."""
    settings = settings or PredictionSettings()
    logger.info("Starting training pool", max_workers=settings.PREDICTION_MAX_WORKERS)
    return ThreadPoolExecutor(
        max_workers=settings.PREDICTION_MAX_WORKERS,
        thread_name_prefix="distance-fit",
    )


def shutdown_training_pool(pool: ThreadPoolExecutor | None) -> None:
    if pool is None:
        return
    pool.shutdown(wait=True, cancel_futures=True)
    logger.info("Training pool shut down")
