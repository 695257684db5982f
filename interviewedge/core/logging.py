import logging
import sys


class ContextFormatter(logging.Formatter):
    """Custom formatter that prints the pipeline run and stage a record belongs to."""
    def format(self, record):
        # App startup and copilot turns without a run log with no run_id or stage
        if not hasattr(record, 'run_id'):
            record.run_id = '-'
        if not hasattr(record, 'stage'):
            record.stage = '-'
        return super().format(record)


def configure_logging(level: str = "INFO") -> None:
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(ContextFormatter(
        "%(asctime)s %(levelname)s %(name)s [run_id=%(run_id)s stage=%(stage)s] - %(message)s"
    ))
    # Unknown level names fall back to INFO
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        handlers=[handler],
    )
