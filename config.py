from pathlib import Path
import logging
import os

# Define project root (where this file is located)
ROOT_DIR = Path(__file__).parent.resolve()

# Define output directory for exported projection files
OUTPUT_DIR = Path(os.getenv("IMPACT_OUTPUT_DIR", ROOT_DIR / "exports"))

# Dashboard settings
PAGE_TITLE = "Auto Supply-Chain Impact Dashboard"
MAP_HEIGHT = int(os.getenv("IMPACT_MAP_HEIGHT", "520"))
LOG_LEVEL = os.getenv("IMPACT_LOG_LEVEL", "INFO").strip().upper()

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def get_output_path(filename: str) -> Path:
    """
    Resolve an export file inside OUTPUT_DIR.

    The directory is created on first use so that importing this module
    has no filesystem side effects.
    """
    OUTPUT_DIR.mkdir(parents=True, exist_ok=True)
    return OUTPUT_DIR / filename


def configure_logging() -> None:
    """Configure root logging once for the dashboard process."""
    logging.basicConfig(
        level=getattr(logging, LOG_LEVEL, logging.INFO),
        format=LOG_FORMAT,
    )
