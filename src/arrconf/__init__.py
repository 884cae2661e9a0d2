"""arrconf - Declarative configuration for Lidarr settings resources."""

from .utils.logging import setup_logging, get_logger
from .utils.errors import ArrconfError

__version__ = "0.1.0"

__all__ = ["ArrconfError", "__version__"]

setup_logging()
logger = get_logger("arrconf")
