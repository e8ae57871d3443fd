from .logging import logger, setup_opcplc_logging
from .path_utils import TEMP_DATA_DIR_NAME, ensure_temp_data_dir

__all__ = [
    "TEMP_DATA_DIR_NAME",
    "ensure_temp_data_dir",
    "logger",
    "setup_opcplc_logging",
]
