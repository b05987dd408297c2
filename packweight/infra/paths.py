from pathlib import Path
from packweight.utilities.config import DATA_DIR

# Centralized file names for data files (single source of truth)
GEAR_FILENAME = 'gear.json'
CATEGORIES_FILENAME = 'categories.json'
PACK_LISTS_FILENAME = 'pack_lists.json'
USER_FILENAME = 'user.json'


def data_file(name: str, data_dir: Path = None) -> Path:
    return Path(data_dir or DATA_DIR) / name

__all__ = ['DATA_DIR', 'GEAR_FILENAME', 'CATEGORIES_FILENAME', 'PACK_LISTS_FILENAME', 'USER_FILENAME', 'data_file']
