"""FastAPI dependencies: repositories and the shared stats cache."""
from functools import lru_cache

from packweight.infra.Gear_Repository import GearRepository
from packweight.infra.PackList_Repository import PackListRepository
from packweight.infra.User_Repository import UserRepository
from packweight.logic.weight.cache import StatsCache
from packweight.utilities.config import DATA_DIR


def get_gear_repository() -> GearRepository:
    return GearRepository(DATA_DIR)


def get_pack_list_repository() -> PackListRepository:
    return PackListRepository(DATA_DIR)


def get_user_repository() -> UserRepository:
    return UserRepository(DATA_DIR)


@lru_cache(maxsize=1)
def get_stats_cache() -> StatsCache:
    return StatsCache()
