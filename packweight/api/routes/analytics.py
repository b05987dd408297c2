from fastapi import APIRouter, Depends

from packweight.api.deps import get_gear_repository, get_pack_list_repository, get_user_repository
from packweight.infra.Gear_Repository import GearRepository
from packweight.infra.PackList_Repository import PackListRepository
from packweight.infra.User_Repository import UserRepository
from packweight.logic.reporting.analytics import build_dashboard_summary, build_library_analytics
from packweight.utilities.config import RECENT_ITEMS_LIMIT, TOP_ITEMS_LIMIT

router = APIRouter(prefix="/api", tags=["analytics"])


@router.get("/analytics")
def library_analytics(gear: GearRepository = Depends(get_gear_repository),
                      lists: PackListRepository = Depends(get_pack_list_repository),
                      users: UserRepository = Depends(get_user_repository)):
    """Library-wide analytics: distribution, ranking, trends, goal progress."""
    return build_library_analytics(
        gear.list_gear(), gear.list_categories(), lists.list_pack_lists(),
        goal=users.get_goals(), top_limit=TOP_ITEMS_LIMIT,
    )


@router.get("/dashboard")
def dashboard(gear: GearRepository = Depends(get_gear_repository),
              lists: PackListRepository = Depends(get_pack_list_repository)):
    return build_dashboard_summary(gear.list_gear(), lists.list_pack_lists(), recent=RECENT_ITEMS_LIMIT)
