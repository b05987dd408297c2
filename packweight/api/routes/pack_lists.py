import logging
from fastapi import APIRouter, Depends, HTTPException

from packweight.api.deps import get_pack_list_repository, get_stats_cache, get_user_repository
from packweight.domain.PackList import PackList
from packweight.infra.PackList_Repository import PackListRepository
from packweight.infra.User_Repository import UserRepository
from packweight.logic.reporting.analytics import build_list_detail, build_list_summary
from packweight.logic.weight.cache import StatsCache, apply_optimistic_toggle
from packweight.utilities.config import TOP_ITEMS_LIMIT
from packweight.utilities.validators import PackListItemUpdateInput

router = APIRouter(prefix="/api/pack-lists", tags=["pack-lists"])
logger = logging.getLogger(__name__)


def _require_list(repo: PackListRepository, pack_list_id: str) -> PackList:
    pack_list = repo.get_pack_list(pack_list_id)
    if pack_list is None:
        raise HTTPException(status_code=404, detail='Pack list not found')
    return pack_list


@router.get("")
def list_pack_lists(repo: PackListRepository = Depends(get_pack_list_repository),
                    cache: StatsCache = Depends(get_stats_cache)):
    pack_lists = repo.list_pack_lists()
    items = [build_list_summary(pl, cache.get(pl)) for pl in pack_lists]
    return {'pack_lists': items, 'count': len(items)}


@router.get("/{pack_list_id}/summary")
def pack_list_summary(pack_list_id: str,
                      repo: PackListRepository = Depends(get_pack_list_repository),
                      cache: StatsCache = Depends(get_stats_cache)):
    pack_list = _require_list(repo, pack_list_id)
    return build_list_summary(pack_list, cache.get(pack_list))


@router.get("/{pack_list_id}")
def pack_list_detail(pack_list_id: str,
                     repo: PackListRepository = Depends(get_pack_list_repository),
                     users: UserRepository = Depends(get_user_repository)):
    pack_list = _require_list(repo, pack_list_id)
    return build_list_detail(pack_list, goal=users.get_goals(), top_limit=TOP_ITEMS_LIMIT)


@router.patch("/{pack_list_id}/items/{item_id}")
def update_pack_list_item(pack_list_id: str, item_id: str, payload: PackListItemUpdateInput,
                          repo: PackListRepository = Depends(get_pack_list_repository),
                          cache: StatsCache = Depends(get_stats_cache)):
    """Update one row's quantity / inclusion and return freshly computed stats.

    ``provisional_stats`` is the optimistic patch of the previous stats (what a client
    may already be showing); ``stats`` is the authoritative recomputation.
    """
    pack_list = _require_list(repo, pack_list_id)
    item = pack_list.find_item(item_id)
    if item is None:
        raise HTTPException(status_code=404, detail='Pack list item not found')

    previous = cache.get(pack_list)
    provisional = None
    if payload.is_included is not None and payload.quantity is None:
        provisional = apply_optimistic_toggle(previous, item, payload.is_included)

    if payload.quantity is not None:
        item.quantity = payload.quantity
    if payload.is_included is not None:
        item.is_included = payload.is_included
    logger.info("Pack list %s item %s updated: %s", pack_list_id, item_id, payload.model_dump(exclude_none=True))
    repo.save_pack_list(pack_list, reason="item_updated")

    fresh = _require_list(repo, pack_list_id)
    result = build_list_summary(fresh, cache.get(fresh))
    result['provisional_stats'] = provisional.to_dict() if provisional else None
    return result
