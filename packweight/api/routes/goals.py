import logging
from fastapi import APIRouter, Depends

from packweight.api.deps import get_user_repository
from packweight.domain.WeightGoal import WeightGoal
from packweight.infra.User_Repository import UserRepository
from packweight.utilities.constants import CANONICAL_UNIT
from packweight.utilities.units import convert_to_grams
from packweight.utilities.validators import WeightGoalInput

router = APIRouter(prefix="/api/user/goals", tags=["goals"])
logger = logging.getLogger(__name__)


def _goal_response(goal: WeightGoal):
    return {'unit': CANONICAL_UNIT, **goal.to_dict()}


@router.get("")
def get_goals(users: UserRepository = Depends(get_user_repository)):
    return _goal_response(users.get_goals())


@router.patch("")
def update_goals(payload: WeightGoalInput, users: UserRepository = Depends(get_user_repository)):
    """Update goals; omitted fields stay, explicit nulls clear, values are stored in grams."""
    goal = users.get_goals()
    provided = payload.model_fields_set
    for field in ('base_weight_goal', 'total_weight_goal'):
        if field not in provided:
            continue
        value = getattr(payload, field)
        setattr(goal, field, None if value is None else convert_to_grams(value, payload.unit))
    users.save_goals(goal)
    return _goal_response(goal)
