"""User settings repository: weight goals stored in user.json."""
import logging
from pathlib import Path
from typing import Optional

from packweight.domain.WeightGoal import WeightGoal
from packweight.infra.json_store import read_json, write_json
from packweight.infra.paths import USER_FILENAME, data_file

logger = logging.getLogger(__name__)


class UserRepository:
    def __init__(self, data_dir: Optional[Path] = None):
        self.user_file = data_file(USER_FILENAME, data_dir)

    def get_goals(self) -> WeightGoal:
        user = read_json(self.user_file, {})
        return WeightGoal.from_dict(user.get('goals') or {})

    def save_goals(self, goal: WeightGoal) -> WeightGoal:
        user = read_json(self.user_file, {})
        user['goals'] = goal.to_dict()
        write_json(self.user_file, user)
        logger.info("Weight goals updated: %s", goal)
        return goal
