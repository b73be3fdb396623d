"""Per-user persistence of the questionnaire, the plan and completed exercises.

Writes are best effort and reads treat any failure as "nothing saved yet":
storage problems never interrupt the user.
"""

import logging
from typing import Any, Optional

from src.memory.kv_store import KeyValueStore
from src.models.user_profile import ProfileForm
from src.models.workout_log import CompletedExercises
from src.models.workout_plan import PlanResult
from src.utils.storage_helpers import (
    completed_from_list,
    form_from_dict,
    plan_from_dict,
    plan_to_dict,
)

logger = logging.getLogger(__name__)

KEY_PREFIX = "fitness_pro"
FORM_KEY = "form"
PLAN_KEY = "plan"
DONE_KEY = "done"


class PlanStore:
    """Snapshots of one user's data in a key-value store."""

    def __init__(self, store: KeyValueStore, user_id: str) -> None:
        self.store = store
        self.user_id = user_id

    def key(self, name: str) -> str:
        return f"{KEY_PREFIX}:{self.user_id}:{name}"

    def _save(self, name: str, value: Any) -> bool:
        try:
            self.store.put(self.key(name), value)
            return True
        except Exception as e:
            logger.warning(f"Failed to save {name} for {self.user_id}: {e}")
            return False

    def _load(self, name: str) -> Optional[Any]:
        try:
            return self.store.get(self.key(name))
        except Exception as e:
            logger.warning(f"Failed to load {name} for {self.user_id}: {e}")
            return None

    def save_form(self, form: ProfileForm) -> bool:
        return self._save(FORM_KEY, form.model_dump(mode="json"))

    def load_form(self) -> Optional[ProfileForm]:
        return form_from_dict(self._load(FORM_KEY))

    def save_plan(self, plan: PlanResult) -> bool:
        return self._save(PLAN_KEY, plan_to_dict(plan))

    def load_plan(self) -> Optional[PlanResult]:
        return plan_from_dict(self._load(PLAN_KEY))

    def save_completed(self, completed: CompletedExercises) -> bool:
        return self._save(DONE_KEY, completed.to_list())

    def load_completed(self) -> CompletedExercises:
        return completed_from_list(self._load(DONE_KEY))

    def clear(self) -> None:
        """Forget everything saved for this user."""
        for name in (FORM_KEY, PLAN_KEY, DONE_KEY):
            try:
                self.store.delete(self.key(name))
            except Exception as e:
                logger.warning(f"Failed to delete {name} for {self.user_id}: {e}")
        logger.info(f"Cleared saved data for {self.user_id}")
