"""Sample housework data for seeding and tests"""
import random
from typing import Any, Dict, List, Optional

from app.features.houseworks.domain import HouseworkRecord, fillable_fields
from app.features.houseworks.ports import HouseworkRepositoryBase

# サンプルの家事データ
SAMPLE_TASK_NAMES: List[str] = [
    "Wash dishes",
    "Take out the trash",
    "Vacuum the living room",
    "Do the laundry",
    "Clean the bathroom",
    "Water the plants",
    "Cook dinner",
    "Fold clothes",
]

SAMPLE_TERMS: List[str] = ["daily", "weekly", "biweekly", "monthly"]

SAMPLE_POINTS: List[str] = ["1", "2", "3", "5", "8"]


class HouseworkFactory:
    """
    Builds housework records filled with plausible sample values.

    make() returns unsaved records; create() persists through a repository.
    """

    def __init__(self, seed: Optional[int] = None):
        self._random = random.Random(seed)

    def definition(self) -> Dict[str, Any]:
        return {
            "task_name": self._random.choice(SAMPLE_TASK_NAMES),
            "term": self._random.choice(SAMPLE_TERMS),
            "point": self._random.choice(SAMPLE_POINTS),
        }

    def make(self, **overrides: Any) -> HouseworkRecord:
        """Unsaved record; overrides outside task_name/term/point are ignored"""
        return HouseworkRecord(**{**self.definition(), **fillable_fields(overrides)})

    def make_many(self, count: int, **overrides: Any) -> List[HouseworkRecord]:
        return [self.make(**overrides) for _ in range(count)]

    async def create(self, repository: HouseworkRepositoryBase, **overrides: Any) -> HouseworkRecord:
        return await repository.save(self.make(**overrides))

    async def create_many(
        self,
        repository: HouseworkRepositoryBase,
        count: int,
        **overrides: Any,
    ) -> List[HouseworkRecord]:
        return [await self.create(repository, **overrides) for _ in range(count)]
