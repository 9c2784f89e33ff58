from typing import Any, Dict, List

from core.entities import ExerciseEntity, LogQuery
from core.interfaces import DatabaseRepository, ExerciseRepositoryInterface
from utilities.monitoring import MonitoringFactory


class ExerciseRepository(ExerciseRepositoryInterface):
    """
    Repository for exercise records.

    Exercises are stored per user under ``exercises/<user_id>`` with the date
    as an ISO string, so ordering by ``date`` is chronological and date range
    filters run in the store.
    """

    def __init__(self, database: DatabaseRepository):
        self.database = database
        self.collection = "exercises"
        self.logger = MonitoringFactory.get_logger("exercise-repository")

    def _path(self, user_id: str) -> str:
        return f"{self.collection}/{user_id}"

    async def create_exercise(self, exercise: ExerciseEntity) -> ExerciseEntity:
        """
        Create a new exercise for its user. The store generates the ID.
        """
        try:
            exercise_id = await self.database.push(
                self._path(exercise.user_id), exercise.to_document()
            )
            return exercise.model_copy(update={"id": exercise_id})
        except Exception as e:
            self.logger.error(f"Error creating exercise for user {exercise.user_id}: {e}")
            raise

    async def list_exercises(self, user_id: str, query: LogQuery) -> List[Dict[str, Any]]:
        """
        List a user's exercise records matching the query, in date order.
        """
        try:
            result = await self.database.query(
                self._path(user_id),
                order_by="date",
                limit=query.limit,
                start_at=query.date_from.isoformat() if query.date_from else None,
                end_at=query.date_to.isoformat() if query.date_to else None,
            )
        except Exception as e:
            self.logger.error(f"Error listing exercises for user {user_id}: {e}")
            raise

        return [
            {**record, "id": exercise_id}
            for exercise_id, record in result.items()
            if isinstance(record, dict)
        ]
