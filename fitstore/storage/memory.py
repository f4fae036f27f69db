# -*- coding: utf-8 -*-
"""In-memory storage.

Eight independent collections, each a dict keyed by an integer id with its
own counter. Records are kept as plain dicts owned by the store; every read
normalizes a copy and returns a fresh model, so callers never hold a
reference into the store. A single re-entrant lock guards all collections.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional

from ..articles.models import Article, ArticleCreate
from ..articles.seed import SAMPLE_ARTICLES
from ..diet.models import DietPlan, DietPlanCreate, Meal, MealCreate
from ..errors import NotFoundError
from ..goals.models import Goal, GoalCreate, goal_sort_key
from ..health.bmi import compute_bmi
from ..health.models import HealthMetric, HealthMetricCreate
from ..users.models import User, UserCreate
from ..workouts.models import Exercise, ExerciseCreate, Workout, WorkoutCreate
from ..workouts.ordering import current_workout, sort_workouts, upcoming_workouts
from .base import Storage
from .normalize import (
    normalize_article,
    normalize_goal,
    normalize_health_metric,
    normalize_record,
    normalize_user,
    normalize_workout,
)

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class _Collection:
    name: str
    records: Dict[int, Dict[str, Any]] = field(default_factory=dict)
    next_id: int = 1

    def insert(self, fields: Dict[str, Any], created_at: datetime) -> Dict[str, Any]:
        record_id = self.next_id
        self.next_id += 1
        record = {**fields, "id": record_id, "created_at": created_at}
        self.records[record_id] = record
        logger.debug("Created %s id=%s", self.name, record_id)
        return dict(record)

    def get(self, record_id: int) -> Optional[Dict[str, Any]]:
        record = self.records.get(record_id)
        return dict(record) if record is not None else None

    def where(self, key: str, value: Any) -> List[Dict[str, Any]]:
        return [dict(r) for r in self.records.values() if r.get(key) == value]


def _newest_first(records: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    # Ids break created_at ties, so records created in the same instant keep creation order.
    return sorted(records, key=lambda r: (r["created_at"], r["id"]), reverse=True)


class MemStorage(Storage):
    def __init__(
        self,
        *,
        clock: Optional[Clock] = None,
        seed_articles: bool = True,
        articles_limit: int = 10,
        upcoming_limit: int = 5,
    ) -> None:
        self._clock: Clock = clock or _utc_now
        self._articles_limit = articles_limit
        self._upcoming_limit = upcoming_limit
        self._lock = threading.RLock()

        self._users = _Collection("user")
        self._health_metrics = _Collection("health_metric")
        self._diet_plans = _Collection("diet_plan")
        self._meals = _Collection("meal")
        self._workouts = _Collection("workout")
        self._exercises = _Collection("exercise")
        self._articles = _Collection("article")
        self._goals = _Collection("goal")

        if seed_articles:
            self._seed_articles()

    def _now(self) -> datetime:
        return self._clock()

    # ---- Users ----

    async def get_user(self, user_id: int) -> Optional[User]:
        with self._lock:
            record = self._users.get(user_id)
        return User.model_validate(normalize_user(record)) if record else None

    async def get_user_by_username(self, username: str) -> Optional[User]:
        with self._lock:
            matches = self._users.where("username", username)
        return User.model_validate(normalize_user(matches[0])) if matches else None

    async def create_user(self, user: UserCreate) -> User:
        with self._lock:
            record = self._users.insert(user.model_dump(), self._now())
        return User.model_validate(normalize_user(record))

    # ---- Health metrics ----

    def _health_metrics_for(self, user_id: int) -> List[Dict[str, Any]]:
        with self._lock:
            records = [normalize_health_metric(r) for r in self._health_metrics.where("user_id", user_id)]
        records.sort(key=lambda r: r["recorded_date"], reverse=True)
        return records

    async def get_health_metrics(self, user_id: int) -> List[HealthMetric]:
        return [HealthMetric.model_validate(r) for r in self._health_metrics_for(user_id)]

    async def get_latest_health_metric(self, user_id: int) -> Optional[HealthMetric]:
        records = self._health_metrics_for(user_id)
        return HealthMetric.model_validate(records[0]) if records else None

    async def create_health_metric(self, metric: HealthMetricCreate) -> HealthMetric:
        bmi = compute_bmi(metric.weight, metric.height)
        with self._lock:
            now = self._now()
            fields = metric.model_dump()
            fields["bmi"] = bmi
            fields["recorded_date"] = metric.recorded_date or now
            record = self._health_metrics.insert(fields, now)
        return HealthMetric.model_validate(normalize_health_metric(record))

    # ---- Diet plans ----

    def _diet_plans_for(self, user_id: int) -> List[Dict[str, Any]]:
        with self._lock:
            records = [normalize_record(r) for r in self._diet_plans.where("user_id", user_id)]
        return _newest_first(records)

    async def get_diet_plans(self, user_id: int) -> List[DietPlan]:
        return [DietPlan.model_validate(r) for r in self._diet_plans_for(user_id)]

    async def get_current_diet_plan(self, user_id: int) -> Optional[DietPlan]:
        records = self._diet_plans_for(user_id)
        return DietPlan.model_validate(records[0]) if records else None

    async def create_diet_plan(self, plan: DietPlanCreate) -> DietPlan:
        with self._lock:
            record = self._diet_plans.insert(plan.model_dump(), self._now())
        return DietPlan.model_validate(normalize_record(record))

    # ---- Meals ----

    async def get_meals(self, diet_plan_id: int) -> List[Meal]:
        with self._lock:
            records = self._meals.where("diet_plan_id", diet_plan_id)
        return [Meal.model_validate(normalize_record(r)) for r in records]

    async def create_meal(self, meal: MealCreate) -> Meal:
        with self._lock:
            record = self._meals.insert(meal.model_dump(), self._now())
        return Meal.model_validate(normalize_record(record))

    # ---- Workouts ----

    def _workouts_for(self, user_id: int) -> List[Dict[str, Any]]:
        with self._lock:
            return [normalize_workout(r) for r in self._workouts.where("user_id", user_id)]

    async def get_workouts(self, user_id: int) -> List[Workout]:
        return [Workout.model_validate(r) for r in sort_workouts(self._workouts_for(user_id))]

    async def get_current_workout(self, user_id: int) -> Optional[Workout]:
        record = current_workout(self._workouts_for(user_id), self._now().date())
        return Workout.model_validate(record) if record else None

    async def get_upcoming_workouts(self, user_id: int, limit: Optional[int] = None) -> List[Workout]:
        records = upcoming_workouts(
            self._workouts_for(user_id),
            self._now().date(),
            self._upcoming_limit if limit is None else limit,
        )
        return [Workout.model_validate(r) for r in records]

    async def create_workout(self, workout: WorkoutCreate) -> Workout:
        with self._lock:
            record = self._workouts.insert(workout.model_dump(), self._now())
        return Workout.model_validate(normalize_workout(record))

    # ---- Exercises ----

    async def get_exercises(self, workout_id: int) -> List[Exercise]:
        with self._lock:
            records = self._exercises.where("workout_id", workout_id)
        return [Exercise.model_validate(normalize_record(r)) for r in records]

    async def create_exercise(self, exercise: ExerciseCreate) -> Exercise:
        with self._lock:
            record = self._exercises.insert(exercise.model_dump(), self._now())
        return Exercise.model_validate(normalize_record(record))

    # ---- Articles ----

    async def get_articles(self, limit: Optional[int] = None, category: Optional[str] = None) -> List[Article]:
        with self._lock:
            records = [normalize_article(r) for r in self._articles.records.values()]
        if category:
            records = [r for r in records if r.get("category") == category]
        records = _newest_first(records)[: self._articles_limit if limit is None else limit]
        return [Article.model_validate(r) for r in records]

    async def get_article(self, article_id: int) -> Optional[Article]:
        with self._lock:
            record = self._articles.get(article_id)
        return Article.model_validate(normalize_article(record)) if record else None

    def _create_article(self, article: ArticleCreate) -> Dict[str, Any]:
        with self._lock:
            return self._articles.insert(article.model_dump(), self._now())

    async def create_article(self, article: ArticleCreate) -> Article:
        return Article.model_validate(normalize_article(self._create_article(article)))

    def _seed_articles(self) -> None:
        for article in SAMPLE_ARTICLES:
            self._create_article(article)
        logger.info("Seeded %d sample articles", len(SAMPLE_ARTICLES))

    # ---- Goals ----

    async def get_goals(self, user_id: int) -> List[Goal]:
        with self._lock:
            records = [normalize_goal(r) for r in self._goals.where("user_id", user_id)]
        records.sort(key=goal_sort_key)
        return [Goal.model_validate(r) for r in records]

    async def get_goal(self, goal_id: int) -> Optional[Goal]:
        with self._lock:
            record = self._goals.get(goal_id)
        return Goal.model_validate(normalize_goal(record)) if record else None

    async def create_goal(self, goal: GoalCreate) -> Goal:
        with self._lock:
            record = self._goals.insert(goal.model_dump(), self._now())
        return Goal.model_validate(normalize_goal(record))

    def _update_goal(self, goal_id: int, **changes: Any) -> Goal:
        with self._lock:
            record = self._goals.records.get(goal_id)
            if record is None:
                logger.warning("Goal update rejected, id=%s does not exist", goal_id)
                raise NotFoundError("Goal", goal_id)
            updated = {**record, **changes}
            self._goals.records[goal_id] = updated
        return Goal.model_validate(normalize_goal(updated))

    async def update_goal_progress(self, goal_id: int, current_value: float) -> Goal:
        return self._update_goal(goal_id, current_value=current_value)

    async def mark_goal_complete(self, goal_id: int) -> Goal:
        return self._update_goal(goal_id, completed=True)
