# -*- coding: utf-8 -*-
"""Storage contract.

All operations are coroutines so a remote or durable backend can replace
the in-memory one without touching call sites. Single-entity getters return
``None`` when nothing matches; list operations return a (possibly empty)
list and never check that the owner exists.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional

from ..articles.models import Article, ArticleCreate
from ..diet.models import DietPlan, DietPlanCreate, Meal, MealCreate
from ..goals.models import Goal, GoalCreate
from ..health.models import HealthMetric, HealthMetricCreate
from ..users.models import User, UserCreate
from ..workouts.models import Exercise, ExerciseCreate, Workout, WorkoutCreate


class Storage(ABC):
    # Users
    @abstractmethod
    async def get_user(self, user_id: int) -> Optional[User]: ...

    @abstractmethod
    async def get_user_by_username(self, username: str) -> Optional[User]: ...

    @abstractmethod
    async def create_user(self, user: UserCreate) -> User: ...

    # Health metrics
    @abstractmethod
    async def get_health_metrics(self, user_id: int) -> List[HealthMetric]: ...

    @abstractmethod
    async def get_latest_health_metric(self, user_id: int) -> Optional[HealthMetric]: ...

    @abstractmethod
    async def create_health_metric(self, metric: HealthMetricCreate) -> HealthMetric: ...

    # Diet plans
    @abstractmethod
    async def get_diet_plans(self, user_id: int) -> List[DietPlan]: ...

    @abstractmethod
    async def get_current_diet_plan(self, user_id: int) -> Optional[DietPlan]: ...

    @abstractmethod
    async def create_diet_plan(self, plan: DietPlanCreate) -> DietPlan: ...

    # Meals
    @abstractmethod
    async def get_meals(self, diet_plan_id: int) -> List[Meal]: ...

    @abstractmethod
    async def create_meal(self, meal: MealCreate) -> Meal: ...

    # Workouts
    @abstractmethod
    async def get_workouts(self, user_id: int) -> List[Workout]: ...

    @abstractmethod
    async def get_current_workout(self, user_id: int) -> Optional[Workout]: ...

    @abstractmethod
    async def get_upcoming_workouts(self, user_id: int, limit: Optional[int] = None) -> List[Workout]: ...

    @abstractmethod
    async def create_workout(self, workout: WorkoutCreate) -> Workout: ...

    # Exercises
    @abstractmethod
    async def get_exercises(self, workout_id: int) -> List[Exercise]: ...

    @abstractmethod
    async def create_exercise(self, exercise: ExerciseCreate) -> Exercise: ...

    # Articles
    @abstractmethod
    async def get_articles(self, limit: Optional[int] = None, category: Optional[str] = None) -> List[Article]: ...

    @abstractmethod
    async def get_article(self, article_id: int) -> Optional[Article]: ...

    @abstractmethod
    async def create_article(self, article: ArticleCreate) -> Article: ...

    # Goals
    @abstractmethod
    async def get_goals(self, user_id: int) -> List[Goal]: ...

    @abstractmethod
    async def get_goal(self, goal_id: int) -> Optional[Goal]: ...

    @abstractmethod
    async def create_goal(self, goal: GoalCreate) -> Goal: ...

    @abstractmethod
    async def update_goal_progress(self, goal_id: int, current_value: float) -> Goal:
        """Replace ``current_value``; raises NotFoundError for an unknown id."""

    @abstractmethod
    async def mark_goal_complete(self, goal_id: int) -> Goal:
        """Set ``completed``; raises NotFoundError for an unknown id."""
