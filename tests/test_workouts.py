# -*- coding: utf-8 -*-

from __future__ import annotations

import unittest
from datetime import date, timedelta

from fake_clock import START, FakeClock

from fitstore.storage import MemStorage
from fitstore.workouts.models import ExerciseCreate, WorkoutCreate
from fitstore.workouts.ordering import compare_workouts

TODAY = START.date()


def _workout(name: str, scheduled: date | None = None, user_id: int = 1) -> WorkoutCreate:
    return WorkoutCreate(user_id=user_id, name=name, duration=45, scheduled_date=scheduled)


class TestCompareWorkouts(unittest.TestCase):
    def _rec(self, scheduled: date | None, created_offset: int) -> dict:
        return {"scheduled_date": scheduled, "created_at": START + timedelta(seconds=created_offset)}

    def test_both_scheduled_orders_by_date_ascending(self) -> None:
        early = self._rec(TODAY, 10)
        late = self._rec(TODAY + timedelta(days=1), 0)
        self.assertLess(compare_workouts(early, late), 0)
        self.assertGreater(compare_workouts(late, early), 0)

    def test_both_scheduled_same_date_is_equal(self) -> None:
        a = self._rec(TODAY, 0)
        b = self._rec(TODAY, 5)
        self.assertEqual(compare_workouts(a, b), 0)

    def test_one_unscheduled_falls_back_to_newest_first(self) -> None:
        scheduled_old = self._rec(TODAY, 0)
        unscheduled_new = self._rec(None, 5)
        self.assertLess(compare_workouts(unscheduled_new, scheduled_old), 0)
        self.assertGreater(compare_workouts(scheduled_old, unscheduled_new), 0)

    def test_both_unscheduled_newest_first(self) -> None:
        older = self._rec(None, 0)
        newer = self._rec(None, 5)
        self.assertLess(compare_workouts(newer, older), 0)
        self.assertEqual(compare_workouts(older, dict(older)), 0)

    def test_same_instant_falls_back_to_higher_id_first(self) -> None:
        first = {"id": 1, "scheduled_date": None, "created_at": START}
        second = {"id": 2, "scheduled_date": None, "created_at": START}
        self.assertLess(compare_workouts(second, first), 0)
        self.assertGreater(compare_workouts(first, second), 0)


class TestWorkouts(unittest.IsolatedAsyncioTestCase):
    def setUp(self) -> None:
        self.storage = MemStorage(clock=FakeClock(), seed_articles=False)

    async def test_scheduled_workouts_sort_chronologically(self) -> None:
        for offset in (3, 1, 2):
            await self.storage.create_workout(_workout(f"d{offset}", TODAY + timedelta(days=offset)))
        workouts = await self.storage.get_workouts(1)
        self.assertEqual([w.name for w in workouts], ["d1", "d2", "d3"])

    async def test_unscheduled_workouts_newest_first(self) -> None:
        for name in ("first", "second", "third"):
            await self.storage.create_workout(_workout(name))
        workouts = await self.storage.get_workouts(1)
        self.assertEqual([w.name for w in workouts], ["third", "second", "first"])

    async def test_unscheduled_same_instant_newest_id_first(self) -> None:
        storage = MemStorage(clock=lambda: START, seed_articles=False)
        for name in ("first", "second", "third"):
            await storage.create_workout(_workout(name))
        workouts = await storage.get_workouts(1)
        self.assertEqual([w.name for w in workouts], ["third", "second", "first"])

    async def test_mixed_ordering_uses_pairwise_comparator(self) -> None:
        await self.storage.create_workout(_workout("A", TODAY - timedelta(days=1)))
        await self.storage.create_workout(_workout("B"))
        await self.storage.create_workout(_workout("C", TODAY + timedelta(days=1)))

        workouts = await self.storage.get_workouts(1)
        # B is newer than A and C is newer than B, so the insertion order is
        # one descending run and comes back reversed; A and C alone would be
        # ordered by date.
        self.assertEqual([w.name for w in workouts], ["C", "B", "A"])

    async def test_current_workout_prefers_today(self) -> None:
        await self.storage.create_workout(_workout("tomorrow", TODAY + timedelta(days=1)))
        await self.storage.create_workout(_workout("today", TODAY))
        await self.storage.create_workout(_workout("yesterday", TODAY - timedelta(days=1)))
        current = await self.storage.get_current_workout(1)
        self.assertEqual(current.name, "today")

    async def test_current_workout_falls_back_to_first(self) -> None:
        await self.storage.create_workout(_workout("next week", TODAY + timedelta(days=7)))
        await self.storage.create_workout(_workout("tomorrow", TODAY + timedelta(days=1)))
        current = await self.storage.get_current_workout(1)
        self.assertEqual(current.name, "tomorrow")

    async def test_current_workout_none(self) -> None:
        self.assertIsNone(await self.storage.get_current_workout(1))

    async def test_upcoming_excludes_unscheduled_today_and_past(self) -> None:
        await self.storage.create_workout(_workout("past", TODAY - timedelta(days=1)))
        await self.storage.create_workout(_workout("today", TODAY))
        await self.storage.create_workout(_workout("in three", TODAY + timedelta(days=3)))
        await self.storage.create_workout(_workout("tomorrow", TODAY + timedelta(days=1)))
        await self.storage.create_workout(_workout("unscheduled"))
        await self.storage.create_workout(_workout("someone else", TODAY + timedelta(days=2), user_id=2))

        upcoming = await self.storage.get_upcoming_workouts(1)
        self.assertEqual([w.name for w in upcoming], ["tomorrow", "in three"])

    async def test_upcoming_limit(self) -> None:
        for offset in range(7, 0, -1):
            await self.storage.create_workout(_workout(f"d{offset}", TODAY + timedelta(days=offset)))

        default = await self.storage.get_upcoming_workouts(1)
        self.assertEqual([w.name for w in default], ["d1", "d2", "d3", "d4", "d5"])

        two = await self.storage.get_upcoming_workouts(1, limit=2)
        self.assertEqual([w.name for w in two], ["d1", "d2"])

    async def test_unknown_user(self) -> None:
        self.assertEqual(await self.storage.get_workouts(9), [])
        self.assertEqual(await self.storage.get_upcoming_workouts(9), [])


class TestExercises(unittest.IsolatedAsyncioTestCase):
    async def test_exercises_filtered_by_workout(self) -> None:
        storage = MemStorage(clock=FakeClock(), seed_articles=False)
        legs = await storage.create_workout(_workout("legs"))
        arms = await storage.create_workout(_workout("arms"))
        await storage.create_exercise(ExerciseCreate(workout_id=legs.id, name="squat", sets=5, reps=5, weight=100))
        await storage.create_exercise(ExerciseCreate(workout_id=arms.id, name="curl", sets=3, reps=12))
        await storage.create_exercise(ExerciseCreate(workout_id=legs.id, name="lunge", sets=3, reps=10))

        exercises = await storage.get_exercises(legs.id)
        self.assertEqual([e.name for e in exercises], ["squat", "lunge"])
        self.assertEqual([e.id for e in exercises], [1, 3])
        self.assertEqual(await storage.get_exercises(99), [])


if __name__ == "__main__":
    unittest.main()
