"""Tests for the task service: range listing, toggling, and edits."""

from datetime import date

import pytest

from goalsmanager.core.errors import ConflictError, NotFoundError, ValidationFailed
from goalsmanager.domains.tasks.models.task_models import Task
from goalsmanager.domains.tasks.services import task_service

pytestmark = pytest.mark.integration

MON, TUE, WED, THU, FRI, SAT, SUN = (date(2025, 10, d) for d in range(20, 27))


class TestTasksInRange:
    def test_materializes_then_lists_ordered(self, app, user, habit):
        tasks = task_service.get_tasks_for_user_in_range(user.id, MON, SUN)
        assert [t.date for t in tasks] == [MON, WED, FRI]
        assert all(t.user_id == user.id for t in tasks)

    def test_second_call_is_idempotent(self, app, user, habit):
        first = task_service.get_tasks_for_user_in_range(user.id, MON, SUN)
        second = task_service.get_tasks_for_user_in_range(user.id, MON, SUN)
        assert [t.id for t in first] == [t.id for t in second]
        assert Task.query.count() == 3

    def test_spans_every_habit_of_the_user(self, app, user, goal, habit, make_habit):
        make_habit(goal, name="Stretch", days_of_week="Tue,Thu")
        tasks = task_service.get_tasks_for_user_in_range(user.id, MON, SUN)
        assert [(t.date, t.name) for t in tasks] == [
            (MON, "Run"),
            (TUE, "Stretch"),
            (WED, "Run"),
            (THU, "Stretch"),
            (FRI, "Run"),
        ]

    def test_other_users_tasks_are_excluded(self, app, user, habit, make_user, make_goal, make_habit):
        bob = make_user("bob")
        make_habit(make_goal(bob), name="Swim", days_of_week="Mon")
        tasks = task_service.get_tasks_for_user_in_range(user.id, MON, SUN)
        assert {t.name for t in tasks} == {"Run"}

    def test_user_without_habits_gets_empty_list(self, app, user):
        assert task_service.get_tasks_for_user_in_range(user.id, MON, SUN) == []

    def test_unknown_user(self, app):
        with pytest.raises(NotFoundError) as exc:
            task_service.get_tasks_for_user_in_range(999, MON, SUN)
        assert exc.value.message == "User not found with id: 999"

    def test_inverted_range_rejected(self, app, user, habit):
        with pytest.raises(ValidationFailed):
            task_service.get_tasks_for_user_in_range(user.id, SUN, MON)
        assert Task.query.count() == 0

    def test_generate_missing_returns_count(self, app, user, habit):
        assert task_service.generate_missing_tasks_for_user(user.id, MON, SUN) == 3
        assert task_service.generate_missing_tasks_for_user(user.id, MON, SUN) == 0


class TestToggle:
    def test_toggle_flips_and_updates_streak(self, app, user, habit, today):
        tasks = task_service.get_tasks_for_user_in_range(user.id, MON, SUN)
        for task in tasks:
            task_service.toggle_task_completion(task.id, today=today)
        assert habit.streak_status == 3

        toggled = task_service.toggle_task_completion(tasks[-1].id, today=today)
        assert toggled.completed is False
        assert habit.streak_status == 0

    def test_toggle_unknown_task(self, app):
        with pytest.raises(NotFoundError):
            task_service.toggle_task_completion(42)


class TestCreateAndUpdate:
    def test_create_task(self, app, user, habit):
        task = task_service.create_task(name="  Extra run ", date=SAT, habit_id=habit.id, user_id=user.id)
        assert task.name == "Extra run"
        assert task.completed is False

    def test_create_on_taken_date_conflicts(self, app, user, habit):
        task_service.create_task(name="Run", date=MON, habit_id=habit.id, user_id=user.id)
        with pytest.raises(ConflictError):
            task_service.create_task(name="Run again", date=MON, habit_id=habit.id, user_id=user.id)

    @pytest.mark.parametrize("habit_id, user_id, entity", [(999, None, "Habit"), (None, 999, "User")])
    def test_create_requires_habit_and_user(self, app, user, habit, habit_id, user_id, entity):
        with pytest.raises(NotFoundError) as exc:
            task_service.create_task(
                name="Run", date=MON, habit_id=habit_id or habit.id, user_id=user_id or user.id
            )
        assert exc.value.message.startswith(entity)

    def test_create_requires_name(self, app, user, habit):
        with pytest.raises(ValidationFailed):
            task_service.create_task(name="  ", date=MON, habit_id=habit.id, user_id=user.id)

    def test_update_completed_recomputes_streak(self, app, user, habit, today):
        task = task_service.create_task(name="Run", date=FRI, habit_id=habit.id, user_id=user.id)
        task_service.update_task(task.id, today=today, completed=True)
        assert habit.streak_status == 1

    def test_update_to_taken_date_conflicts(self, app, user, habit):
        task_service.create_task(name="Run", date=MON, habit_id=habit.id, user_id=user.id)
        other = task_service.create_task(name="Run", date=WED, habit_id=habit.id, user_id=user.id)
        with pytest.raises(ConflictError):
            task_service.update_task(other.id, date=MON)

    def test_update_loses_race_for_date(self, app, user, habit, monkeypatch):
        task_service.create_task(name="Run", date=MON, habit_id=habit.id, user_id=user.id)
        other = task_service.create_task(name="Run", date=WED, habit_id=habit.id, user_id=user.id)
        # Another writer takes Monday between the check and the write.
        monkeypatch.setattr(task_service, "_ensure_date_free", lambda habit_id, day: None)

        with pytest.raises(ConflictError):
            task_service.update_task(other.id, date=MON)

        assert task_service.get_task(other.id).date == WED
        assert task_service.count_tasks_for_habit(habit.id) == 2

    def test_delete_and_counts(self, app, user, habit):
        tasks = task_service.get_tasks_for_user_in_range(user.id, MON, SUN)
        task_service.delete_task(tasks[0].id)
        assert task_service.count_tasks_for_user(user.id) == 2
        assert task_service.count_tasks_for_habit(habit.id) == 2
        assert not task_service.task_exists(tasks[0].id)

    def test_completed_and_pending_lists(self, app, user, habit, today):
        tasks = task_service.get_tasks_for_user_in_range(user.id, MON, SUN)
        task_service.toggle_task_completion(tasks[0].id, today=today)
        assert [t.id for t in task_service.list_completed_tasks_for_user(user.id)] == [tasks[0].id]
        assert len(task_service.list_pending_tasks_for_user(user.id)) == 2
