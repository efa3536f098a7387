"""Tests for the goal service."""

from datetime import date

import pytest

from goalsmanager.core.errors import NotFoundError, ValidationFailed
from goalsmanager.core.utils.validation import END_BEFORE_START
from goalsmanager.domains.goals.models.goal_models import Goal, GoalStatus
from goalsmanager.domains.goals.services import goal_service
from goalsmanager.domains.habits.models.habit_models import Habit
from goalsmanager.domains.notes.models.note_models import Note
from goalsmanager.domains.notes.services.note_service import create_note
from goalsmanager.domains.tasks.models.task_models import Task
from goalsmanager.domains.tasks.services.task_service import get_tasks_for_user_in_range

pytestmark = pytest.mark.integration


class TestCreateGoal:
    def test_defaults(self, app, user):
        goal = goal_service.create_goal(
            user.id, title=" Learn piano ", start_date=date(2025, 1, 1), end_date=date(2025, 6, 30)
        )
        assert goal.id is not None
        assert goal.title == "Learn piano"
        assert goal.status == GoalStatus.NOT_STARTED
        assert goal.user.username == "alice"

    def test_end_before_start_rejected(self, app, user):
        with pytest.raises(ValidationFailed) as exc:
            goal_service.create_goal(
                user.id, title="Backwards", start_date=date(2025, 12, 31), end_date=date(2025, 1, 1)
            )
        assert exc.value.message == END_BEFORE_START
        assert Goal.query.count() == 0

    def test_same_day_window_allowed(self, app, user):
        goal = goal_service.create_goal(
            user.id, title="One day", start_date=date(2025, 5, 5), end_date=date(2025, 5, 5)
        )
        assert goal.start_date == goal.end_date

    def test_blank_title_rejected(self, app, user):
        with pytest.raises(ValidationFailed):
            goal_service.create_goal(user.id, title="  ", start_date=date(2025, 1, 1), end_date=date(2025, 1, 2))

    def test_unknown_user(self, app):
        with pytest.raises(NotFoundError):
            goal_service.create_goal(7, title="x", start_date=date(2025, 1, 1), end_date=date(2025, 1, 2))


class TestUpdateGoal:
    def test_partial_update_keeps_other_fields(self, app, goal):
        updated = goal_service.update_goal(goal.id, description="Three runs a week", title=None)
        assert updated.title == "Get fit"
        assert updated.description == "Three runs a week"

    def test_update_rejects_inverted_dates(self, app, goal):
        with pytest.raises(ValidationFailed):
            goal_service.update_goal(goal.id, end_date=date(2025, 9, 1))
        assert goal_service.get_goal(goal.id).end_date == date(2025, 12, 31)

    def test_update_status(self, app, goal):
        goal_service.update_goal_status(goal.id, GoalStatus.IN_PROGRESS)
        assert goal_service.count_goals_for_user_by_status(goal.user_id, GoalStatus.IN_PROGRESS) == 1

    def test_missing_goal(self, app):
        with pytest.raises(NotFoundError) as exc:
            goal_service.update_goal(404, title="nope")
        assert exc.value.message == "Goal not found with id: 404"


class TestDateViews:
    def test_overdue_active_completed(self, app, user, make_goal, today):
        past = make_goal(user, title="Past", start_date=date(2025, 1, 1), end_date=date(2025, 3, 1))
        current = make_goal(user, title="Current", status=GoalStatus.IN_PROGRESS)
        done = make_goal(
            user, title="Done", start_date=date(2025, 1, 1), end_date=date(2025, 3, 1), status=GoalStatus.COMPLETED
        )

        assert [g.id for g in goal_service.list_overdue_goals(user.id, today=today)] == [past.id]
        assert [g.id for g in goal_service.list_active_goals(user.id, today=today)] == [current.id]
        assert [g.id for g in goal_service.list_completed_goals(user.id)] == [done.id]

    def test_overdue_uses_app_clock(self, app, user, make_goal):
        make_goal(user, start_date=date(2025, 10, 1), end_date=date(2025, 10, 24))
        assert len(goal_service.list_overdue_goals(user.id)) == 1


class TestDeleteGoal:
    def test_cascades_to_habits_tasks_and_notes(self, app, user, goal, habit):
        get_tasks_for_user_in_range(user.id, date(2025, 10, 20), date(2025, 10, 26))
        create_note(goal.id, "Felt good")
        assert Task.query.count() == 3

        goal_service.delete_goal(goal.id)

        assert Goal.query.count() == 0
        assert Habit.query.count() == 0
        assert Task.query.count() == 0
        assert Note.query.count() == 0
        assert not goal_service.goal_exists(goal.id)

    def test_list_for_unknown_user(self, app):
        with pytest.raises(NotFoundError):
            goal_service.list_goals_for_user(31)
