"""Tests for task generation from habit schedules."""

from datetime import date

import pytest
from sqlalchemy.exc import IntegrityError

from goalsmanager.domains.tasks.models.task_models import Task
from goalsmanager.domains.tasks.services import task_generator
from goalsmanager.domains.tasks.services.task_generator import (
    _insert_one_by_one,
    effective_window,
    generate_tasks_for_habit,
)
from goalsmanager.extensions import db

pytestmark = pytest.mark.integration


def _dates(habit):
    return [t.date for t in Task.query.filter_by(habit_id=habit.id).order_by(Task.date).all()]


class TestGenerateTasksForHabit:
    def test_mon_wed_fri_week(self, app, habit):
        created = generate_tasks_for_habit(habit, date(2025, 10, 20), date(2025, 10, 24))
        db.session.commit()

        assert sorted(t.date for t in created) == [
            date(2025, 10, 20),
            date(2025, 10, 22),
            date(2025, 10, 24),
        ]
        assert _dates(habit) == [date(2025, 10, 20), date(2025, 10, 22), date(2025, 10, 24)]
        for task in created:
            assert task.name == habit.name
            assert task.completed is False
            assert task.user_id == habit.user_id
            assert task.habit_id == habit.id

    def test_overlapping_window_creates_nothing_new(self, app, habit):
        generate_tasks_for_habit(habit, date(2025, 10, 20), date(2025, 10, 24))
        db.session.commit()

        created = generate_tasks_for_habit(habit, date(2025, 10, 22), date(2025, 10, 26))
        db.session.commit()

        assert created == []
        assert len(_dates(habit)) == 3

    def test_rerun_keeps_completed_flags(self, app, habit):
        generate_tasks_for_habit(habit, date(2025, 10, 20), date(2025, 10, 24))
        db.session.commit()
        monday = Task.query.filter_by(habit_id=habit.id, date=date(2025, 10, 20)).one()
        monday.completed = True
        db.session.commit()

        generate_tasks_for_habit(habit, date(2025, 10, 20), date(2025, 10, 24))
        db.session.commit()

        assert Task.query.filter_by(habit_id=habit.id).count() == 3
        assert db.session.get(Task, monday.id).completed is True

    def test_extends_into_new_days_only(self, app, habit):
        generate_tasks_for_habit(habit, date(2025, 10, 20), date(2025, 10, 24))
        db.session.commit()

        created = generate_tasks_for_habit(habit, date(2025, 10, 20), date(2025, 10, 31))
        db.session.commit()

        assert sorted(t.date for t in created) == [
            date(2025, 10, 27),
            date(2025, 10, 29),
            date(2025, 10, 31),
        ]

    @pytest.mark.parametrize("days", [None, "", "Someday", " , "])
    def test_empty_schedule_generates_nothing(self, app, goal, make_habit, days):
        habit = make_habit(goal, days_of_week=days)
        assert generate_tasks_for_habit(habit, date(2025, 10, 1), date(2025, 12, 31)) == []
        assert Task.query.count() == 0

    def test_window_clamped_to_habit_period(self, app, goal, make_habit):
        habit = make_habit(goal, start_date=date(2025, 10, 22), end_date=date(2025, 10, 23))
        created = generate_tasks_for_habit(habit, date(2025, 10, 20), date(2025, 10, 26))
        assert [t.date for t in created] == [date(2025, 10, 22)]

    @pytest.mark.parametrize(
        "start, end",
        [
            (date(2025, 9, 1), date(2025, 9, 30)),
            (date(2026, 1, 1), date(2026, 1, 31)),
        ],
    )
    def test_disjoint_window_generates_nothing(self, app, habit, start, end):
        assert generate_tasks_for_habit(habit, start, end) == []
        assert Task.query.count() == 0

    def test_inverted_window_generates_nothing(self, app, habit):
        assert generate_tasks_for_habit(habit, date(2025, 10, 24), date(2025, 10, 20)) == []


class TestEffectiveWindow:
    def test_intersection(self, app, habit):
        assert effective_window(habit, date(2025, 9, 1), date(2025, 10, 5)) == (
            date(2025, 10, 1),
            date(2025, 10, 5),
        )

    def test_no_overlap(self, app, habit):
        assert effective_window(habit, date(2026, 2, 1), date(2026, 2, 5)) is None


class TestConflictFallback:
    def test_row_by_row_skips_dates_taken_by_another_writer(self, app, habit):
        # Simulates a concurrent writer that inserted the Wednesday after our existence check.
        db.session.add(
            Task(name="other", date=date(2025, 10, 22), completed=True, habit_id=habit.id, user_id=habit.user_id)
        )
        db.session.commit()

        created = _insert_one_by_one(habit, [date(2025, 10, 20), date(2025, 10, 22), date(2025, 10, 24)])
        db.session.commit()

        assert [t.date for t in created] == [date(2025, 10, 20), date(2025, 10, 24)]
        wednesday = Task.query.filter_by(habit_id=habit.id, date=date(2025, 10, 22)).one()
        assert wednesday.completed is True
        assert wednesday.name == "other"

    def test_store_rejects_duplicate_habit_date(self, app, habit):
        db.session.add(Task(name="a", date=date(2025, 10, 20), habit_id=habit.id, user_id=habit.user_id))
        db.session.commit()
        db.session.add(Task(name="b", date=date(2025, 10, 20), habit_id=habit.id, user_id=habit.user_id))
        with pytest.raises(IntegrityError):
            db.session.commit()
        db.session.rollback()

    def test_batch_conflict_falls_back_row_by_row(self, app, habit, monkeypatch):
        build_task = task_generator._new_task
        built = []

        def racing_new_task(target, day):
            if not built:
                # Another writer commits Wednesday after the existing dates were read.
                db.session.add(
                    Task(name="other", date=date(2025, 10, 22), completed=True, habit_id=target.id, user_id=target.user_id)
                )
                db.session.flush()
            built.append(day)
            return build_task(target, day)

        monkeypatch.setattr(task_generator, "_new_task", racing_new_task)

        created = generate_tasks_for_habit(habit, date(2025, 10, 20), date(2025, 10, 24))
        db.session.commit()

        assert [t.date for t in created] == [date(2025, 10, 20), date(2025, 10, 24)]
        rows = Task.query.filter_by(habit_id=habit.id).order_by(Task.date).all()
        assert [(t.date, t.name, t.completed) for t in rows] == [
            (date(2025, 10, 20), "Run", False),
            (date(2025, 10, 22), "other", True),
            (date(2025, 10, 24), "Run", False),
        ]
