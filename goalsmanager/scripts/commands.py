"""Flask CLI commands for task generation, streak upkeep, and demo data.

Usage:
    flask generate-tasks --user 1 --start 2025-10-20 --end 2025-10-26
    flask recompute-streaks               # every habit
    flask recompute-streaks --user 1
    flask seed-demo
"""

from __future__ import annotations

import logging

import click
from flask.cli import with_appcontext

logger = logging.getLogger(__name__)


@click.command("generate-tasks")
@click.option("--user", "-u", "user_id", type=int, required=True, help="User whose habits to materialize")
@click.option("--start", "start_date", type=click.DateTime(formats=["%Y-%m-%d"]), required=True)
@click.option("--end", "end_date", type=click.DateTime(formats=["%Y-%m-%d"]), required=True)
@with_appcontext
def generate_tasks_command(user_id: int, start_date, end_date):
    """Create any scheduled tasks missing for a user's habits in a date range."""
    from goalsmanager.core.errors import GoalsManagerError
    from goalsmanager.domains.tasks.services.task_service import generate_missing_tasks_for_user

    try:
        created = generate_missing_tasks_for_user(user_id, start_date.date(), end_date.date())
    except GoalsManagerError as exc:
        raise click.ClickException(exc.message) from exc
    click.echo(f"Created {created} tasks for user {user_id}")


@click.command("recompute-streaks")
@click.option("--user", "-u", "user_id", type=int, help="Only habits of this user")
@with_appcontext
def recompute_streaks_command(user_id: int | None):
    """Recompute the streak of every habit from its task history."""
    from goalsmanager.domains.habits.models.habit_models import Habit
    from goalsmanager.domains.tasks.services.streak_service import update_habit_streak
    from goalsmanager.extensions import db

    query = Habit.query
    if user_id:
        query = query.filter_by(user_id=user_id)
    habits = query.order_by(Habit.id.asc()).all()
    for habit in habits:
        update_habit_streak(habit)
    db.session.commit()
    logger.info("Recomputed streaks for %d habits", len(habits))
    click.echo(f"Recomputed streaks for {len(habits)} habits")


@click.command("seed-demo")
@with_appcontext
def seed_demo_command():
    """Seed a demo user with a goal, a habit, this week's tasks, and a note."""
    from goalsmanager.scripts.seed_demo import seed_all

    summary = seed_all()
    click.echo(
        "Seeded user {user_id}: goal {goal_id}, habit {habit_id}, {tasks} tasks".format(**summary)
    )


def register_commands(app):
    """Register CLI commands with the app."""
    app.cli.add_command(generate_tasks_command)
    app.cli.add_command(recompute_streaks_command)
    app.cli.add_command(seed_demo_command)
