from __future__ import annotations

import math
from datetime import date

from fitpet.core.time import calendar_day
from fitpet.domain.models import UserProgress
from fitpet.storage.base import Storage


def daily_progress(storage: Storage, user_id: int, day: date) -> UserProgress:
    """Completed vs. scheduled assignments for one calendar day (UTC)."""
    todays = [uw for uw in storage.list_user_workouts(user_id) if calendar_day(uw.scheduled_for) == day]
    completed = sum(1 for uw in todays if uw.completed)
    total = len(todays)
    percentage = math.floor(completed * 100 / total + 0.5) if total else 0
    return UserProgress(completed=completed, total=total, percentage=percentage)
