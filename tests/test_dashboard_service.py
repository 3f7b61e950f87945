from __future__ import annotations

from datetime import date

from guard_manager.core.enums import Shift


def test_stats_reflect_seeded_store(container):
    today = date(2025, 1, 15)
    container.attendance_service.cycle_shift("g1", "2025-01-15", Shift.MORNING)
    container.attendance_service.cycle_shift("g2", "2025-01-15", Shift.NIGHT)
    container.attendance_service.cycle_shift("g2", "2025-01-14", Shift.NIGHT)
    container.expense_service.record_expense(guard_id="g1", amount=500, date="2025-01-02")
    container.expense_service.record_expense(guard_id="g1", amount=700, date="2024-12-31")

    stats = container.dashboard_service.stats(today)

    assert stats.active_guards == 3
    assert stats.total_sites == 2
    assert stats.shifts_today == 2
    assert stats.monthly_expense == 500
