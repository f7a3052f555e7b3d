"""Tests for daily health tracking."""

from datetime import date, datetime

from schemas import MealLogCreate
from services.health_data import calculate_weekly_average, format_chart_data, health_data_service
from services.meal_service import meal_service

TODAY = date(2024, 5, 8)  # Wednesday


def test_daily_goals():
    goals = health_data_service.get_daily_goals()
    assert (goals.water, goals.steps, goals.sleep, goals.calories) == (2000, 10000, 8, 2000)


def test_water_intake_accumulates_in_one_row(db):
    first = health_data_service.update_water_intake(db, "u1", 250, today=TODAY)
    second = health_data_service.update_water_intake(db, "u1", 500, today=TODAY)
    assert second.id == first.id
    assert second.water_intake == 750
    assert health_data_service.update_water_intake(db, "u1", 300, today=date(2024, 5, 9)).water_intake == 300


def test_updates_keep_other_fields(db):
    health_data_service.update_water_intake(db, "u1", 400, today=TODAY)
    health_data_service.update_steps(db, "u1", 8500, today=TODAY)
    health_data_service.update_sleep_hours(db, "u1", 7.5, today=TODAY)
    row = health_data_service.update_weight(db, "u1", 68.2, today=TODAY)
    assert (row.water_intake, row.steps, row.sleep_hours, row.weight) == (400, 8500, 7.5, 68.2)


def test_calories_consumed_follow_the_meal_log(db):
    meal_service.add_meal(db, MealLogCreate(
        user_id="u1", name="Menemen", total_calories=450, meal_type="breakfast",
        created_at=datetime(2024, 5, 8, 9, 0),
    ))
    assert health_data_service.calculate_today_calories(db, "u1", TODAY) == 450
    row = health_data_service.update_steps(db, "u1", 1000, today=TODAY)
    assert row.calories_consumed == 450


def test_today_summary_without_data(db):
    summary = health_data_service.today_summary(db, "u1", today=TODAY)
    assert summary.data is None
    assert summary.calories_consumed == 0
    assert summary.progress.water == 0


def test_today_summary_progress_is_capped(db):
    health_data_service.update_water_intake(db, "u1", 1000, today=TODAY)
    health_data_service.update_steps(db, "u1", 25000, today=TODAY)
    summary = health_data_service.today_summary(db, "u1", today=TODAY)
    assert summary.progress.water == 50
    assert summary.progress.steps == 100
    assert summary.progress.sleep == 0


def test_weekly_average_skips_missing_values():
    records = [{"steps": 4000}, {"steps": None}, {"steps": 7001}, {}]
    assert calculate_weekly_average(records, "steps") == 5501
    assert calculate_weekly_average([], "steps") == 0
    assert calculate_weekly_average([{"weight": None}], "weight") == 0


def test_chart_has_seven_days_ending_today():
    records = [{"date": date(2024, 5, 6), "water_intake": 1500}, {"date": TODAY, "water_intake": 900}]
    chart = format_chart_data(records, "water_intake", today=TODAY)
    assert len(chart) == 7
    assert chart[0].date == date(2024, 5, 2)
    assert chart[-1].date == TODAY
    assert chart[-1].day == "Çar"
    assert [p.value for p in chart[-3:]] == [1500, 0, 900]


def test_weekly_summary_window_and_averages(db):
    health_data_service.update_steps(db, "u1", 3000, today=date(2024, 4, 30))
    health_data_service.update_steps(db, "u1", 6000, today=date(2024, 5, 1))
    health_data_service.update_steps(db, "u1", 9000, today=TODAY)
    summary = health_data_service.weekly_summary(db, "u1", chart_field="steps", today=TODAY)
    assert [r.date for r in summary.records] == [date(2024, 5, 1), TODAY]
    assert summary.averages["steps"] == 7500
    assert summary.averages["sleep_hours"] == 0
    assert summary.chart[-1].value == 9000
