"""SQLAlchemy ORM models for the nutrition service.

`MealLog` stores eaten meals; `DietPlan` stores generated weekly plans with
the plan body kept as a JSON-encoded string keyed by Turkish day names.
`MealCompletion` marks plan entries as eaten on a given date and
`HealthData` holds one row of daily tracking values per user and day.
Models stay behavior-free; logic lives in the services.
"""

from sqlalchemy import Column, Integer, String, Float, Date, DateTime, Boolean, Text, ForeignKey, UniqueConstraint
from sqlalchemy.orm import declarative_base
from datetime import datetime

Base = declarative_base()


class MealLog(Base):
    """A meal the user logged, manually or from a photo analysis."""

    __tablename__ = "meal_logs"
    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String, nullable=False, index=True)
    name = Column(String, nullable=False)
    total_calories = Column(Float, nullable=False, default=0)
    total_protein = Column(Float, nullable=False, default=0)
    total_carbs = Column(Float, nullable=False, default=0)
    total_fat = Column(Float, nullable=False, default=0)
    meal_type = Column(String, nullable=False)
    portion = Column(String, nullable=True)
    created_at = Column(DateTime, default=datetime.now, index=True)


class DietPlan(Base):
    """A stored weekly plan; at most one per user is active."""

    __tablename__ = "diet_plans"
    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String, nullable=False, index=True)
    name = Column(String, nullable=False)
    goal = Column(String, nullable=False)
    daily_calories = Column(Integer, nullable=False)
    daily_protein = Column(Integer, nullable=False)
    daily_carbs = Column(Integer, nullable=False)
    daily_fat = Column(Integer, nullable=False)
    weekly_plan = Column(Text, nullable=False)  # JSON
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime, default=datetime.now)
    updated_at = Column(DateTime, nullable=True, onupdate=datetime.now)


class MealCompletion(Base):
    """A plan entry checked off on a calendar date.

    Unchecking keeps the row and clears `completed_at`.
    """

    __tablename__ = "meal_completions"
    __table_args__ = (
        UniqueConstraint("user_id", "plan_id", "completion_date", "day_of_week", "meal_type", "meal_id"),
    )
    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String, nullable=False, index=True)
    plan_id = Column(Integer, ForeignKey("diet_plans.id"), nullable=False, index=True)
    completion_date = Column(Date, nullable=False, index=True)
    day_of_week = Column(String, nullable=False)
    meal_type = Column(String, nullable=False)
    meal_id = Column(String, nullable=False)
    completed_at = Column(DateTime, nullable=True)
    created_at = Column(DateTime, default=datetime.now)


class HealthData(Base):
    __tablename__ = "health_data"
    __table_args__ = (UniqueConstraint("user_id", "date"),)
    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String, nullable=False, index=True)
    date = Column(Date, nullable=False, index=True)
    calories_consumed = Column(Float, nullable=False, default=0)
    calories_burned = Column(Float, nullable=True)
    water_intake = Column(Integer, nullable=False, default=0)  # ml
    steps = Column(Integer, nullable=True)
    sleep_hours = Column(Float, nullable=True)
    weight = Column(Float, nullable=True)  # kg
    created_at = Column(DateTime, default=datetime.now)
    updated_at = Column(DateTime, nullable=True, onupdate=datetime.now)
