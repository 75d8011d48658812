"""
schedules.py
Group class catalog and the weekly timetable.
"""

from __future__ import annotations

import logging
import re

import seed
from db import BaseStore, find_index
from models import CLASS_CATEGORIES, DAYS, ClassSchedule, GymClass, check_choice
from utils import generate_id, now_iso

logger = logging.getLogger(__name__)

_TIME_RE = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")


def _check_time(value: str) -> str:
    # Zero-padded HH:MM, so plain string order is time order.
    if not _TIME_RE.match(value):
        raise ValueError(f"Invalid time {value!r}; expected HH:MM.")
    return value


class ClassScheduleStore(BaseStore):
    name = "classSchedules"

    def __init__(self, storage):
        self.gym_classes: list[GymClass] = []
        self.schedules: list[ClassSchedule] = []
        super().__init__(storage)

    def reset(self) -> None:
        self.gym_classes = []
        self.schedules = []

    def restore(self, snapshot: dict) -> None:
        self.gym_classes = [GymClass.from_dict(c) for c in snapshot.get("gym_classes", [])]
        self.schedules = [ClassSchedule.from_dict(s) for s in snapshot.get("schedules", [])]

    def snapshot(self) -> dict:
        return {
            "gym_classes": [c.to_dict() for c in self.gym_classes],
            "schedules": [s.to_dict() for s in self.schedules],
        }

    def init(self) -> None:
        self.ensure_defaults()

    def ensure_defaults(self) -> None:
        """Put the default class catalog back whenever the catalog is empty."""
        if not self.gym_classes:
            self.gym_classes = [GymClass.from_dict(c) for c in seed.DEFAULT_CLASSES]
            self.initialized = True
            logger.info("Loaded %d default classes", len(self.gym_classes))
            self.save()

    # ---------- views ----------

    @property
    def active_classes(self) -> list[GymClass]:
        return [c for c in self.gym_classes if c.is_active]

    @property
    def active_schedules(self) -> list[ClassSchedule]:
        return [s for s in self.schedules if s.is_active]

    @property
    def classes_by_category(self) -> dict[str, list[GymClass]]:
        grouped: dict[str, list[GymClass]] = {c: [] for c in CLASS_CATEGORIES}
        for c in self.active_classes:
            grouped.setdefault(c.category, []).append(c)
        return grouped

    def get_schedules_by_day(self, day: str) -> list[ClassSchedule]:
        return sorted((s for s in self.active_schedules if s.day == day), key=lambda s: s.start_time)

    def get_schedules_by_class(self, class_id: str) -> list[ClassSchedule]:
        return [s for s in self.active_schedules if s.class_id == class_id]

    def get_class_by_id(self, class_id: str) -> GymClass | None:
        return next((c for c in self.gym_classes if c.id == class_id), None)

    def get_schedule_by_id(self, schedule_id: str) -> ClassSchedule | None:
        return next((s for s in self.schedules if s.id == schedule_id), None)

    # ---------- classes ----------

    def add_class(self, name: str, category: str, description: str = "", is_active: bool = True) -> GymClass:
        gym_class = GymClass(
            id=generate_id(),
            name=name,
            category=check_choice(category, CLASS_CATEGORIES, "class category"),
            description=description,
            is_active=is_active,
        )
        self.gym_classes.append(gym_class)
        self.save()
        return gym_class

    def update_class(self, class_id: str, **fields) -> None:
        idx = find_index(self.gym_classes, class_id)
        if idx == -1:
            return
        if "category" in fields:
            check_choice(fields["category"], CLASS_CATEGORIES, "class category")
        self.gym_classes[idx] = self.gym_classes[idx].merge(**fields)
        self.save()

    def delete_class(self, class_id: str) -> None:
        """Remove a class together with every schedule slot that runs it."""
        self.gym_classes = [c for c in self.gym_classes if c.id != class_id]
        self.schedules = [s for s in self.schedules if s.class_id != class_id]
        self.save()

    # ---------- schedules ----------

    def add_schedule(
        self,
        class_id: str,
        day: str,
        start_time: str,
        end_time: str,
        max_participants: int,
        room: str,
        trainer_id: str | None = None,
        is_active: bool = True,
    ) -> ClassSchedule:
        if _check_time(end_time) <= _check_time(start_time):
            raise ValueError("End time must be after start time.")
        now = now_iso()
        schedule = ClassSchedule(
            id=generate_id(),
            class_id=class_id,
            day=check_choice(day, DAYS, "day"),
            start_time=start_time,
            end_time=end_time,
            max_participants=max_participants,
            room=room,
            created_at=now,
            updated_at=now,
            is_active=is_active,
            trainer_id=trainer_id,
        )
        self.schedules.append(schedule)
        self.save()
        return schedule

    def update_schedule(self, schedule_id: str, **fields) -> None:
        idx = find_index(self.schedules, schedule_id)
        if idx == -1:
            return
        if "day" in fields:
            check_choice(fields["day"], DAYS, "day")
        for key in ("start_time", "end_time"):
            if key in fields:
                _check_time(fields[key])
        self.schedules[idx] = self.schedules[idx].merge(**{**fields, "updated_at": now_iso()})
        self.save()

    def delete_schedule(self, schedule_id: str) -> None:
        self.schedules = [s for s in self.schedules if s.id != schedule_id]
        self.save()
