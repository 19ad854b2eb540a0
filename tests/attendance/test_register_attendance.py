from __future__ import annotations

import threading
from datetime import datetime, timedelta, timezone

import pytest

from src.church_attendance.church_attendance.attendance.service import AttendanceService
from src.church_attendance.church_attendance.core.enums import Service
from src.church_attendance.church_attendance.core.exceptions import (
    DuplicateCheckIn,
    RegistrationFailed,
    StorageError,
    UniqueConstraintError,
    ValidationError,
)


def test_first_checkin_is_stored(store, fixed_now):
    svc = AttendanceService(store, store)

    rec = svc.register_attendance(1, Service.SUNDAY_MORNING, now=fixed_now)

    assert rec.id == 1
    assert rec.member_id == 1
    assert rec.service_date == fixed_now.date()
    assert rec.check_in_time == fixed_now
    assert len(store.member_attendance) == 1


def test_second_checkin_same_day_is_duplicate(store, fixed_now):
    svc = AttendanceService(store, store)
    svc.register_attendance(1, Service.SUNDAY_MORNING, now=fixed_now)

    with pytest.raises(DuplicateCheckIn):
        svc.register_attendance(1, Service.SUNDAY_MORNING, now=fixed_now + timedelta(hours=2))

    assert len(store.member_attendance) == 1


def test_other_service_or_other_day_is_allowed(store, fixed_now):
    svc = AttendanceService(store, store)
    svc.register_attendance(1, Service.SUNDAY_MORNING, now=fixed_now)

    svc.register_attendance(1, Service.SUNDAY_MID, now=fixed_now)
    svc.register_attendance(1, Service.SUNDAY_MORNING, now=fixed_now + timedelta(days=7))

    assert len(store.member_attendance) == 3


def test_service_date_uses_utc_calendar_day(store):
    svc = AttendanceService(store, store)
    # 23:30 on 31 Jan at UTC-05:00 is already 1 Feb in UTC.
    local = datetime(2026, 1, 31, 23, 30, tzinfo=timezone(timedelta(hours=-5)))

    rec = svc.register_attendance(1, Service.MID_WEEK, now=local)

    assert rec.service_date.isoformat() == "2026-02-01"
    assert rec.check_in_time == datetime(2026, 2, 1, 4, 30)


def test_unknown_member_is_rejected(store, fixed_now):
    svc = AttendanceService(store, store)

    with pytest.raises(ValidationError):
        svc.register_attendance(999, Service.SUNDAY_MORNING, now=fixed_now)


class RacingAttendance:
    """Pre-check always misses, as when two requests check before either inserts."""

    def __init__(self, store):
        self._store = store

    def get_for_member_service_date(self, **_kwargs):
        return None

    def create_checkin(self, **kwargs):
        return self._store.create_checkin(**kwargs)


def test_unique_violation_on_insert_is_reported_as_duplicate(store, fixed_now):
    svc = AttendanceService(RacingAttendance(store), store)
    svc.register_attendance(1, Service.SUNDAY_MORNING, now=fixed_now)

    with pytest.raises(DuplicateCheckIn) as exc:
        svc.register_attendance(1, Service.SUNDAY_MORNING, now=fixed_now)

    assert isinstance(exc.value.__cause__, UniqueConstraintError)


def test_concurrent_checkins_store_exactly_one(store, fixed_now):
    svc = AttendanceService(RacingAttendance(store), store)
    barrier = threading.Barrier(8)
    outcomes: list[str] = []
    lock = threading.Lock()

    def worker():
        barrier.wait()
        try:
            svc.register_attendance(1, Service.SPECIAL, now=fixed_now)
            result = "ok"
        except DuplicateCheckIn:
            result = "duplicate"
        with lock:
            outcomes.append(result)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert outcomes.count("ok") == 1
    assert outcomes.count("duplicate") == 7
    assert len(store.member_attendance) == 1


class BrokenAttendance:
    def get_for_member_service_date(self, **_kwargs):
        return None

    def create_checkin(self, **_kwargs):
        raise StorageError("connection lost")


def test_store_failure_becomes_registration_failed(store, fixed_now):
    svc = AttendanceService(BrokenAttendance(), store)

    with pytest.raises(RegistrationFailed):
        svc.register_attendance(1, Service.SUNDAY_MORNING, now=fixed_now)
