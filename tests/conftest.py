from __future__ import annotations

import threading
from datetime import date, datetime
from typing import Optional

import pytest

from src.church_attendance.church_attendance.attendance.model import MemberAttendance
from src.church_attendance.church_attendance.container import assemble
from src.church_attendance.church_attendance.core.enums import EntryKind, Gender, Service
from src.church_attendance.church_attendance.core.exceptions import StorageError, UniqueConstraintError
from src.church_attendance.church_attendance.ledger.model import LedgerRow, PurgeResult
from src.church_attendance.church_attendance.main import create_app
from src.church_attendance.church_attendance.members.model import Member
from src.church_attendance.church_attendance.visitors.model import Visitor, VisitorAttendance, VisitorRegistration

TEST_PIN = "4321"


class InMemoryStore:
    """Members, visitors and both attendance tables in memory.

    Mirrors the MySQL schema rules that matter here: the
    (member_id, service, service_date) unique key and all-or-nothing visitor
    registration.
    """

    def __init__(self, members: list[Member] | None = None):
        self.members: list[Member] = list(members or [])
        self.member_attendance: list[MemberAttendance] = []
        self.visitors: list[Visitor] = []
        self.visitor_attendance: list[VisitorAttendance] = []
        self.fail_visitor_attendance = False
        self._lock = threading.Lock()
        self._ids = {"member_attendance": 0, "visitors": 0, "visitor_attendance": 0}

    def _next_id(self, table: str) -> int:
        self._ids[table] += 1
        return self._ids[table]

    # members
    def get_by_id(self, id: int) -> Optional[Member]:
        return next((m for m in self.members if m.id == id), None)

    def find_by_code(self, member_code: str) -> Optional[Member]:
        return next((m for m in self.members if m.member_id.upper() == member_code.upper()), None)

    def find_first_matching(self, term: str) -> Optional[Member]:
        t = term.lower()
        for m in sorted(self.members, key=lambda m: m.id):
            fields = (m.phone, m.first_name, m.last_name, m.full_name)
            if any(t in f.lower() for f in fields):
                return m
        return None

    # member attendance
    def get_for_member_service_date(self, *, member_id: int, service: Service, service_date: date):
        return next(
            (
                a
                for a in self.member_attendance
                if (a.member_id, a.service, a.service_date) == (member_id, service, service_date)
            ),
            None,
        )

    def create_checkin(self, *, member_id: int, service: Service, service_date: date, check_in_time: datetime):
        with self._lock:
            if self.get_for_member_service_date(member_id=member_id, service=service, service_date=service_date):
                raise UniqueConstraintError("Duplicate entry for key 'uq_member_service_day'")
            rec = MemberAttendance(
                id=self._next_id("member_attendance"),
                member_id=member_id,
                service=service,
                service_date=service_date,
                check_in_time=check_in_time,
            )
            self.member_attendance.append(rec)
            return rec

    # visitors
    def create_with_attendance(self, *, full_name, phone, gender, first_time, service, service_date, check_in_time):
        with self._lock:
            visitor = Visitor(
                id=self._ids["visitors"] + 1,
                full_name=full_name,
                phone=phone,
                gender=gender,
                first_time=first_time,
                created_at=check_in_time,
            )
            if self.fail_visitor_attendance:
                raise StorageError("visitor_attendance insert failed")
            attendance = VisitorAttendance(
                id=self._ids["visitor_attendance"] + 1,
                visitor_id=visitor.id,
                service=service,
                service_date=service_date,
                check_in_time=check_in_time,
            )
            self._next_id("visitors")
            self._next_id("visitor_attendance")
            self.visitors.append(visitor)
            self.visitor_attendance.append(attendance)
            return VisitorRegistration(visitor=visitor, attendance=attendance)

    # ledger
    def list_rows(self):
        rows = []
        for a in self.member_attendance:
            m = self.get_by_id(a.member_id)
            rows.append(
                LedgerRow(
                    name=m.full_name,
                    kind=EntryKind.MEMBER,
                    phone=m.phone,
                    gender=m.gender.value,
                    service=a.service.value,
                    service_date=a.service_date,
                    check_in_time=a.check_in_time,
                )
            )
        visitors = {v.id: v for v in self.visitors}
        for a in self.visitor_attendance:
            v = visitors[a.visitor_id]
            rows.append(
                LedgerRow(
                    name=v.full_name,
                    kind=EntryKind.VISITOR,
                    phone=v.phone,
                    gender=v.gender.value,
                    service=a.service.value,
                    service_date=a.service_date,
                    check_in_time=a.check_in_time,
                )
            )
        # Unordered on purpose; LedgerService owns the ordering.
        return rows

    def purge_attendance(self):
        with self._lock:
            result = PurgeResult(
                member_attendance=len(self.member_attendance),
                visitor_attendance=len(self.visitor_attendance),
            )
            self.member_attendance.clear()
            self.visitor_attendance.clear()
            return result


def demo_members() -> list[Member]:
    return [
        Member(id=1, member_id="MBR-AB12CD34", first_name="Grace", last_name="Banda", phone="0883727116", gender=Gender.FEMALE),
        Member(id=2, member_id="MBR-ZZ99YY88", first_name="Ab12cd34", last_name="Lookalike", phone="0999000111", gender=Gender.MALE),
        Member(id=3, member_id="MBR-EF56GH78", first_name="Peter", last_name="Phiri", phone="0991234567", gender=Gender.MALE),
        Member(id=4, member_id="MBR-IJ90KL12", first_name="Petra", last_name="Mwale", phone="0888555444", gender=Gender.FEMALE, email="petra@example.org"),
    ]


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 2, 1, 8, 30, 0)


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore(demo_members())


@pytest.fixture
def container(store: InMemoryStore):
    return assemble(
        conn=None,
        members_repo=store,
        attendance_repo=store,
        visitors_repo=store,
        ledger_repo=store,
        ledger_pin=TEST_PIN,
    )


@pytest.fixture
def client(container):
    app = create_app(container, settings_module="config.testing")
    return app.test_client()
