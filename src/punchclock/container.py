from __future__ import annotations

from dataclasses import dataclass

from .attendance.classifier import AttendanceClassifier
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .core.constants import DEFAULT_HISTORY_LIMIT
from .database.connection import DatabaseConnection, DBConfig
from .employees.mysql_employee_repository import MySQLEmployeeDetailsRepository
from .employees.repository import EmployeeDetailsRepository
from .employees.service import EmployeeService
from .events.bus import WILDCARD, EventBus, RecentEvents
from .payslips.mysql_payslip_repository import MySQLPayslipRepository
from .payslips.repository import PayslipRepository
from .payslips.service import PayslipService
from .roles.mysql_role_repository import MySQLRoleAssignmentRepository
from .roles.repository import RoleAssignmentRepository
from .roles.service import RoleService
from .shifts.mysql_shift_repository import MySQLShiftConfigRepository
from .shifts.repository import ShiftConfigRepository
from .shifts.service import ShiftConfigService
from .users.mysql_user_repository import MySQLUserRepository
from .users.repository import UserRepository
from .users.service import AuthService, UserService


@dataclass(frozen=True)
class Container:
    users_repo: UserRepository
    roles_repo: RoleAssignmentRepository
    shifts_repo: ShiftConfigRepository
    details_repo: EmployeeDetailsRepository
    attendance_repo: AttendanceRepository
    payslips_repo: PayslipRepository

    events: EventBus
    recent_events: RecentEvents

    auth_service: AuthService
    user_service: UserService
    role_service: RoleService
    shift_service: ShiftConfigService
    employee_service: EmployeeService
    attendance_service: AttendanceService
    payslip_service: PayslipService

    conn: DatabaseConnection | None = None


def wire_container(
    *,
    users_repo: UserRepository,
    roles_repo: RoleAssignmentRepository,
    shifts_repo: ShiftConfigRepository,
    details_repo: EmployeeDetailsRepository,
    attendance_repo: AttendanceRepository,
    payslips_repo: PayslipRepository,
    history_limit: int = DEFAULT_HISTORY_LIMIT,
    conn: DatabaseConnection | None = None,
) -> Container:
    """Build services on top of any set of repositories (MySQL or in-memory)."""
    events = EventBus()
    recent_events = RecentEvents()
    events.subscribe(WILDCARD, recent_events)

    shift_service = ShiftConfigService(shifts_repo)

    return Container(
        conn=conn,
        users_repo=users_repo,
        roles_repo=roles_repo,
        shifts_repo=shifts_repo,
        details_repo=details_repo,
        attendance_repo=attendance_repo,
        payslips_repo=payslips_repo,
        events=events,
        recent_events=recent_events,
        auth_service=AuthService(users_repo, roles_repo),
        user_service=UserService(users_repo, events=events),
        role_service=RoleService(roles_repo, users_repo),
        shift_service=shift_service,
        employee_service=EmployeeService(users_repo, details_repo, events=events),
        attendance_service=AttendanceService(
            attendance_repo,
            users_repo,
            shift_service,
            classifier=AttendanceClassifier(),
            events=events,
            history_limit=history_limit,
        ),
        payslip_service=PayslipService(payslips_repo, users_repo, events=events),
    )


def build_container(*, db_config: dict, history_limit: int = DEFAULT_HISTORY_LIMIT) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    return wire_container(
        users_repo=MySQLUserRepository(conn),
        roles_repo=MySQLRoleAssignmentRepository(conn),
        shifts_repo=MySQLShiftConfigRepository(conn),
        details_repo=MySQLEmployeeDetailsRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        payslips_repo=MySQLPayslipRepository(conn),
        history_limit=history_limit,
        conn=conn,
    )
