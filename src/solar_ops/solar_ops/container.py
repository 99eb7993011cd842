from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Callable

from .attendance.memory_attendance_repository import InMemoryAttendanceRepository
from .attendance.service import AttendanceService
from .clients.memory_client_repository import InMemoryClientRepository
from .clients.service import ClientService
from .comments.memory_comment_repository import InMemoryCommentRepository
from .comments.service import CommentService
from .common.datetime_utils import now_local
from .employees.memory_department_repository import InMemoryDepartmentRepository
from .employees.memory_employee_repository import InMemoryEmployeeRepository
from .employees.service import DepartmentService, EmployeeService
from .leave.memory_leave_request_repository import InMemoryLeaveRequestRepository
from .leave.service import LeaveService
from .payroll.calculator.standard_calculator import StandardPayrollCalculator
from .payroll.memory_payroll_repository import InMemoryPayrollRepository
from .payroll.service import PayrollService
from .plansets.memory_planset_repository import InMemoryPlansetRepository
from .plansets.service import PlansetService
from .projects.memory_project_repository import InMemoryProjectRepository
from .projects.service import ProjectService
from .users.memory_user_repository import InMemoryUserRepository
from .users.service import UserService


@dataclass(frozen=True)
class Container:
    users_repo: InMemoryUserRepository
    employees_repo: InMemoryEmployeeRepository
    departments_repo: InMemoryDepartmentRepository
    clients_repo: InMemoryClientRepository
    projects_repo: InMemoryProjectRepository
    comments_repo: InMemoryCommentRepository
    plansets_repo: InMemoryPlansetRepository
    attendance_repo: InMemoryAttendanceRepository
    leave_repo: InMemoryLeaveRequestRepository
    payroll_repo: InMemoryPayrollRepository

    user_service: UserService
    employee_service: EmployeeService
    department_service: DepartmentService
    client_service: ClientService
    project_service: ProjectService
    comment_service: CommentService
    planset_service: PlansetService
    attendance_service: AttendanceService
    leave_service: LeaveService
    payroll_service: PayrollService


def build_container(*, clock: Callable[[], datetime] = now_local) -> Container:
    """Wire a fresh, empty set of stores and the services on top of them.

    Each call returns independent state; the application builds one at startup.
    """

    users_repo = InMemoryUserRepository(clock=clock)
    employees_repo = InMemoryEmployeeRepository(clock=clock)
    departments_repo = InMemoryDepartmentRepository(clock=clock)
    clients_repo = InMemoryClientRepository(clock=clock)
    projects_repo = InMemoryProjectRepository(clock=clock)
    comments_repo = InMemoryCommentRepository(clock=clock)
    plansets_repo = InMemoryPlansetRepository(clock=clock)
    attendance_repo = InMemoryAttendanceRepository(clock=clock)
    leave_repo = InMemoryLeaveRequestRepository(clock=clock)
    payroll_repo = InMemoryPayrollRepository(clock=clock)

    return Container(
        users_repo=users_repo,
        employees_repo=employees_repo,
        departments_repo=departments_repo,
        clients_repo=clients_repo,
        projects_repo=projects_repo,
        comments_repo=comments_repo,
        plansets_repo=plansets_repo,
        attendance_repo=attendance_repo,
        leave_repo=leave_repo,
        payroll_repo=payroll_repo,
        user_service=UserService(users_repo),
        employee_service=EmployeeService(employees_repo),
        department_service=DepartmentService(departments_repo),
        client_service=ClientService(clients_repo),
        project_service=ProjectService(projects_repo),
        comment_service=CommentService(comments_repo),
        planset_service=PlansetService(plansets_repo),
        attendance_service=AttendanceService(attendance_repo, clock=clock),
        leave_service=LeaveService(leave_repo, clock=clock),
        payroll_service=PayrollService(payroll_repo, calculator=StandardPayrollCalculator()),
    )
