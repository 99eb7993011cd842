from __future__ import annotations

import threading
from typing import Any, Mapping, Optional, Sequence

from ..common.schemas import parse_patch, parse_payload
from ..common.validators import require_non_empty
from ..core.exceptions import ConflictError
from .department_model import Department
from .department_repository import DepartmentRepository
from .model import Employee
from .repository import EmployeeRepository
from .schema import DepartmentCreate, EmployeeCreate


class EmployeeService:
    """Use case: manage employee records."""

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees
        # unique email: lookup and insert must not interleave
        self._lock = threading.Lock()

    def list_all(self) -> Sequence[Employee]:
        return self._employees.list_all()

    def get(self, employee_id: str) -> Optional[Employee]:
        return self._employees.get_by_id(employee_id)

    def create(self, payload: Mapping[str, Any]) -> Employee:
        data = parse_payload(EmployeeCreate, payload, message="Invalid employee data")
        with self._lock:
            if self._employees.get_by_email(data["email"]):
                raise ConflictError("Employee email already exists")
            return self._employees.create(data)

    def update(self, employee_id: str, payload: Mapping[str, Any]) -> Optional[Employee]:
        changes = parse_patch(EmployeeCreate, payload, message="Invalid employee data")
        return self._employees.update(employee_id, changes)

    def delete(self, employee_id: str) -> bool:
        return self._employees.delete_by_id(employee_id)

    def search(self, query: Optional[str]) -> Sequence[Employee]:
        query = require_non_empty(query, "Query parameter")
        return self._employees.search(query)


class DepartmentService:
    def __init__(self, departments: DepartmentRepository):
        self._departments = departments
        self._lock = threading.Lock()

    def list_all(self) -> Sequence[Department]:
        return self._departments.list_all()

    def get(self, department_id: str) -> Optional[Department]:
        return self._departments.get_by_id(department_id)

    def create(self, payload: Mapping[str, Any]) -> Department:
        data = parse_payload(DepartmentCreate, payload, message="Invalid department data")
        with self._lock:
            if self._departments.get_by_name(data["name"]):
                raise ConflictError("Department name already exists")
            return self._departments.create(data)

    def update(self, department_id: str, payload: Mapping[str, Any]) -> Optional[Department]:
        changes = parse_patch(DepartmentCreate, payload, message="Invalid department data")
        return self._departments.update(department_id, changes)

    def delete(self, department_id: str) -> bool:
        return self._departments.delete_by_id(department_id)
