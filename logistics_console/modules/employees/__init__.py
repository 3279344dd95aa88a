"""
Employees module.

Public API:
- IEmployeeService: Interface for employee operations
- EmployeeService: Implementation over the /employe endpoints
- Employee, UserAccount, TransporterProfile: Models
- StaffForm, OperatorForm, TransporterForm, EmployeeForm: Role-tagged forms
"""

from .interfaces import IEmployeeService
from .models import Employee, UserAccount, TransporterProfile
from .forms import (
    EmployeeForm,
    StaffForm,
    OperatorForm,
    TransporterForm,
    build_form,
    employee_form_adapter,
    form_class_for,
    visible_fields_for,
)
from .service import EmployeeService

__all__ = [
    "IEmployeeService",
    "EmployeeService",
    "Employee",
    "UserAccount",
    "TransporterProfile",
    "EmployeeForm",
    "StaffForm",
    "OperatorForm",
    "TransporterForm",
    "build_form",
    "employee_form_adapter",
    "form_class_for",
    "visible_fields_for",
]
