from rest_framework.exceptions import NotFound
from rest_framework.exceptions import ValidationError

from parlour.employees.models import Employee


def resolve_assignee(employee_id) -> Employee:
    """Return the employee a task may be assigned to.

    Raises ``NotFound`` for an unknown id and ``ValidationError`` when the
    employee has been deactivated.
    """
    employee = Employee.objects.filter(pk=employee_id).first()
    if employee is None:
        msg = "Employee not found"
        raise NotFound(msg)
    if not employee.is_active:
        raise ValidationError(
            {"assigned_to": ["Cannot assign task to inactive employee"]},
        )
    return employee
