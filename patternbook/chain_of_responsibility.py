"""Chain of responsibility pattern: requests passed up a line of employees."""

from __future__ import annotations

from typing import ClassVar, Optional


class Employee:
    """An employee who approves requests up to a limit and forwards the rest."""

    role: ClassVar[str] = "Employee"
    limit: ClassVar[Optional[int]] = None
    forward_note: ClassVar[str] = ""

    def __init__(self, next_employee: Optional["Employee"] = None) -> None:
        self.next_employee = next_employee

    def set_next(self, next_employee: Optional["Employee"]) -> None:
        self.next_employee = next_employee

    def approve_request(self, amount: int) -> str:
        """Handle a request and return the trail it left behind."""
        received = f"Request Recieved({self.role}): {amount} -> "
        if self.limit is None or amount <= self.limit:
            return f"{received}{self.role} Approved."
        if self.next_employee is not None:
            return received + self.forward_note + self.next_employee.approve_request(amount)
        return f"{received}No one can approve this request."


class Staff(Employee):
    role = "Staff"
    limit = 50000
    forward_note = "Approve Request to Manager from Staff -> "


class Manager(Employee):
    role = "Manager"
    limit = 500000
    forward_note = "Approve Request to President from Manager -> "


class President(Employee):
    role = "President"
    limit = None

    def __init__(self) -> None:
        super().__init__(None)


def main(argv=None) -> int:
    president = President()
    manager = Manager(president)
    staff_a = Staff(manager)
    staff_b = Staff()

    for amount in (3000, 300000, 30000000):
        print(staff_a.approve_request(amount))
    print(staff_b.approve_request(100000))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())