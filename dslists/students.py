"""Student records kept in a singly linked list."""

from __future__ import annotations

import sys
from dataclasses import dataclass

from dslists.singly import LinkedList


@dataclass
class Student:
    """A student record."""

    student_id: int
    name: str
    birth_date: str
    hometown: str
    score: float


def format_student(student: Student) -> str:
    """Return the student's record as labelled lines and a blank line."""
    return (
        f"MSSV: {student.student_id}\n"
        f"Ho ten: {student.name}\n"
        f"Ngay sinh: {student.birth_date}\n"
        f"Que quan: {student.hometown}\n"
        f"Diem: {student.score:g}\n\n"
    )


def by_id(a: Student, b: Student) -> bool:
    """Order students by ascending id."""
    return a.student_id < b.student_id


def main(argv: list[str] | None = None) -> int:
    """Build a small student list and print it before and after sorting."""
    out = sys.stdout
    students: LinkedList[Student] = LinkedList()
    students.push_front(Student(1001, "Nguyen Van A", "01/01/2000", "Ha Noi", 7.5))
    students.push_back(Student(1003, "Tran Thi B", "02/02/2001", "Hai Phong", 8.2))
    students.insert_sorted(
        Student(1002, "Le Van C", "03/03/2002", "Da Nang", 9.0), by_id
    )

    out.write("=== DANH SACH ===\n")
    out.write(students.render(format_student))

    out.write("\nSau khi sap xep:\n")
    students.sort(by_id)
    out.write(students.render(format_student))

    students.clear()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())