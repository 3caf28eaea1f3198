import logging
from typing import Any, Dict, List, Optional, Union

from fastapi import Request

from util.enum import EntityKind

logger = logging.getLogger(__name__)

COURSE_CAPACITY = 3

# field names each kind accepts on create/update
FIELDS = {
    EntityKind.students: ("name", "email"),
    EntityKind.courses: ("title", "teacher"),
}
UNIQUE_FIELDS = {
    EntityKind.students: "email",
    EntityKind.courses: "title",
}
UNIQUE_ERRORS = {
    EntityKind.students: "Email must be unique",
    EntityKind.courses: "Course title must be unique",
}
NOT_FOUND_ERRORS = {
    EntityKind.students: "Student not found",
    EntityKind.courses: "Course not found",
}
IN_USE_ERRORS = {
    EntityKind.students: "Cannot delete student: enrolled in a course",
    EntityKind.courses: "Cannot delete course: students are enrolled",
}

SEED_STUDENTS = [
    {"name": "Alice", "email": "alice@example.com"},
    {"name": "Bob", "email": "bob@example.com"},
    {"name": "Carol", "email": "carol@example.com"},
]
SEED_COURSES = [
    {"title": "Math", "teacher": "Mr. Smith"},
    {"title": "Physics", "teacher": "Mrs. Johnson"},
    {"title": "History", "teacher": "Mr. Brown"},
]

Record = Dict[str, Any]
Result = Dict[str, Any]


class EnrollmentStore:
    """
    In-memory students, courses and the enrollments between them.

    Failures are returned, never raised: ``{"error": msg}`` for rule
    violations and ``False`` from ``remove`` when the id is unknown.
    Records handed out are copies; stored state only changes through
    the store's own methods.
    """

    def __init__(self):
        self.reset()

    def reset(self) -> None:
        """Drop every record and restart the id counters"""
        self._records: Dict[EntityKind, Dict[int, Record]] = {
            kind: {} for kind in EntityKind
        }
        self._next_id: Dict[EntityKind, int] = {kind: 1 for kind in EntityKind}
        self._enrollments: List[tuple] = []
        logger.info("Enrollment store reset")

    def seed(self) -> None:
        """Reload the fixed baseline of students and courses"""
        self.reset()
        for fields in SEED_STUDENTS:
            self.create(EntityKind.students, fields)
        for fields in SEED_COURSES:
            self.create(EntityKind.courses, fields)
        logger.info(
            "Enrollment store seeded with %d students and %d courses",
            len(SEED_STUDENTS),
            len(SEED_COURSES),
        )

    @staticmethod
    def _kind(kind: Union[str, EntityKind]) -> EntityKind:
        try:
            return EntityKind(kind)
        except ValueError:
            raise ValueError(f"Unknown record kind: {kind}") from None

    def _is_taken(
        self, kind: EntityKind, value: Any, exclude_id: Optional[int] = None
    ) -> bool:
        unique_field = UNIQUE_FIELDS[kind]
        return any(
            record[unique_field] == value and record_id != exclude_id
            for record_id, record in self._records[kind].items()
        )

    def _is_referenced(self, kind: EntityKind, record_id: int) -> bool:
        position = 0 if kind == EntityKind.students else 1
        return any(pair[position] == record_id for pair in self._enrollments)

    def create(self, kind: Union[str, EntityKind], fields: Dict[str, Any]) -> Result:
        kind = self._kind(kind)
        unique_field = UNIQUE_FIELDS[kind]
        if self._is_taken(kind, fields.get(unique_field)):
            return {"error": UNIQUE_ERRORS[kind]}

        record_id = self._next_id[kind]
        self._next_id[kind] += 1
        record = {"id": record_id}
        record.update({name: fields.get(name) for name in FIELDS[kind]})
        if kind == EntityKind.courses:
            record["capacity"] = COURSE_CAPACITY
        self._records[kind][record_id] = record
        logger.debug("Created %s %d", kind.value, record_id)
        return dict(record)

    def get(self, kind: Union[str, EntityKind], record_id: int) -> Optional[Record]:
        record = self._records[self._kind(kind)].get(record_id)
        return dict(record) if record else None

    def list(self, kind: Union[str, EntityKind]) -> List[Record]:
        return [dict(record) for record in self._records[self._kind(kind)].values()]

    def update(
        self, kind: Union[str, EntityKind], record_id: int, fields: Dict[str, Any]
    ) -> Result:
        """Apply the non-empty fields of ``fields`` to an existing record"""
        kind = self._kind(kind)
        record = self._records[kind].get(record_id)
        if record is None:
            return {"error": NOT_FOUND_ERRORS[kind]}

        changes = {name: fields[name] for name in FIELDS[kind] if fields.get(name)}
        unique_field = UNIQUE_FIELDS[kind]
        if unique_field in changes and self._is_taken(
            kind, changes[unique_field], exclude_id=record_id
        ):
            return {"error": UNIQUE_ERRORS[kind]}

        record.update(changes)
        logger.debug("Updated %s %d: %s", kind.value, record_id, sorted(changes))
        return dict(record)

    def remove(self, kind: Union[str, EntityKind], record_id: int) -> Union[bool, Result]:
        kind = self._kind(kind)
        if record_id not in self._records[kind]:
            return False
        if self._is_referenced(kind, record_id):
            return {"error": IN_USE_ERRORS[kind]}

        del self._records[kind][record_id]
        logger.debug("Removed %s %d", kind.value, record_id)
        return True

    def enroll(self, student_id: int, course_id: int) -> Result:
        if student_id not in self._records[EntityKind.students]:
            return {"error": "Student not found"}
        if course_id not in self._records[EntityKind.courses]:
            return {"error": "Course not found"}
        if (student_id, course_id) in self._enrollments:
            return {"error": "Student already enrolled in this course"}
        if len(self._course_enrollments(course_id)) >= COURSE_CAPACITY:
            return {"error": "Course is full"}

        self._enrollments.append((student_id, course_id))
        logger.debug("Enrolled student %d in course %d", student_id, course_id)
        return {"success": True}

    def unenroll(self, student_id: int, course_id: int) -> Result:
        if (student_id, course_id) not in self._enrollments:
            return {"error": "Enrollment not found"}

        self._enrollments.remove((student_id, course_id))
        logger.debug("Unenrolled student %d from course %d", student_id, course_id)
        return {"success": True}

    def _course_enrollments(self, course_id: int) -> List[tuple]:
        return [pair for pair in self._enrollments if pair[1] == course_id]

    def get_student_courses(self, student_id: int) -> List[Record]:
        courses = self._records[EntityKind.courses]
        return [
            dict(courses[course_id])
            for enrolled_id, course_id in self._enrollments
            if enrolled_id == student_id and course_id in courses
        ]

    def get_course_students(self, course_id: int) -> List[Record]:
        students = self._records[EntityKind.students]
        return [
            dict(students[student_id])
            for student_id, _ in self._course_enrollments(course_id)
            if student_id in students
        ]


def get_store(request: Request) -> EnrollmentStore:
    """Dependency returning the process-wide store held by the app"""
    return request.app.state.store
