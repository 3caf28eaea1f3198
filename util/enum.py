import enum


class EntityKind(str, enum.Enum):
    """Record collections held by the enrollment store."""

    students = "students"
    courses = "courses"
