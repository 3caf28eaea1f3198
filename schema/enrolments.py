from pydantic import BaseModel
from schema.students import StudentOut
from schema.courses import CourseOut


class StudentDetailOut(BaseModel):
    """A student together with the courses they are enrolled in"""

    student: StudentOut
    courses: list[CourseOut]
