from pydantic import BaseModel
from typing import Optional
from schema.students import StudentOut


class CourseIn(BaseModel):
    title: Optional[str] = None
    teacher: Optional[str] = None


class CourseUpdate(BaseModel):
    title: Optional[str] = None
    teacher: Optional[str] = None


class CourseOut(BaseModel):
    id: int
    title: str
    teacher: str
    capacity: int


class CourseListOut(BaseModel):
    courses: list[CourseOut]
    total: int


class CourseDetailOut(BaseModel):
    course: CourseOut
    students: list[StudentOut]
