from pydantic import BaseModel
from typing import Optional


class StudentIn(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None


class StudentUpdate(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None


class StudentOut(BaseModel):
    id: int
    name: str
    email: str


class StudentListOut(BaseModel):
    students: list[StudentOut]
    total: int
