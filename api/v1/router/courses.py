from fastapi import APIRouter, Depends, Response
from controller.courses import CourseOp
from schema.courses import (
    CourseIn,
    CourseUpdate,
    CourseOut,
    CourseListOut,
    CourseDetailOut,
)
from service.storage import EnrollmentStore, get_store
from config.setting import settings

router = APIRouter(tags=["Courses"])


@router.get("/courses", response_model=CourseListOut)
async def list_courses(
    title: str = None,
    teacher: str = None,
    page: int = 1,
    limit: int = settings.DEFAULT_PAGE_SIZE,
    store: EnrollmentStore = Depends(get_store),
):
    courses, total = CourseOp.get_courses(
        store, title=title, teacher=teacher, page=page, limit=limit
    )
    return {"courses": courses, "total": total}


@router.get("/courses/{course_id}", response_model=CourseDetailOut)
async def get_course(
    course_id: str,
    store: EnrollmentStore = Depends(get_store),
):
    course = CourseOp.get_course_by_id(store, course_id=course_id)
    students = CourseOp.get_course_students(store, course_id=course_id)
    return {"course": course, "students": students}


@router.post("/courses", response_model=CourseOut, status_code=201)
async def create_course(
    data: CourseIn,
    store: EnrollmentStore = Depends(get_store),
):
    return CourseOp.add(store, data)


@router.put("/courses/{course_id}", response_model=CourseOut)
async def update_course(
    course_id: str,
    data: CourseUpdate,
    store: EnrollmentStore = Depends(get_store),
):
    return CourseOp.update(store, course_id=course_id, course_data=data)


@router.delete("/courses/{course_id}", status_code=204, response_class=Response)
async def delete_course(
    course_id: str,
    store: EnrollmentStore = Depends(get_store),
):
    CourseOp.delete(store, course_id=course_id)
    return Response(status_code=204)
