from fastapi import APIRouter, Depends, Response
from controller.enrolments import EnrolmentOp
from service.storage import EnrollmentStore, get_store

router = APIRouter(tags=["Enrolments"])


@router.post(
    "/courses/{course_id}/students/{student_id}",
    status_code=204,
    response_class=Response,
)
async def enroll_a_student(
    course_id: str,
    student_id: str,
    store: EnrollmentStore = Depends(get_store),
):
    EnrolmentOp.enroll_a_student(store, student_id=student_id, course_id=course_id)
    return Response(status_code=204)


@router.delete(
    "/courses/{course_id}/students/{student_id}",
    status_code=204,
    response_class=Response,
)
async def unenroll_a_student(
    course_id: str,
    student_id: str,
    store: EnrollmentStore = Depends(get_store),
):
    EnrolmentOp.unenroll_a_student(store, student_id=student_id, course_id=course_id)
    return Response(status_code=204)
