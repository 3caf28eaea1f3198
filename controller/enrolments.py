from typing import Union
from error import raise_for_result
from service.storage import EnrollmentStore
from util.params import to_record_id


class EnrolmentOp:
    @staticmethod
    def enroll_a_student(
        store: EnrollmentStore, student_id: Union[int, str], course_id: Union[int, str]
    ) -> dict:
        result = store.enroll(to_record_id(student_id), to_record_id(course_id))
        raise_for_result(result)
        return result

    @staticmethod
    def unenroll_a_student(
        store: EnrollmentStore, student_id: Union[int, str], course_id: Union[int, str]
    ) -> dict:
        result = store.unenroll(to_record_id(student_id), to_record_id(course_id))
        raise_for_result(result)
        return result
