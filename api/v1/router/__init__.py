from api.v1.router.students import router as students
from api.v1.router.courses import router as courses
from api.v1.router.enrolment import router as enrolment
