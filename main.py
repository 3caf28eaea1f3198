import logging
from fastapi import FastAPI, responses
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from api.v1.router import students, courses, enrolment
from service.storage import EnrollmentStore
import handler as hlp
from config.setting import settings
from error import ServerError

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title="Course Roster API",
    version="1.0.0",
    description="Students, courses and the enrolments between them",
)

# One store per process, handed to routes through service.storage.get_store
app.state.store = EnrollmentStore()
if settings.SEED_DATA:
    app.state.store.seed()

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(GZipMiddleware, minimum_size=1000)


app.add_exception_handler(ValueError, hlp.value_error_handler)
app.add_exception_handler(ValidationError, hlp.validation_error_handler)
app.add_exception_handler(RequestValidationError, hlp.validation_error_handler)
app.add_exception_handler(StarletteHTTPException, hlp.validation_http_exceptions_handler)
app.add_exception_handler(ServerError, hlp.server_error_handler)


app.include_router(students, prefix=settings.API_PREFIX)
app.include_router(courses, prefix=settings.API_PREFIX)
app.include_router(enrolment, prefix=settings.API_PREFIX)


@app.get("/", include_in_schema=False)
def redirect_to_docs():
    return responses.RedirectResponse("/docs")
