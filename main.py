import logging
from pathlib import Path

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.cache import cache
from app.core.config import settings
from app.core.exceptions import AppError
from app.core.logging import configure_logging
from app.endpoints import auth, career_resource, course, curriculum, degree, instructor, notification, review, success_story, user
from app.middleware.exceptions import global_exception_handler, validation_exception_handler
from app.middleware.logging import RequestLoggingMiddleware
from app.realtime.server_context import RealtimeContext

logger = logging.getLogger("app")


def create_app() -> FastAPI:
    configure_logging()

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=1000)
    app.add_middleware(RequestLoggingMiddleware)

    realtime = RealtimeContext(cors_allowed_origins=settings.ALLOWED_ORIGINS)
    app.state.realtime = realtime
    app.mount("/socket.io", realtime.asgi_app)

    Path(settings.UPLOAD_DIR).mkdir(parents=True, exist_ok=True)
    app.mount("/uploads", StaticFiles(directory=settings.UPLOAD_DIR), name="uploads")

    app.add_exception_handler(AppError, global_exception_handler)
    app.add_exception_handler(StarletteHTTPException, global_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, global_exception_handler)

    app.include_router(auth.router, prefix="/auth", tags=["Auth"])
    app.include_router(user.router, prefix="/user", tags=["Users"])
    app.include_router(course.router, prefix="/course", tags=["Courses"])
    app.include_router(curriculum.module_router, prefix="/module", tags=["Modules"])
    app.include_router(curriculum.topic_router, prefix="/topic", tags=["Topics"])
    app.include_router(degree.router, prefix="/degree", tags=["Degrees"])
    app.include_router(instructor.router, prefix="/instructor", tags=["Instructors"])
    app.include_router(career_resource.resource_router, prefix="/careerResource", tags=["Career Resources"])
    app.include_router(
        career_resource.category_router, prefix="/careerResourceCategories", tags=["Career Resource Categories"]
    )
    app.include_router(success_story.router, prefix="/successStory", tags=["Success Stories"])
    app.include_router(review.router, prefix="/review", tags=["Reviews"])
    app.include_router(notification.router, prefix="/notifications", tags=["Notifications"])

    @app.on_event("startup")
    async def startup_event():
        realtime.start()
        logger.info(f"{settings.PROJECT_NAME} started (cache backend: {type(cache.backend).__name__})")

    @app.on_event("shutdown")
    async def shutdown_event():
        realtime.stop()
        await cache.close()

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
