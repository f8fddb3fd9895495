import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.sessions import SessionMiddleware

from app.core.config import (
    get_cors_origins,
    get_log_level,
    get_session_cookie,
    get_session_max_age,
    get_session_secret,
    is_production,
    seed_on_startup,
)
from app.core.errors import AppError
from app.db.session import SessionLocal, dispose_engine, init_db
from app.db.seed import seed_sample_data
from app.api.auth import router as auth_router
from app.api.users import router as users_router
from app.api.properties import router as properties_router
from app.api.favorites import router as favorites_router
from app.api.messages import router as messages_router
from app.api.notifications import router as notifications_router
from app.api.reviews import router as reviews_router
from app.api.neighborhoods import router as neighborhoods_router

logging.basicConfig(
    level=get_log_level(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("homeseeker")

app = FastAPI(title="HomeSeeker Real Estate API")

# Create tables
init_db()


@app.middleware("http")
async def add_security_headers(request: Request, call_next):
    response = await call_next(request)
    response.headers["X-Content-Type-Options"] = "nosniff"
    response.headers["X-Frame-Options"] = "DENY"
    response.headers["Referrer-Policy"] = "same-origin"
    return response


app.add_middleware(
    SessionMiddleware,
    secret_key=get_session_secret(),
    session_cookie=get_session_cookie(),
    max_age=get_session_max_age(),
    same_site="strict",
    https_only=is_production(),
)

origins = get_cors_origins()
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials="*" not in origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = [
        {"loc": list(err.get("loc", ())), "msg": str(err.get("msg")), "type": err.get("type")}
        for err in exc.errors()
    ]
    return JSONResponse(status_code=400, content={"message": "Validation failed", "errors": errors})


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"message": "Internal server error"})


@app.on_event("startup")
def startup():
    if seed_on_startup():
        db = SessionLocal()
        try:
            seed_sample_data(db)
        finally:
            db.close()
    logger.info("HomeSeeker API started")


@app.on_event("shutdown")
def shutdown():
    dispose_engine()


app.include_router(auth_router)
app.include_router(users_router)
app.include_router(properties_router)
app.include_router(favorites_router)
app.include_router(messages_router)
app.include_router(notifications_router)
app.include_router(reviews_router)
app.include_router(neighborhoods_router)


@app.get("/api/health")
def health():
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=True)
