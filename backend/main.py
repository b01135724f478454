# backend/main.py
import logging

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException
from dotenv import load_dotenv

load_dotenv()

from config import settings
from database import init_db
from exceptions import StorageException

# Routers
from routes.discs import router as discs_router
from routes.cart import router as cart_router
from routes.lessons import router as lessons_router
from routes.users import router as users_router

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# Load data files
init_db()

app = FastAPI(title="Disc Golf Store API", version="1.0.0")

# CORS Configuration
# The storefront frontend runs on the Angular dev server unless FRONTEND_URL says otherwise
origins = [
    "http://localhost:4200",
    "http://127.0.0.1:4200",
]

if settings.FRONTEND_URL:
    origins.append(settings.FRONTEND_URL)

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Failures answer with a bare status code, no body
@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return Response(status_code=exc.status_code, headers=getattr(exc, "headers", None))


@app.exception_handler(StorageException)
async def storage_exception_handler(request: Request, exc: StorageException):
    logger.error("%s %s failed: %r", request.method, request.url.path, exc, exc_info=exc)
    return Response(status_code=500)


# Register routers
app.include_router(discs_router)
app.include_router(cart_router)
app.include_router(lessons_router)
app.include_router(users_router)

@app.get("/")
def read_root():
    return {"message": "Disc Golf Store API is running"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="127.0.0.1", port=8080)
