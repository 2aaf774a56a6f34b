import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pymongo.errors import PyMongoError

from app.config import settings
from app.crud.user import create_indexes
from app.database import get_db
from app.routes import hello, users

# Configure logging
logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    try:
        provider = app.dependency_overrides.get(get_db, get_db)
        await create_indexes(await provider())
    except PyMongoError as e:
        logger.error(f"Could not create user indexes: {str(e)}")
    yield


app = FastAPI(title=settings.app_title, lifespan=lifespan)

# --- CORS Middleware ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- Routes ---
app.include_router(hello.router)
app.include_router(users.router)
