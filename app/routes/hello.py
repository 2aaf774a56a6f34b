from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from app.services.greeting import DEFAULT_GUEST_NAME, greet_with_name, say_hello

router = APIRouter(tags=["hello"])


@router.get("/", response_class=PlainTextResponse)
async def root():
    return say_hello()


@router.get("/greet", response_class=PlainTextResponse)
async def greet(name: str = DEFAULT_GUEST_NAME):
    return greet_with_name(name)
