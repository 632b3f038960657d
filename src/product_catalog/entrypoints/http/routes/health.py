from fastapi import APIRouter
from fastapi.responses import PlainTextResponse


router = APIRouter(tags=["Health"])


@router.get("/", response_class=PlainTextResponse, summary="Liveness check")
def root() -> str:
    return "Hello World!"


@router.get("/health", summary="Health check")
def health() -> dict[str, str]:
    return {"status": "ok"}
