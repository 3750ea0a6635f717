import logging

from fastapi import FastAPI, Request, status
from starlette.requests import HTTPConnection
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from securechat.api.routes.auth import router as auth_router
from securechat.api.routes.calls import router as calls_router
from securechat.api.routes.files import router as files_router
from securechat.api.routes.messages import router as messages_router
from securechat.api.routes.users import router as users_router
from securechat.core.config import settings
from securechat.core.exceptions import NotFoundError
from securechat.db.init_db import init_db
from securechat.schemas.common import ApiResponse

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


app = FastAPI(title="Secure Chat", version="0.1.0")

app.include_router(auth_router)
app.include_router(users_router)
app.include_router(messages_router)
app.include_router(files_router)
app.include_router(calls_router)


@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError):
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content=ApiResponse.fail(exc.message).model_dump(),
    )


@app.exception_handler(SQLAlchemyError)
async def store_error_handler(request: HTTPConnection, exc: SQLAlchemyError):
    # also reached from websocket routes, which have no HTTP method
    method = getattr(request, "method", "WS")
    logger.error("Store failure on %s %s: %s", method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content=ApiResponse.fail("Store unavailable").model_dump(),
    )


@app.on_event("startup")
def _startup() -> None:
    init_db()


@app.get("/health")
def health():
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("securechat.main:app", host="0.0.0.0", port=8000)
