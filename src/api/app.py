import logging

from fastapi import FastAPI, Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from libs.result import Error
from src.app.use_cases.errors import VALIDATION_ERROR

from .error import ApiError, FunctionError

logger = logging.getLogger(__name__)

FUNCTIONS_PREFIX = "/functions/"


async def handle_api_error(request: Request, exc: ApiError):
    error = exc.base_error
    if exc.status_code >= 500:
        logger.error(
            f"{request.method} {request.url.path} failed: {error.code} {error.message}"
        )
    else:
        logger.warning(
            f"{request.method} {request.url.path} rejected ({exc.status_code}): {error.code}"
        )
    return JSONResponse(status_code=exc.status_code, content=exc.body())


async def handle_validation_error(request: Request, exc: RequestValidationError):
    # Remote functions answer every failure as {error, details}
    if not request.url.path.startswith(FUNCTIONS_PREFIX):
        return await request_validation_exception_handler(request, exc)

    message = "; ".join(f"{err['loc'][-1]}: {err['msg']}" for err in exc.errors())
    return await handle_api_error(
        request, FunctionError(Error(VALIDATION_ERROR, message or "Invalid request"))
    )


def create_app(ApplicationConfig) -> FastAPI:
    app = FastAPI(title="Agency CRM API", version="0.1.0")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=ApplicationConfig.CORS_ALLOW_HEADERS,
    )

    from src.api.routes import clients, contacts, functions, health_check

    app.include_router(health_check.router, tags=["Health"])
    app.include_router(clients.router, tags=["Clients"])
    app.include_router(contacts.router, tags=["Contacts"])
    app.include_router(functions.router, tags=["Functions"])

    # Covers ClientError, ServerError and FunctionError
    app.add_exception_handler(ApiError, handle_api_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)

    return app
