from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from agencyhub.app.services.token_codec import InviteTokenCodec
from .error import ClientError, ServerError
import logging

logger = logging.getLogger(__name__)


async def handle_client_error(request: Request, exc: ClientError):
    error_dict = {"code": exc.base_error.code, "message": exc.base_error.message}
    if exc.base_error.details:
        error_dict["details"] = exc.base_error.details
    logger.warning(f"Client error: {error_dict}")
    return JSONResponse(status_code=exc.status_code, content={"error": error_dict})


async def handle_server_error(request: Request, exc: ServerError):
    message = exc.base_error.message if exc.expose_message else "Internal server error"
    error_dict = {"code": exc.base_error.code, "message": message}
    logger.error(f"Server error: {exc.base_error.code}")
    return JSONResponse(status_code=exc.status_code, content={"error": error_dict})


def create_app(ApplicationConfig) -> FastAPI:
    app = FastAPI(title="Agency Hub API", version="0.1.0")

    app.state.config = ApplicationConfig
    # Misconfigured invite token hashing must stop startup
    app.state.token_codec = InviteTokenCodec.from_config(ApplicationConfig)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from agencyhub.api.routes import auth, health_check, invitation

    app.include_router(health_check.router, tags=["Health"])
    app.include_router(auth.router, tags=["Authentication"])
    app.include_router(invitation.router, tags=["Invitations"])

    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(ServerError, handle_server_error)

    return app
