# -*- coding: utf-8 -*-
# @version        : 1.0
# @Create Time    : 2021/10/19
# @File           : exception.py
# @desc           : Global exception

from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from fastapi.exceptions import RequestValidationError
from starlette import status
from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi import FastAPI
from core.logger import logger
from config.settings import DEVELOPMENT


class CustomException(Exception):

    def __init__(
            self,
            msg: str,
            code: int = status.HTTP_400_BAD_REQUEST,
            status_code: int = status.HTTP_200_OK,
            desc: str = None
    ):
        super().__init__(msg)
        self.msg = msg
        self.code = code
        self.status_code = status_code
        self.desc = desc


class InvalidIdError(CustomException):
    """
    id is not well formed for the store
    """
    def __init__(self, value, desc: str = None):
        super().__init__(f"Invalid id: {value!r}", code=status.HTTP_400_BAD_REQUEST,
                         status_code=status.HTTP_400_BAD_REQUEST, desc=desc)
        self.value = value


class NotFoundError(CustomException):
    def __init__(self, value, desc: str = None):
        super().__init__(f"Menu {value} not found", code=status.HTTP_404_NOT_FOUND,
                         status_code=status.HTTP_404_NOT_FOUND, desc=desc)
        self.value = value


class ParentNotFoundError(CustomException):
    def __init__(self, value, desc: str = None):
        super().__init__(f"Parent menu {value!r} not found", code=status.HTTP_400_BAD_REQUEST,
                         status_code=status.HTTP_400_BAD_REQUEST, desc=desc)
        self.value = value


class SelfParentError(CustomException):
    def __init__(self, value, desc: str = None):
        super().__init__(f"Menu {value} cannot be its own parent", code=status.HTTP_400_BAD_REQUEST,
                         status_code=status.HTTP_400_BAD_REQUEST, desc=desc)
        self.value = value


class MenuCycleError(CustomException):
    """
    only raised when settings.MENU_CYCLE_CHECK is on
    """
    def __init__(self, value, parent, desc: str = None):
        super().__init__(f"Menu {parent} is a descendant of menu {value}", code=status.HTTP_400_BAD_REQUEST,
                         status_code=status.HTTP_400_BAD_REQUEST, desc=desc)
        self.value = value
        self.parent = parent


def register_exception(app: FastAPI):
    @app.exception_handler(CustomException)
    async def custom_exception_handler(request: Request, exc: CustomException):
        if DEVELOPMENT:
            logger.debug(f"URL {request.url}, {type(exc).__name__}: {exc.msg} {exc.desc or ''}")
        if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
            logger.exception(exc)
        else:
            logger.warning(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.msg}")
        return JSONResponse(
            status_code=exc.status_code,
            content={"msg": exc.msg, "code": exc.code},
        )

    @app.exception_handler(StarletteHTTPException)
    async def unicorn_exception_handler(request: Request, exc: StarletteHTTPException):
        if DEVELOPMENT:
            logger.debug(f"HTTPException: {request.url} {exc.detail}")
        logger.warning(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.detail}")
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "code": exc.status_code,
                "msg": exc.detail,
            }
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        if DEVELOPMENT:
            logger.debug(f"URL {request.url}, validation errors: {exc.errors()}")
        msg = exc.errors()[0].get("msg")
        logger.warning(f"{request.method} {request.url.path} -> 400: {msg}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=jsonable_encoder(
                {
                    "msg": msg,
                    "body": exc.body,
                    "code": status.HTTP_400_BAD_REQUEST
                }
            ),
        )

    @app.exception_handler(ValueError)
    async def value_exception_handler(request: Request, exc: ValueError):
        if DEVELOPMENT:
            logger.debug(f"URL {request.url}, ValueError: {exc}")
        logger.exception(exc)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=jsonable_encoder(
                {
                    "msg": exc.__str__(),
                    "code": status.HTTP_400_BAD_REQUEST
                }
            ),
        )

    @app.exception_handler(Exception)
    async def all_exception_handler(request: Request, exc: Exception):
        if DEVELOPMENT:
            logger.debug(f"URL {request.url}, unhandled: {exc}")
        logger.exception(exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=jsonable_encoder(
                {
                    "msg": "interface exception！",
                    "code": status.HTTP_500_INTERNAL_SERVER_ERROR
                }
            ),
        )
