# -*- coding: utf-8 -*-
# @version        : 1.0
# @Create Time    : 2021/10/19
# @File           : main.py
# @desc           : main
import asyncio
from fastapi import FastAPI
import uvicorn
from starlette.middleware.cors import CORSMiddleware
from config import settings, router
from core.exception import register_exception
import typer
from fastapi.middleware.gzip import GZipMiddleware
from core.event import lifespan
from core.logger import logger
from utils.tools import import_modules

shell_app = typer.Typer()


def create_app():
    """
    create FastAPI app
    docs_url： /docs
    redoc_url: /redoc
    """
    app = FastAPI(
        title=settings.TITLE,
        description=settings.DESCRIPTION,
        version=settings.VERSION,
        lifespan=lifespan
    )
    import_modules(settings.MIDDLEWARES, "Middlewares", app=app)
    register_exception(app)

    # support zip in response
    if settings.HTTP_RESPONSE_ZIP:
        app.add_middleware(GZipMiddleware, minimum_size=1000)

    # cross domain
    if settings.CORS_ORIGIN_ENABLE:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.ALLOW_ORIGINS,
            allow_credentials=settings.ALLOW_CREDENTIALS,
            allow_methods=settings.ALLOW_METHODS,
            allow_headers=settings.ALLOW_HEADERS
        )

    # app router
    for route in router.urlpatterns:
        app.include_router(route["ApiRouter"], prefix=route["prefix"], tags=route["tags"])

    return app


@shell_app.command()
def run(
        host: str = typer.Option(default='0.0.0.0', help='Host ip'),
        port: int = typer.Option(default=9138, help='Port')
):
    """
    start application
    """
    logger.info('starting app.......')
    uvicorn.run(app='main:create_app', host=host, port=port, workers=1, lifespan="on", factory=True)
    logger.info('exiting app......')


@shell_app.command()
def init():
    """
    create database tables
    """
    from core.database import create_tables
    logger.info("initialize...")
    asyncio.run(create_tables())


@shell_app.command()
def token(
        name: str = typer.Option(..., help='User name (sub)'),
        user_id: str = typer.Option('1', help='User id (jti)'),
        role: list[str] = typer.Option(['admin'], help='Role, repeat for more'),
        minutes: int = typer.Option(settings.ACCESS_TOKEN_EXPIRE_MINUTES, help='Lifetime in minutes')
):
    """
    mint a development token signed with settings.SECRET_KEY
    """
    from datetime import timedelta
    from apps.auth.token import AuthToken
    typer.echo(AuthToken.create_token({"sub": name, "jti": user_id, "role": role}, timedelta(minutes=minutes)))


if __name__ == '__main__':
    shell_app()
