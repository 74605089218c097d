#!/usr/bin/python
# -*- coding: utf-8 -*-
# @version        : 1.0
# @Create Time    : 2022/3/21
# @File           : event.py
# @desc           : global events


from fastapi import FastAPI
from contextlib import asynccontextmanager
from config.settings import EVENTS
from core.database import async_engine, create_tables
from core.logger import logger
from utils.tools import import_modules_async


@asynccontextmanager
async def lifespan(app: FastAPI):

    await import_modules_async(EVENTS, "GlobalEvent", app=app, status=True)

    yield

    await import_modules_async(EVENTS, "GlobalEvent", app=app, status=False)


async def init_db(app: FastAPI, status: bool):
    """
    create missing tables on start up, release the pool on shut down
    :param app:
    :param status:
    :return:
    """
    if status:
        await create_tables(async_engine)
        logger.info(f"Database ready: {async_engine.url.render_as_string(hide_password=True)}")
    else:
        await async_engine.dispose()
        logger.info("Database closed")
