#!/usr/bin/python
# -*- coding: utf-8 -*-
# @version        : 1.0
# @Create Time    : 2021/10/19
# @File           : middleware.py
# @desc           : middleware

import time
from fastapi import FastAPI, Request, Response
from core.logger import logger


def register_request_log_middleware(app: FastAPI):
    """
    log method, path, status and time of every request
    """

    @app.middleware("http")
    async def request_log_middleware(request: Request, call_next) -> Response:
        start_time = time.time()
        response = await call_next(request)
        process_time = round(time.time() - start_time, 5)
        client = request.client.host if request.client else "-"
        logger.info(f"{client} {request.method} {request.url.path} {response.status_code} {process_time}s")
        return response
