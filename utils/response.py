#!/usr/bin/python
# -*- coding: utf-8 -*-
# @version        : 1.0
# @Create Time    : 2022/8/10
# @File           : response.py
# @desc           : response envelope

import typing
from fastapi.responses import ORJSONResponse as Response
from fastapi import status as http_status
from utils import status as http


class SuccessResponse(Response):
    """
    {"code": 200, "msg": "success", "data": ...} plus any extra keys, e.g. count
    """
    def __init__(self, data=None, msg="success", code=http.HTTP_SUCCESS, status=http_status.HTTP_200_OK,
                 headers: typing.Mapping[str, str] | None = None, **kwargs):
        self.data = {
            "code": code,
            "msg": msg,
            "data": data
        }
        self.data.update(kwargs)
        super().__init__(content=self.data, status_code=status, headers=headers)
