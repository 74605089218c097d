#!/usr/bin/python
# -*- coding: utf-8 -*-
# @version        : 1.0
# @Create Time    : 2023/7/16 12:42
# @File           : data_types.py
# @desc           : custom data type


import datetime
from typing import Annotated
from pydantic import AfterValidator, BeforeValidator, PlainSerializer, WithJsonSchema, StringConstraints
from .validator import *


def datetime_str_vali(value: str | datetime.datetime):
    """
    Date time validation
    """
    if isinstance(value, str):
        pattern = "%Y-%m-%d %H:%M:%S"
        try:
            datetime.datetime.strptime(value, pattern)
            return value
        except ValueError:
            pass
    elif isinstance(value, datetime.datetime):
        return value.strftime("%Y-%m-%d %H:%M:%S")
    raise ValueError("invalid data")


# 实现自定义一个日期时间字符串的数据类型
DatetimeStr = Annotated[
    str | datetime.datetime,
    AfterValidator(datetime_str_vali),
    PlainSerializer(lambda x: x, return_type=str),
    WithJsonSchema({'type': 'string'}, mode='serialization')
]


# menu navigation target
MenuPath = Annotated[
    str,
    StringConstraints(min_length=1, max_length=200),
    AfterValidator(lambda x: vali_path(x)),
]


# role names of a menu, at least one
RoleList = Annotated[
    list[str],
    AfterValidator(lambda x: vali_roles(x)),
]


MenuType = Annotated[
    str,
    AfterValidator(lambda x: vali_menu_type(x)),
]


def parent_ref_vali(value):
    """
    '' and None both mean root, anything else is resolved by the data layer
    """
    if isinstance(value, str) and not value.strip():
        return None
    return value


# parent reference as sent by the client
ParentRef = Annotated[
    int | str | None,
    BeforeValidator(parent_ref_vali),
]
