#!/usr/bin/python
# -*- coding: utf-8 -*-
# @version        : 1.0
# @Create Time    : 2024/4/18
# @File           : crud.py
# @desc           : Data Access Layer base

"""
Every Dal binds one ORM model and one pydantic schema to a session.

Return mode of the read methods is picked with ``v_ret``:

- ``RET.ORM``: the ORM object(s), for further changes in the same session
- ``RET.SCHEMA``: pydantic object(s) validated from the ORM object(s)
- ``RET.DUMP``: plain dict(s), ready for a response
"""

import re
from enum import IntEnum
from typing import Any
from pydantic import BaseModel
from sqlalchemy import select, func, Select
from sqlalchemy.ext.asyncio import AsyncSession
from core.exception import CustomException, InvalidIdError, NotFoundError


class RET(IntEnum):
    ORM = 0
    SCHEMA = 1
    DUMP = 2


ID_PATTERN = re.compile(r"^[1-9][0-9]*$")


def parse_id(value: Any) -> int:
    """
    store ids are positive integers
    :param value: int or digit string
    :return: id
    """
    if isinstance(value, bool):
        raise InvalidIdError(value)
    if isinstance(value, int):
        if value > 0:
            return value
        raise InvalidIdError(value)
    if isinstance(value, str) and ID_PATTERN.match(value.strip()):
        return int(value.strip())
    raise InvalidIdError(value)


class DalBase:

    def __init__(self, db: AsyncSession = None, model: Any = None, schema: Any = None):
        self.db = db
        self.model = model
        self.schema = schema

    async def get_data(
            self,
            data_id: int | str = None,
            v_options: list = None,
            v_where: list = None,
            v_ret: RET = RET.ORM,
            v_schema: Any = None
    ) -> Any:
        """
        get one record
        :param data_id: primary key, parsed with parse_id
        :param v_options: loader options
        :param v_where: where clauses
        :param v_ret: return mode
        :param v_schema: schema overriding self.schema
        :return:
        """
        sql = select(self.model)
        if data_id is not None:
            sql = sql.where(self.model.id == parse_id(data_id))
        sql = self.add_filter_condition(sql, v_options, v_where)

        queryset = await self.db.scalars(sql)
        data = queryset.unique().first()
        if data is None:
            raise NotFoundError(data_id)
        return self.out_dict(data, v_ret, v_schema)

    async def get_datas(
            self,
            v_options: list = None,
            v_where: list = None,
            v_order: list = None,
            v_ret: RET = RET.ORM,
            v_schema: Any = None
    ) -> list:
        """
        get a list of records
        :param v_order: order_by clauses
        :return: datas
        """
        sql = self.add_filter_condition(select(self.model), v_options, v_where)
        if v_order:
            sql = sql.order_by(*v_order)

        queryset = await self.db.scalars(sql)
        return [self.out_dict(i, v_ret, v_schema) for i in queryset.unique().all()]

    async def get_count(self, v_where: list = None) -> int:
        sql = select(func.count(self.model.id).label('total')).select_from(self.model)
        sql = self.add_filter_condition(sql, None, v_where)
        queryset = await self.db.execute(sql)
        return queryset.one()[0]

    async def create_data(self, data: dict | BaseModel, v_ret: RET = RET.ORM, v_schema: Any = None) -> Any:
        """
        insert a record
        :param data: column values, pydantic params are dumped first
        """
        if isinstance(data, BaseModel):
            data = data.model_dump()
        obj = self.model(**data)
        await self.flush(obj)
        return self.out_dict(obj, v_ret, v_schema)

    async def put_data(self, data_id: int | str, data: dict | BaseModel, v_ret: RET = RET.ORM,
                       v_schema: Any = None) -> Any:
        """
        partial update of a record
        :param data: only the fields present are written, pydantic params are dumped with exclude_unset
        """
        obj = await self.get_data(data_id)
        if isinstance(data, BaseModel):
            data = data.model_dump(exclude_unset=True)
        fields = self.model.get_column_attrs() + self.model.get_relationships_attrs()
        for key, value in data.items():
            if key not in fields:
                raise CustomException(f"Unknown field: {key}", status_code=400)
            setattr(obj, key, value)
        await self.flush(obj)
        return self.out_dict(obj, v_ret, v_schema)

    async def flush(self, obj: Any = None) -> Any:
        """
        write pending changes and reload server side defaults
        """
        if obj is not None:
            self.db.add(obj)
        await self.db.flush()
        if obj is not None:
            await self.db.refresh(obj)
        return obj

    @staticmethod
    def add_filter_condition(sql: Select, v_options: list = None, v_where: list = None) -> Select:
        if v_options:
            sql = sql.options(*v_options)
        if v_where:
            sql = sql.where(*v_where)
        return sql

    def out_dict(self, obj: Any, v_ret: RET = RET.ORM, v_schema: Any = None) -> Any:
        if v_ret == RET.ORM:
            return obj
        schema = v_schema or self.schema
        data = schema.model_validate(obj)
        if v_ret == RET.SCHEMA:
            return data
        return data.model_dump()
