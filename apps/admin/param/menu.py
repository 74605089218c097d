#!/usr/bin/python
# -*- coding: utf-8 -*-
# @version        : 1.0
# @Create Time    : 2024/02/12
# @File           : menu.py
# @IDE            : PyCharm
# @desc           : SysMenu

from fastapi import Query
from core.dependencies import QueryParams


class MenuParams(QueryParams):
    def __init__(
            self,
            role: str | None = Query(None, min_length=1, description="Only menus visible to this role"),
            tree: bool = Query(False, description="Nest children under their parents")
    ):
        super().__init__()
        self.role = role
        self.tree = tree
