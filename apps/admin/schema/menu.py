#!/usr/bin/python
# -*- coding: utf-8 -*-
# @version        : 1.0
# @Create Time    : 2024/02/12
# @File           : menu.py
# @IDE            : PyCharm
# @desc           : pydantic model

from pydantic import BaseModel, Field, ConfigDict, field_validator
from core.data_types import DatetimeStr, MenuPath, RoleList, MenuType, ParentRef


class Menu(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int = Field(..., title="Id")
    parentId: int | None = Field(None, title="Parent id", alias='parent_id')
    title: str = Field(..., title="Title")
    path: str = Field(..., title="Path")
    icon: str | None = Field(None, title="Icon")
    roles: list[str] = Field(..., title="Roles")
    order: int = Field(0, title="Position")
    menuType: str = Field("main", title="Menu type", alias='menu_type')
    createdBy: str = Field(..., title="Created by", alias='created_by')
    createdAt: DatetimeStr = Field(..., title="Created at", alias='created_at')
    updatedBy: str | None = Field(None, title="Updated by", alias='updated_by')
    updatedAt: DatetimeStr | None = Field(None, title="Updated at", alias='updated_at')

    @field_validator("roles", mode="before")
    @classmethod
    def roles_validator(cls, v: list) -> list[str]:
        # ORM rows of sys_menu_role or plain names
        return [getattr(i, "role", i) for i in v]


class MenuNode(Menu):
    """
    menu with its resolved children, built per request
    """
    children: list["MenuNode"] = Field(default_factory=list, title="Children")


class MenuIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(..., min_length=1, max_length=100, title="Title")
    path: MenuPath = Field(..., title="Path")
    icon: str | None = Field(None, max_length=50, title="Icon")
    roles: RoleList = Field(..., title="Roles")
    parent_id: ParentRef = Field(None, title="Parent id", alias="parentId")
    order: int = Field(0, ge=0, title="Position")
    menu_type: MenuType = Field("main", title="Menu type", alias="menuType")


class MenuUpdate(BaseModel):
    """
    partial update, only the fields sent are applied
    """
    model_config = ConfigDict(populate_by_name=True)

    title: str | None = Field(None, min_length=1, max_length=100, title="Title")
    path: MenuPath | None = Field(None, title="Path")
    icon: str | None = Field(None, max_length=50, title="Icon")
    roles: RoleList | None = Field(None, title="Roles")
    parent_id: ParentRef = Field(None, title="Parent id", alias="parentId")
    order: int | None = Field(None, ge=0, title="Position")
    menu_type: MenuType | None = Field(None, title="Menu type", alias="menuType")

    @field_validator("title", "path", "roles", "order", "menu_type")
    @classmethod
    def not_null_validator(cls, v):
        if v is None:
            raise ValueError("Field cannot be null")
        return v
