#!/usr/bin/python
# -*- coding: utf-8 -*-
# @version        : 1.0
# @Create Time    : 2024/4/18
# @File           : validator.py
# @desc           : pydantic validation

MENU_TYPES = ("main", "submenu", "setting", "link", "action")


def vali_path(value: str) -> str:
    """
    menu path validation
    :param value: navigation target
    :return: path
    """
    if not value or not value.startswith("/"):
        raise ValueError("Path must start with forward slash (/)")
    return value


def vali_roles(value: list[str]) -> list[str]:
    """
    role names validation, duplicates are dropped keeping the first one
    :param value: role names
    :return: role names
    """
    roles = []
    for role in value:
        role = role.strip()
        if not role:
            raise ValueError("Role name cannot be empty")
        if role not in roles:
            roles.append(role)
    if not roles:
        raise ValueError("At least one role is required")
    return roles


def vali_menu_type(value: str) -> str:
    if value not in MENU_TYPES:
        raise ValueError(f"Menu type must be one of: {', '.join(MENU_TYPES)}")
    return value
