#!/usr/bin/python
# -*- coding: utf-8 -*-
# @version        : 1.0
# @Create Time    : 2024/02/12
# @File           : tree.py
# @IDE            : PyCharm
# @desc           : menu tree

"""
Assemble flat menu records into a forest.

The records are expected in display order (order, created at). Siblings
and roots keep that relative order. A record whose parent is missing
from the given list is shown as a root, so a role filter that hides a
parent does not hide its visible children.

Cycles are not detected here, they are rejected (optionally) when a
parent is assigned. Records that only reach each other through a cycle
never become roots and are left out of the forest.
"""

from typing import Iterable, Iterator
from core.logger import logger
from .schema import Menu, MenuNode


def build_menu_tree(menus: Iterable[Menu]) -> list[MenuNode]:
    """
    build the forest in two passes, no recursion
    :param menus: sorted menu records, not modified
    :return: root nodes
    """
    menus = list(menus)

    # 1st pass: a node per record, indexed by id
    nodes: dict[int, MenuNode] = {}
    for menu in menus:
        nodes[menu.id] = MenuNode(**menu.model_dump(exclude={"children"}), children=[])

    # 2nd pass: attach to the parent node, or promote to root
    roots: list[MenuNode] = []
    for menu in menus:
        node = nodes[menu.id]
        if menu.parentId is None:
            roots.append(node)
            continue
        parent = nodes.get(menu.parentId)
        if parent is None:
            logger.debug(f"Menu {menu.id} has unresolved parent {menu.parentId}, shown as root")
            roots.append(node)
        else:
            parent.children.append(node)
    return roots


def flatten_menu_tree(forest: Iterable[MenuNode]) -> Iterator[MenuNode]:
    """
    depth first walk, parents before children
    """
    stack = list(reversed(list(forest)))
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))
