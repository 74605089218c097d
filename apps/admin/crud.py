#!/usr/bin/python
# -*- coding: utf-8 -*-
# @version        : 1.0
# @Create Time    : 2024/02/12
# @File           : crud.py
# @IDE            : PyCharm
# @desc           : Data Access Layer

from typing import Any
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from config import settings
from core.crud import DalBase, RET, parse_id
from core.exception import CustomException, InvalidIdError, ParentNotFoundError, SelfParentError, MenuCycleError
from core.logger import logger
from . import model, schema
from .tree import build_menu_tree, flatten_menu_tree


class MenuDal(DalBase):

    def __init__(self, db: AsyncSession):
        super(MenuDal, self).__init__()
        self.db = db
        self.model = model.SysMenu
        self.schema = schema.Menu

    def ordering(self) -> list:
        # ties on (order, created_at) keep insertion order
        return [self.model.order.asc(), self.model.created_at.asc(), self.model.id.asc()]

    async def create_menu(self, data: schema.MenuIn, operator: str, v_ret: RET = RET.DUMP) -> Any:
        """
        create a menu, its parent must exist
        :param data: menu fields
        :param operator: created_by
        :param v_ret:
        :return:
        """
        params = data.model_dump()
        params["parent_id"] = await self.check_parent(params["parent_id"])
        params["roles"] = [model.SysMenuRole(role=role) for role in params["roles"]]
        params["created_by"] = operator
        menu = await self.create_data(params)
        logger.info(f"Menu {menu.id} '{menu.title}' created by {operator}, parent {menu.parent_id}")
        return self.out_dict(menu, v_ret)

    async def get_menu(self, menu_id: int | str, v_ret: RET = RET.DUMP) -> Any:
        return await self.get_data(parse_id(menu_id), v_ret=v_ret)

    async def update_menu(self, menu_id: int | str, data: schema.MenuUpdate, operator: str,
                          v_ret: RET = RET.DUMP) -> Any:
        """
        partial update
        parentId sent as null moves the menu to the root level
        roles sent replace the whole role set
        :param menu_id:
        :param data: only the fields set are applied
        :param operator: updated_by
        :param v_ret:
        :return:
        """
        menu_id = parse_id(menu_id)
        await self.get_data(menu_id)

        params = data.model_dump(exclude_unset=True)
        if params.get("parent_id") is not None:
            parent_id = await self.check_parent(params["parent_id"])
            if parent_id == menu_id:
                raise SelfParentError(menu_id)
            if settings.MENU_CYCLE_CHECK:
                await self.check_cycle(menu_id, parent_id)
            params["parent_id"] = parent_id
        if "roles" in params:
            params["roles"] = [model.SysMenuRole(role=role) for role in params["roles"]]
        params["updated_by"] = operator

        menu = await self.put_data(menu_id, params)
        logger.info(f"Menu {menu_id} updated by {operator}: {sorted(params.keys())}")
        return self.out_dict(menu, v_ret)

    async def delete_menu(self, menu_id: int | str, v_ret: RET = RET.DUMP) -> Any:
        """
        delete a menu and its direct children
        with settings.MENU_DEEP_DELETE the whole subtree goes
        grandchildren left behind keep pointing to the deleted menu and are shown as roots
        :param menu_id:
        :param v_ret:
        :return: the deleted menu
        """
        menu_id = parse_id(menu_id)
        menu = await self.get_data(menu_id)
        deleted = self.out_dict(menu, v_ret)

        if settings.MENU_DEEP_DELETE:
            child_ids = await self.get_descendant_ids(menu_id)
        else:
            child_ids = list(await self.db.scalars(select(self.model.id).where(self.model.parent_id == menu_id)))
        if child_ids:
            children = await self.get_datas(v_where=[self.model.id.in_(child_ids)])
            for child in children:
                await self.db.delete(child)
        await self.db.delete(menu)
        await self.db.flush()

        logger.info(f"Menu {menu_id} deleted with {len(child_ids)} descendant(s)")
        return deleted

    async def list_menus(self, role: str = None, tree: bool = False, v_ret: RET = RET.DUMP) -> list:
        """
        all menus in display order
        :param role: only menus whose roles contain it
        :param tree: nest children under parents
        :param v_ret: RET.SCHEMA or RET.DUMP
        :return: flat list or forest
        """
        v_where = []
        if role:
            v_where.append(self.model.roles.any(model.SysMenuRole.role == role))
        datas = await self.get_datas(v_where=v_where, v_order=self.ordering(), v_ret=RET.SCHEMA)
        if tree:
            datas = build_menu_tree(datas)
        return self.out_list(datas, v_ret)

    async def get_user_menus(self, roles: list[str], v_ret: RET = RET.DUMP) -> list:
        """
        menu tree visible to any of the given roles
        """
        if not roles:
            return []
        datas = await self.get_datas(
            v_where=[self.model.roles.any(model.SysMenuRole.role.in_(roles))],
            v_order=self.ordering(),
            v_ret=RET.SCHEMA
        )
        forest = build_menu_tree(datas)
        logger.debug(f"{sum(1 for _ in flatten_menu_tree(forest))} of {len(datas)} menus reachable for roles {roles}")
        return self.out_list(forest, v_ret)

    async def get_children(self, parent_id: int | str, v_ret: RET = RET.DUMP) -> list:
        """
        direct children only
        """
        try:
            parent_id = parse_id(parent_id)
        except InvalidIdError:
            return []
        return await self.get_datas(v_where=[self.model.parent_id == parent_id], v_order=self.ordering(),
                                    v_ret=v_ret)

    async def get_roots(self, v_ret: RET = RET.DUMP) -> list:
        return await self.get_datas(v_where=[self.model.parent_id.is_(None)], v_order=self.ordering(), v_ret=v_ret)

    async def check_parent(self, parent_ref: int | str | None) -> int | None:
        """
        resolve a parent reference sent by the client
        :param parent_ref: None means root
        :return: parent id
        """
        if parent_ref is None:
            return None
        try:
            parent_id = parse_id(parent_ref)
        except InvalidIdError:
            raise ParentNotFoundError(parent_ref)
        if await self.get_count(v_where=[self.model.id == parent_id]) == 0:
            raise ParentNotFoundError(parent_ref)
        return parent_id

    async def check_cycle(self, menu_id: int, parent_id: int) -> None:
        """
        walk up from the new parent, reaching menu_id means a cycle
        """
        current = parent_id
        for _ in range(settings.MENU_MAX_DEPTH):
            if current is None:
                return
            if current == menu_id:
                raise MenuCycleError(menu_id, parent_id)
            current = await self.db.scalar(select(self.model.parent_id).where(self.model.id == current))
        raise CustomException(f"Menu nesting exceeds {settings.MENU_MAX_DEPTH} levels", status_code=400)

    async def get_descendant_ids(self, menu_id: int) -> list[int]:
        """
        ids of the whole subtree below menu_id, level by level
        """
        found: list[int] = []
        seen = {menu_id}
        level = [menu_id]
        while level:
            sql = select(self.model.id).where(self.model.parent_id.in_(level))
            level = [i for i in await self.db.scalars(sql) if i not in seen]
            seen.update(level)
            found.extend(level)
        return found

    @staticmethod
    def out_list(datas: list, v_ret: RET = RET.DUMP) -> list:
        if v_ret == RET.DUMP:
            return [i.model_dump() for i in datas]
        return datas
