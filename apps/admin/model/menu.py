#!/usr/bin/python
# -*- coding: utf-8 -*-
# @version        : 1.0
# @Create Time    : 2024/2/10
# @File           : menu.py
# @IDE            : PyCharm
# @desc           : Menu

from typing import Optional
from db.db_base import BaseDbModel
from core.database import Base
from sqlalchemy import String, Integer, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship


class SysMenu(BaseDbModel):
    __tablename__ = "sys_menu"
    __table_args__ = ({'comment': 'Menu'})

    # plain reference, not a foreign key: deleting a parent may leave grandchildren pointing to it
    parent_id: Mapped[Optional[int]] = mapped_column(Integer, index=True, comment="Parent id")
    title: Mapped[str] = mapped_column(String(100), comment="Title")
    path: Mapped[str] = mapped_column(String(200), comment="Path")
    icon: Mapped[Optional[str]] = mapped_column(String(50), comment="Icon")
    order: Mapped[int] = mapped_column("order", Integer, default=0, comment="Position among siblings")
    menu_type: Mapped[str] = mapped_column(String(16), default="main", comment="Menu type")

    roles: Mapped[list["SysMenuRole"]] = relationship(
        back_populates="menu",
        cascade="all, delete-orphan",
        lazy="selectin",
        order_by="SysMenuRole.id"
    )


class SysMenuRole(Base):
    __tablename__ = "sys_menu_role"
    __table_args__ = ({'comment': 'Roles a menu is visible to'})

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    menu_id: Mapped[int] = mapped_column(ForeignKey("sys_menu.id", ondelete="CASCADE"), index=True, comment="Menu id")
    role: Mapped[str] = mapped_column(String(64), index=True, comment="Role name")

    menu: Mapped[SysMenu] = relationship(back_populates="roles")
