#!/usr/bin/python
# -*- coding: utf-8 -*-
# @version        : 1.0
# @Create Time    : 2024/02/12
# @File           : views.py
# @IDE            : PyCharm
# @desc           : Router，View

from utils.response import SuccessResponse
from fastapi import APIRouter, Depends
from apps.auth.auth import Auth, OpenAuth, AllUserAuth, FullAdminAuth
from . import crud, param, schema


app = APIRouter()


###########################################################
#    SysMenu
###########################################################
@app.post("/menu/create", summary="Create a Sys Menu")
async def create_menu(data: schema.MenuIn, auth: Auth = Depends(FullAdminAuth())):
    menu = await crud.MenuDal(auth.db).create_menu(data, auth.operator)
    return SuccessResponse(menu)


@app.post("/menu/list", summary="List Sys Menus, flat or as a tree")
async def list_menu(req: param.MenuParams = Depends(), auth: Auth = Depends(OpenAuth())):
    datas = await crud.MenuDal(auth.db).list_menus(**req.dict())
    return SuccessResponse(datas, count=len(datas))


@app.post("/menu/get", summary="Get a Sys Menu")
async def get_menu(menu_id: str, auth: Auth = Depends(OpenAuth())):
    data = await crud.MenuDal(auth.db).get_menu(menu_id)
    return SuccessResponse(data)


@app.put("/menu/update", summary="Update a Sys Menu")
async def update_menu(menu_id: str, data: schema.MenuUpdate, auth: Auth = Depends(FullAdminAuth())):
    menu = await crud.MenuDal(auth.db).update_menu(menu_id, data, auth.operator)
    return SuccessResponse(menu)


@app.delete("/menu/delete", summary="Delete a Sys Menu and its children")
async def delete_menu(menu_id: str, auth: Auth = Depends(FullAdminAuth())):
    await crud.MenuDal(auth.db).delete_menu(menu_id)
    return SuccessResponse(True, msg="delete successfully")


@app.post("/menu/children", summary="List direct children of a Sys Menu")
async def list_menu_children(parent_id: str, auth: Auth = Depends(OpenAuth())):
    datas = await crud.MenuDal(auth.db).get_children(parent_id)
    return SuccessResponse(datas, count=len(datas))


@app.post("/menu/roots", summary="List root Sys Menus")
async def list_menu_roots(auth: Auth = Depends(OpenAuth())):
    datas = await crud.MenuDal(auth.db).get_roots()
    return SuccessResponse(datas, count=len(datas))


@app.post("/menu/mine", summary="Menu tree of the current user")
async def list_my_menu(auth: Auth = Depends(AllUserAuth())):
    roles = auth.user.role if auth.user else []
    datas = await crud.MenuDal(auth.db).get_user_menus(roles)
    return SuccessResponse(datas)
