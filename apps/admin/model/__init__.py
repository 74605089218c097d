#!/usr/bin/python
# -*- coding: utf-8 -*-
# @version        : 1.0
# @Create Time    : 2022/7/7 13:41 
# @File           : __init__.py
# @IDE            : PyCharm
# @desc           : admin models


from .menu import SysMenu, SysMenuRole
