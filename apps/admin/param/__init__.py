#!/usr/bin/python
# -*- coding: utf-8 -*-
# @version        : 1.0
# @Create Time    : 2024/02/12
# @File           : __init__.py
# @IDE            : PyCharm
# @desc           : admin query params

from .menu import MenuParams
