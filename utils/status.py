#!/usr/bin/python
# -*- coding: utf-8 -*-
# @version        : 1.0
# @Create Time    : 2022/8/10
# @File           : status.py
# @desc           : Http status


HTTP_SUCCESS = 200
HTTP_401_UNAUTHORIZED = 401
HTTP_403_FORBIDDEN = 403
