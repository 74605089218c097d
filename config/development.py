# -*- coding: utf-8 -*-
# @version        : 1.0
# @Create Time    : 2021/10/19
# @File           : development.py
# @desc           : development config

import os

"""
Database config
"""
# main database of MenuHub
SQLALCHEMY_DATABASE_URL = os.getenv("DATABASE_URL", "sqlite+aiosqlite:///./menuhub.db")
# create tables on start up
DB_AUTO_CREATE = os.getenv("DB_AUTO_CREATE", "true").lower() in ("1", "true", "yes", "on")
DB_ECHO = False
