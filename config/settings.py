# -*- coding: utf-8 -*-
# @version        : 1.0
# @Create Time    : 2021/10/19
# @File           : settings.py
# @desc           : settings

import os
from fastapi.security import OAuth2PasswordBearer


def env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


"""
Project info
"""
TITLE = "MenuHub"
VERSION = "0.1.0"
DESCRIPTION = "Role based navigation menu server"

"""
env config. development has more debug info
"""
DEVELOPMENT = os.getenv("MENUHUB_ENV", "development") != "production"

if DEVELOPMENT:
    from config.development import *
else:
    from config.production import *

"""
Root dir
"""
BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

"""
Auth config
"""
OAUTH_ENABLE = env_flag("OAUTH_ENABLE", True)
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/auth/login", auto_error=False) if OAUTH_ENABLE else lambda: ""
"""JWT secret key, shared with the identity service issuing the tokens"""
SECRET_KEY = os.getenv("SECRET_KEY", "Good good study! Day day up! Then walk out to have a look at the beautiful world!")
"""JWT algorithm"""
ALGORITHM = "HS256"
"""token expire time (min)"""
ACCESS_TOKEN_EXPIRE_MINUTES = 30
"""roles allowed to change menus"""
ADMIN_ROLES = ["admin", "administrator"]
"""operator recorded in created_by/updated_by when auth is disabled"""
DEFAULT_OPERATOR = "system"

"""
cross solution
"""
CORS_ORIGIN_ENABLE = True
ALLOW_ORIGINS = ["*"]
# allow cookie
ALLOW_CREDENTIALS = True
# all method, get, post, put...
ALLOW_METHODS = ["*"]
# allow header
ALLOW_HEADERS = ["*"]

"""
Logging
"""
LOG_FILE_ENABLE = env_flag("LOG_FILE_ENABLE", True)
LOG_DIR = os.path.join(BASE_DIR, "logs")

"""
global events
"""
EVENTS = [
    "core.event.init_db" if DB_AUTO_CREATE else None,
]

"""
Menu
"""
# delete the whole subtree instead of direct children only
MENU_DEEP_DELETE = env_flag("MENU_DEEP_DELETE", False)
# walk the ancestor chain on parent change to reject multi-hop cycles
MENU_CYCLE_CHECK = env_flag("MENU_CYCLE_CHECK", False)
MENU_MAX_DEPTH = 32

"""
Others
"""
# local log
REQUEST_LOG_RECORD = env_flag("REQUEST_LOG_RECORD", DEVELOPMENT)
# zip http response
HTTP_RESPONSE_ZIP = False
"""
middle wares
"""
MIDDLEWARES = [
    "core.middleware.register_request_log_middleware" if REQUEST_LOG_RECORD else None,
]
