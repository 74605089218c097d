# -*- coding: utf-8 -*-
# @version        : 1.0
# @Create Time    : 2021/10/19
# @File           : router.py
# @desc           : app router

from apps.admin.views import app as admin_app


urlpatterns = [
    {"ApiRouter": admin_app, "prefix": "/admin", "tags": ["Menu Admin"]},
]
