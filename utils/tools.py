#!/usr/bin/python
# -*- coding: utf-8 -*-
# @version        : 1.0
# @Create Time    : 2022/10/9 17:09
# @File           : tools.py
# @desc           : tools

import importlib
from core.logger import logger


def load_attr(module: str):
    """
    "package.module.attr" -> attr
    """
    module_pag = importlib.import_module(module[0:module.rindex(".")])
    return getattr(module_pag, module[module.rindex(".") + 1:])


def import_modules(modules: list, desc: str, **kwargs):
    """
    call each "package.module.func" with kwargs, None entries are skipped
    """
    for module in modules:
        if not module:
            continue
        try:
            load_attr(module)(**kwargs)
        except ModuleNotFoundError:
            logger.error(f"ModuleNotFoundError：failed to import {desc}, no module: {module}")
            raise
        except AttributeError:
            logger.error(f"AttributeError：failed to import {desc}, no function: {module}")
            raise


async def import_modules_async(modules: list, desc: str, **kwargs):
    for module in modules:
        if not module:
            continue
        try:
            await load_attr(module)(**kwargs)
        except ModuleNotFoundError:
            logger.error(f"ModuleNotFoundError：failed to import {desc}, no module: {module}")
            raise
        except AttributeError:
            logger.error(f"AttributeError：failed to import {desc}, no function: {module}")
            raise
