# -*- coding: utf-8 -*-
# @version        : 1.0
# @Create Time    : 2022/3/21
# @File           : logger.py
# @desc           : loguru sinks

import os
import sys
import time
from loguru import logger
from config.settings import LOG_FILE_ENABLE, LOG_DIR, DEVELOPMENT

logger.remove()
logger.add(sys.stderr, level="DEBUG" if DEVELOPMENT else "INFO")

info = None
error = None

if LOG_FILE_ENABLE:
    os.makedirs(LOG_DIR, exist_ok=True)

    log_path_info = os.path.join(LOG_DIR, f'info_{time.strftime("%Y-%m-%d")}.log')
    log_path_error = os.path.join(LOG_DIR, f'error_{time.strftime("%Y-%m-%d")}.log')

    # rotate at midnight, keep 3 days
    info = logger.add(log_path_info, rotation="00:00", retention="3 days", enqueue=True, encoding="UTF-8", level="INFO")
    error = logger.add(log_path_error, rotation="00:00", retention="3 days", enqueue=True, encoding="UTF-8", level="ERROR")
