# -*- coding: utf-8 -*-
"""
(C) Rgc <2020956572@qq.com>
All rights reserved
create time '2026/10/18 10:12'

Usage:
>>> from rendezvous_hash.log_obj import log
>>> log.info('...')
>>> set_log_level('DEBUG') # 打印 构建表 的日志
"""

import logging
import sys

LOGGER_NAME = "RendezvousHash"


def has_level_handler(logger):
    """Check if there is a handler in the logging chain that will handle the
    given logger's :meth:`effective level <~logging.Logger.getEffectiveLevel>`.
    """
    level = logger.getEffectiveLevel()
    current = logger

    while current:
        if any(handler.level <= level for handler in current.handlers):
            return True

        if not current.propagate:
            break

        current = current.parent

    return False


default_handler = logging.StreamHandler(sys.stdout)
default_handler.setFormatter(logging.Formatter(
    '%(asctime)s | %(levelname)s | %(name)s(%(filename)s:%(lineno)s) | %(message)s'
))


def create_logger(name=LOGGER_NAME, level=logging.INFO):
    """ Get logger and attach the stdout handler if nothing in the chain handles ``level``
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    if not has_level_handler(logger):
        logger.addHandler(default_handler)

    return logger


def parse_log_level(level):
    """
    校验并转换日志级别
    :param level: int 或者 'DEBUG','INFO' 这种名称
    :return: int
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    if not isinstance(level, int) or isinstance(level, bool):
        raise ValueError(f'日志级别错误:{level}')
    return level


def set_log_level(level):
    """
    修改日志级别
    :param level: int 或者 'DEBUG','INFO' 这种名称
    :return:
    """
    log.setLevel(parse_log_level(level))
    return log


log = create_logger()
