# -*- coding: utf-8 -*-
"""
(C) Rgc <2020956572@qq.com>
All rights reserved
create time '2026/10/18 10:15'

Usage:
核心的 查表/构建 逻辑不抛异常,这里只有 配置 相关的异常
"""


class RendezvousException(Exception):
    """本包所有异常的基类"""


class InvalidConfigException(RendezvousException):
    """配置错误,如 成员为空,hash算法名称不存在 等"""
