# -*- coding: utf-8 -*-
"""
(C) Rgc <2020956572@qq.com>
All rights reserved
create time '2026/10/18 16:40'

Usage:

"""


class Config(object):
    """
    配置类
    """
    DEBUG = True
    RENDEZVOUS_MEMBERS = ['redis://10.0.0.1:6379/0', 'redis://10.0.0.2:6379/0', 'redis://10.0.0.3:6379/0']
    RENDEZVOUS_HASH = 'fnv64a'
    RENDEZVOUS_KEY_PREFIX = 'BEI:'
