# -*- coding: utf-8 -*-
"""
(C) Rgc <2020956572@qq.com>
All rights reserved
create time '2026/10/18 11:40'

Usage:
提供根据key获取 对应成员(服务器,分区,worker等) 的功能
1.直接使用: Builder 构建 RendezvousTable,然后 get/get_by_text
2.Flask扩展: RendezvousRouter 从 app.config 读取成员,提供 get_member/get_many
"""

from .builder import Builder
from .exception import RendezvousException, InvalidConfigException
from .hasher import Hasher, FuncHasher, Hash32Hasher, Hash64Hasher, DefaultHasher, default_hasher, get_hasher, \
    score
from .log_obj import log, parse_log_level, set_log_level
from .table import Entry, RendezvousTable, empty_table
from .utils import str2byte, to_bytes, Fnv32, Fnv32a, Fnv64, Fnv64a, Crc32
from .utils.constant import *

__all__ = (
    'Builder', 'RendezvousTable', 'Entry', 'empty_table',
    'Hasher', 'FuncHasher', 'Hash32Hasher', 'Hash64Hasher', 'DefaultHasher', 'default_hasher', 'get_hasher', 'score',
    'Fnv32', 'Fnv32a', 'Fnv64', 'Fnv64a', 'Crc32',
    'RendezvousException', 'InvalidConfigException',
    'RendezvousRouter', 'str2byte',
)


class RendezvousRouter(object):
    """rendezvous hash路由 Flask扩展类"""

    def __init__(self, app=None, config=None):
        """
        对象初始化
        :param app:
        :param config:
        """
        # Flask的config必须是dict或者None
        if not (config is None or isinstance(config, dict)):
            raise InvalidConfigException("`config`参数必须是dict的实例或者None")

        # 存储配置
        self.config = config

        self.hasher = default_hasher
        self.key_prefix = ''
        self._table = empty_table()

        # 加载时即配置
        if app is not None:
            self.app = app
            self.init_app(app, config)

    def init_app(self, app, config=None):
        """ Flask扩展懒加载实现 """

        # Flask的config必须是dict或者None
        if not (config is None or isinstance(config, dict)):
            raise InvalidConfigException("`config`参数必须是dict的实例或者None")

        # 更新所有的配置
        basic_config = app.config.copy()
        if self.config:
            basic_config.update(self.config)
        if config:
            basic_config.update(config)
        config = basic_config

        # 先校验全部配置,任何一项出错 都不修改当前对象
        log_level = config.get(k_log_level)
        if log_level is not None:
            try:
                log_level = parse_log_level(log_level)
            except ValueError as e:
                raise InvalidConfigException(str(e)) from e

        hasher = get_hasher(config.get(k_hash_name) or DEFAULT_HASH_NAME)
        key_prefix = config.get(k_key_prefix) or ''
        if not isinstance(key_prefix, str):
            raise InvalidConfigException(f'{k_key_prefix}必须是字符串')

        members = config.get(k_members)
        if not members:
            raise InvalidConfigException(f'成员配置{k_members}必须设置,并且不能为空')
        table = self._build_table(members, hasher)

        # 设置参数
        if log_level is not None:
            set_log_level(log_level)
        self.hasher = hasher
        self.key_prefix = key_prefix
        self._table = table

        self.app = app
        app.extensions["rendezvous_hash"] = self
        log.info(f"成功注册 rendezvous hash 扩展,成员数:{self._table.size()}")

    @property
    def table(self):
        return self._table

    @classmethod
    def _build_table(cls, members, hasher):
        """
        根据成员配置 构建表
        :param members: list/tuple 字符串成员;dict key为成员 val为digest(str或bytes)
        :param hasher:
        :return:
        """
        builder = Builder().set_hasher(hasher)
        if isinstance(members, dict):
            for member, digest in members.items():
                if not isinstance(digest, (str, bytes)):
                    raise InvalidConfigException(f'成员{member!r}的digest必须是str或bytes')
                builder.add_member(member, to_bytes(digest))
        elif isinstance(members, (list, tuple)):
            for member in members:
                if not isinstance(member, str):
                    raise InvalidConfigException(f'成员{member!r}必须是字符串,否则请使用dict配置digest')
            builder.add_string_members(*members)
        else:
            raise InvalidConfigException(f'{k_members}必须是list,tuple或dict')
        return builder.build()

    def reset_members(self, members):
        """
        替换全部成员;新表构建完成后 一次性替换,并发查询 只会看到旧表或新表
        :param members:
        :return:
        """
        table = self._build_table(members, self.hasher)
        self._table = table
        log.info(f'rendezvous hash 成员已更新,成员数:{table.size()}')
        return table

    def _use_prefix(self, key, use_prefix):
        """
        是否使用前缀,使用则添加
        :param key:
        :param use_prefix:
        :return:
        """
        if not isinstance(key, (str, bytes, int)) or isinstance(key, bool):
            raise TypeError
        if not use_prefix or not self.key_prefix:
            return key
        if isinstance(key, bytes):
            return str2byte(self.key_prefix) + key
        return self.key_prefix + str(key)

    @classmethod
    def _lookup(cls, table, key):
        if isinstance(key, str):
            return table.get_by_text(key)
        return table.get(to_bytes(key))

    def get_member(self, key, use_prefix=False):
        """
        获取key对应的成员
        :param key: str,bytes 或 int
        :param use_prefix: 默认不使用添加key的前缀
        :return: 成员,没有成员时返回None
        """
        return self._lookup(self._table, self._use_prefix(key, use_prefix))

    def get_many(self, keys: list, use_prefix=False):
        """
        获取多个key对应的成员
        :param keys:
        :param use_prefix: 默认不使用添加key的前缀
        :return:

        Usage:
        >>>self.get_many(['a','b']) # 默认 use_prefix=False
        >>>self.get_many(['a','b'],True)
        """
        if not isinstance(keys, (list, tuple)):
            raise TypeError
        table = self._table
        result_list = []
        for key in keys:
            result_list.append(self._lookup(table, self._use_prefix(key, use_prefix)))
        return result_list
