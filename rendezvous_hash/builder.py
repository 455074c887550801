# -*- coding: utf-8 -*-
"""
(C) Rgc <2020956572@qq.com>
All rights reserved
create time '2026/10/18 11:20'

Usage:
>>> from rendezvous_hash.utils import Fnv32a
>>> table = Builder().use_hash32(Fnv32a).add_string_members('foo.com', 'bar.net').build()
>>> table.get_by_text('mac:112233445566')
>>> 'bar.net'
"""

from .hasher import Hash32Hasher, Hash64Hasher, as_hasher
from .log_obj import log
from .table import Entry, RendezvousTable, empty_table
from .utils import str2byte


class Builder(object):
    """
    RendezvousTable 的构建器,链式调用
    注意:
    1.非线程安全,多线程请每个线程使用各自的Builder
    2.build() 之后 自动重置,新建的Builder 与 build()之后的Builder 等价
    """

    def __init__(self):
        self._entries = []
        self._hasher = None

    def set_hasher(self, hasher):
        """
        设置下一次 build 使用的打分策略,不设置时使用默认策略(FNV-1a 64位)
        :param hasher: Hasher 或者 普通函数 (key, member) -> int
        :return:
        """
        self._hasher = as_hasher(hasher)
        return self

    def use_hash32(self, constructor):
        """
        使用32位digest构造函数作为打分策略,如 Fnv32a,Crc32
        :param constructor:
        :return:
        """
        return self.set_hasher(Hash32Hasher(constructor))

    def use_hash64(self, constructor):
        """
        使用64位digest构造函数作为打分策略,如 Fnv64a,hashlib.md5
        :param constructor:
        :return:
        """
        return self.set_hasher(Hash64Hasher(constructor))

    def add_entries(self, *entries):
        for entry in entries:
            member, digest = entry
            self._entries.append(Entry(member, digest))
        return self

    def add_member(self, member, digest):
        return self.add_entries(Entry(member, digest))

    def add_string_members(self, *labels):
        """
        添加字符串成员,成员本身的utf8编码即是其digest
        :param labels:
        :return:
        """
        for label in labels:
            self._entries.append(Entry(label, str2byte(label)))
        return self

    def build(self):
        """
        根据当前配置创建 RendezvousTable,并重置此构建器
        :return:
        """
        if not self._entries:
            self._hasher = None
            return empty_table()

        table = RendezvousTable(self._entries, self._hasher)
        log.debug(f'构建rendezvous hash表成功,成员数:{table.size()},hasher:{table.hasher!r}')

        # 重置,新列表 与 已创建的表 互不影响
        self._entries = []
        self._hasher = None
        return table

    def __len__(self):
        return len(self._entries)
