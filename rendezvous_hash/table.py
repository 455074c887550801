# -*- coding: utf-8 -*-
"""
(C) Rgc <2020956572@qq.com>
All rights reserved
create time '2026/10/18 11:02'

Usage:
rendezvous(最高随机权重) hash表
对每个成员计算 hasher(key, 成员digest),分数最高的成员胜出;
增加成员时 只有新成员分数超过原胜出者的key会被重新分配,删除成员时 只有属于该成员的key会被重新分配
"""

from collections import namedtuple

from .hasher import default_hasher
from .utils import str2byte

Entry = namedtuple('Entry', ['member', 'digest'])
Entry.__doc__ = """成员及其digest;member 原样返回,digest 参与打分"""


class RendezvousTable(object):
    """
    不可变的 rendezvous hash表,由 Builder 创建
    创建后不再修改,可以被多个线程同时读取
    """
    __slots__ = ('_entries', '_hasher')

    def __init__(self, entries=(), hasher=None):
        """

        :param entries: Entry 序列,会复制为tuple,与调用方不共享
        :param hasher: 打分策略,None时使用默认策略
        """
        self._entries = tuple(entries)
        self._hasher = hasher or default_hasher

    @property
    def entries(self):
        return self._entries

    @property
    def hasher(self):
        return self._hasher

    def size(self):
        """
        成员数量,为0时 所有查询都返回None
        :return:
        """
        return len(self._entries)

    def __len__(self):
        return len(self._entries)

    def get(self, key):
        """
        获取key对应的成员
        :param key: bytes,None视为空bytes
        :return: 成员,没有成员时返回None
        """
        if not self._entries:
            return None
        return self._get(b'' if key is None else key)

    def get_by_text(self, key: str):
        """
        获取字符串key对应的成员
        :param key:
        :return:
        """
        if not self._entries:
            # 空表不做编码转换
            return None
        return self._get(str2byte(key) if key else b'')

    def _get(self, key):
        score = self._hasher.score
        entries = iter(self._entries)

        first = next(entries)
        champion = first.member
        value = score(key, first.digest)

        # 严格大于:分数相同时 先加入的成员胜出
        for entry in entries:
            v = score(key, entry.digest)
            if v > value:
                champion = entry.member
                value = v

        return champion

    def __repr__(self):
        return f'{self.__class__.__name__}(size={len(self._entries)}, hasher={self._hasher!r})'


_empty_table = RendezvousTable()


def empty_table():
    """
    全局共享的 空表,Builder 没有成员时返回此对象
    :return:
    """
    return _empty_table
