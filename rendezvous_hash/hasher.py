# -*- coding: utf-8 -*-
"""
(C) Rgc <2020956572@qq.com>
All rights reserved
create time '2026/10/18 10:40'

Usage:
打分策略:根据 (key, 成员digest) 计算一个 64位无符号整数分数,分数最高的成员胜出
必须是纯函数:相同输入 永远得到相同分数,并且可以被多个线程同时调用

>>> from rendezvous_hash.utils import Fnv32a
>>> hasher = Hash32Hasher(Fnv32a)
>>> hasher(b'mac:112233445566', b'bar.net')
"""

import hashlib

from .exception import InvalidConfigException
from .utils import Fnv32, Fnv32a, Fnv64, Fnv64a, Crc32, MASK_64, DEFAULT_HASH_NAME, to_bytes


class Hasher(object):
    """打分策略基类,子类只需要实现 score"""

    def score(self, key: bytes, member: bytes) -> int:
        raise NotImplementedError

    def __call__(self, key, member):
        return self.score(key, member)


class FuncHasher(Hasher):
    """把普通函数 (key, member) -> int 包装为 Hasher"""

    def __init__(self, func):
        if not callable(func):
            raise TypeError('func必须是可调用对象')
        self.func = func

    def score(self, key, member):
        return self.func(key, member) & MASK_64

    def __repr__(self):
        return f'{self.__class__.__name__}({self.func!r})'


class _DigestHasher(Hasher):
    """
    使用 hashlib 风格的构造函数:先写入key,再写入成员digest,取 digest() 的前 width 个字节(大端)作为分数
    """
    width = None

    def __init__(self, constructor):
        """

        :param constructor: 无参可调用对象,返回值需要有 update(bytes) 和 digest() 方法,如 Fnv32a,hashlib.md5
        """
        if not callable(constructor):
            raise TypeError('constructor必须是可调用对象')
        self.constructor = constructor

    def score(self, key, member):
        h = self.constructor()
        if key:
            h.update(key)
        if member:
            h.update(member)
        return int.from_bytes(h.digest()[:self.width], 'big')

    def __repr__(self):
        return f'{self.__class__.__name__}({getattr(self.constructor, "__name__", self.constructor)!r})'


class Hash32Hasher(_DigestHasher):
    """32位digest,结果扩展为64位"""
    width = 4


class Hash64Hasher(_DigestHasher):
    """64位digest"""
    width = 8


class DefaultHasher(Hasher):
    """默认打分策略:对 key+member 做 FNV-1a 64位 hash"""

    def score(self, key, member):
        h = Fnv64a()
        if key:
            h.update(key)
        if member:
            h.update(member)
        return h.intdigest()

    def __repr__(self):
        return 'DefaultHasher()'


# 无状态,全局共享一个即可
default_hasher = DefaultHasher()

# 配置中 hash算法名称 与 打分策略 的映射
_named_hashers = {
    'fnv64a': default_hasher,
    'fnv64': Hash64Hasher(Fnv64),
    'fnv32a': Hash32Hasher(Fnv32a),
    'fnv32': Hash32Hasher(Fnv32),
    'crc32': Hash32Hasher(Crc32),
}


def _hashlib_constructor(name):
    def constructor():
        return hashlib.new(name)

    constructor.__name__ = name
    return constructor


def get_hasher(name=None):
    """
    根据名称获取打分策略
    :param name: fnv64a(默认),fnv64,fnv32a,fnv32,crc32 或者 hashlib 支持的算法名称(如 md5,sha1)
    :return:

    Usage:
    >>> get_hasher() # DefaultHasher
    >>> get_hasher('fnv32a')
    >>> get_hasher('md5') # Hash64Hasher,取md5的前8个字节
    """
    if name is None:
        name = DEFAULT_HASH_NAME
    if not isinstance(name, str):
        raise InvalidConfigException('hash算法名称必须是字符串')

    name = name.lower()
    if name in _named_hashers:
        return _named_hashers[name]
    # shake_* 这种 digest() 需要长度参数的算法 不支持
    if name in hashlib.algorithms_available and not name.startswith('shake'):
        return Hash64Hasher(_hashlib_constructor(name))

    raise InvalidConfigException(f'不支持的hash算法:{name}')


def as_hasher(hasher):
    """
    把 Hasher 或 普通函数 统一为 Hasher;None 返回 None
    :param hasher:
    :return:
    """
    if hasher is None or isinstance(hasher, Hasher):
        return hasher
    return FuncHasher(hasher)


def score(hasher, key, member):
    """
    统一 key/member 的类型后 打分,方便测试和调试时使用
    :param hasher: None时使用默认策略
    :param key:
    :param member: 成员digest
    :return:
    """
    hasher = as_hasher(hasher) or default_hasher
    return hasher.score(to_bytes(key), to_bytes(member))
