# -*- coding: utf-8 -*-
"""
(C) Rgc <2020956572@qq.com>
All rights reserved
create time '2026/10/18 10:26'

Usage:
hashlib 风格的 非加密digest,可以直接作为 Hash32Hasher/Hash64Hasher 的构造函数
>>> h = Fnv64a()
>>> h.update(b'a')
>>> hex(h.intdigest())
>>> '0xaf63dc4c8601ec8c'
"""

from zlib import crc32

from .constant import FNV32_OFFSET_BASIS, FNV32_PRIME, FNV64_OFFSET_BASIS, FNV64_PRIME, MASK_32, MASK_64


class _BaseDigest(object):
    """
    digest基类,子类设置 name,digest_size,以及实现 _feed
    digest() 返回的是 整数值的大端bytes
    """
    name = None
    digest_size = None
    block_size = 1

    def __init__(self, data=None):
        self._value = self._initial()
        if data:
            self.update(data)

    def _initial(self):
        raise NotImplementedError

    def _feed(self, value, data):
        raise NotImplementedError

    def update(self, data):
        """
        写入数据,可以多次调用,效果等同于 写入拼接后的数据
        :param data:
        :return:
        """
        self._value = self._feed(self._value, memoryview(data).tobytes())

    def intdigest(self):
        return self._value

    def digest(self):
        return self._value.to_bytes(self.digest_size, 'big')

    def hexdigest(self):
        return self.digest().hex()

    def copy(self):
        other = self.__class__()
        other._value = self._value
        return other


class Fnv32(_BaseDigest):
    """FNV-1 32位"""
    name = 'fnv32'
    digest_size = 4

    def _initial(self):
        return FNV32_OFFSET_BASIS

    def _feed(self, value, data):
        for byte in data:
            value = (value * FNV32_PRIME) & MASK_32
            value ^= byte
        return value


class Fnv32a(_BaseDigest):
    """FNV-1a 32位"""
    name = 'fnv32a'
    digest_size = 4

    def _initial(self):
        return FNV32_OFFSET_BASIS

    def _feed(self, value, data):
        for byte in data:
            value ^= byte
            value = (value * FNV32_PRIME) & MASK_32
        return value


class Fnv64(_BaseDigest):
    """FNV-1 64位"""
    name = 'fnv64'
    digest_size = 8

    def _initial(self):
        return FNV64_OFFSET_BASIS

    def _feed(self, value, data):
        for byte in data:
            value = (value * FNV64_PRIME) & MASK_64
            value ^= byte
        return value


class Fnv64a(_BaseDigest):
    """FNV-1a 64位,默认的打分算法使用此digest"""
    name = 'fnv64a'
    digest_size = 8

    def _initial(self):
        return FNV64_OFFSET_BASIS

    def _feed(self, value, data):
        for byte in data:
            value ^= byte
            value = (value * FNV64_PRIME) & MASK_64
        return value


class Crc32(_BaseDigest):
    """IEEE CRC-32,基于 zlib.crc32,支持分段写入"""
    name = 'crc32'
    digest_size = 4

    def _initial(self):
        return 0

    def _feed(self, value, data):
        return crc32(data, value) & MASK_32
