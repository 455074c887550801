# -*- coding: utf-8 -*-
"""
(C) Rgc <2020956572@qq.com>
All rights reserved
create time '2026/10/18 10:20'

Usage:

"""


def str2byte(_str):
    """
    str to bytes
    :param _str:
    :return:
    """
    return bytes(_str, encoding='utf8')


def to_bytes(value):
    """
    把 key/digest 统一转为 bytes;None 视为空bytes
    :param value: None,bytes,bytearray,memoryview,str 或 int
    :return:

    Usage:
    >>> to_bytes('abc')
    >>> b'abc'
    >>> to_bytes(12)
    >>> b'12'
    >>> to_bytes(None)
    >>> b''
    """
    if value is None:
        return b''
    if isinstance(value, bytes):
        return value
    if isinstance(value, (bytearray, memoryview)):
        return bytes(value)
    if isinstance(value, str):
        return str2byte(value)
    if isinstance(value, int) and not isinstance(value, bool):
        return str2byte(str(value))
    raise TypeError(f'不支持的类型:{type(value).__name__}')
