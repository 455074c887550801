# -*- coding: utf-8 -*-
"""
(C) Rgc <2020956572@qq.com>
All rights reserved
create time '2026/10/18 10:20'

Usage:

"""

# Flask扩展 配置项
# 成员列表;list/tuple时 每个字符串即是成员也是其digest,dict时 key为成员 val为digest
k_members = 'RENDEZVOUS_MEMBERS'
# hash算法名称,可以不设置,默认 fnv64a
k_hash_name = 'RENDEZVOUS_HASH'
# key前缀,只对 use_prefix=True 的查询起作用
k_key_prefix = 'RENDEZVOUS_KEY_PREFIX'
# 日志级别,可以不设置,默认 INFO
k_log_level = 'RENDEZVOUS_LOG_LEVEL'

# 默认hash算法名称
DEFAULT_HASH_NAME = 'fnv64a'

# FNV 算法常量
FNV32_OFFSET_BASIS = 2166136261  # 0x811c9dc5
FNV32_PRIME = 16777619  # 0x01000193
FNV64_OFFSET_BASIS = 14695981039346656037  # 0xcbf29ce484222325
FNV64_PRIME = 1099511628211  # 0x100000001b3

MASK_32 = 0xFFFFFFFF
MASK_64 = 0xFFFFFFFFFFFFFFFF
