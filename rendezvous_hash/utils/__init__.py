# -*- coding: utf-8 -*-
"""
(C) Rgc <2020956572@qq.com>
All rights reserved
create time '2026/10/18 10:20'

Usage:

"""

from .constant import *
from .digest import Fnv32, Fnv32a, Fnv64, Fnv64a, Crc32
from .transform import str2byte, to_bytes
