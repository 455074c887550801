# -*- coding: utf-8 -*-
"""
(C) Rgc <2020956572@qq.com>
All rights reserved
create time '2026/10/18 10:12'

Usage:

"""

__title__ = 'rendezvous_hash'
__description__ = 'Weighted rendezvous (highest random weight) hashing for routing keys to members.'
__url__ = 'https://github.com/Rgcsh/rendezvous_hash'
__version__ = '0.1.0'
__author__ = 'Rgc'
__author_email__ = '2020956572@qq.com'
__license__ = 'MIT'
