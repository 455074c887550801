# -*- coding: utf-8 -*-
"""
(C) Rgc <2020956572@qq.com>
All rights reserved
create time '2026/10/18 14:02'

Usage:

"""


class TestBase:

    @classmethod
    def check_result(cls, resp, data):
        """
        结果校验
        :param resp:
        :param data:
        :return:
        """
        print('返回值:', resp.data)
        assert resp.data == data

    @classmethod
    def make_keys(cls, count=1000):
        """
        生成测试用的key
        :param count:
        :return:
        """
        return [f'key:{i}'.encode('utf8') for i in range(count)]
