# -*- coding: utf-8 -*-
"""
(C) Rgc <2020956572@qq.com>
All rights reserved
create time '2026/10/18 14:02'

Usage:

"""
import json

import pytest
from flask import Flask, make_response, request

from rendezvous_hash import RendezvousRouter

app = Flask(__name__)


class Config(object):
    """
    配置类
    """
    DEBUG = True
    RENDEZVOUS_MEMBERS = ['foo.com', 'bar.net']
    RENDEZVOUS_HASH = 'fnv32a'
    RENDEZVOUS_KEY_PREFIX = 'BEI:'


app.config.from_object(Config)
router = RendezvousRouter(app)


def json_resp(result):
    result = json.dumps(result)
    resp = make_response(result)
    resp.headers['Content-Type'] = 'application/json'
    return resp


@app.route("/api/member/<string:key>")
def api_member(key):
    """
    测试 get_member 函数
    :return:
    """
    use_prefix = bool(int(request.values.get('use_prefix', 0)))
    return json_resp(router.get_member(key, use_prefix))


@app.route("/api/get_many")
def api_get_many():
    """
    测试 get_many 函数
    :return:
    """
    keys = json.loads(request.values.get('keys'))
    use_prefix = bool(int(request.values.get('use_prefix', 0)))
    return json_resp(router.get_many(keys, use_prefix))


@pytest.fixture
def client():
    """ 构建测试用例
    """
    app.config["TESTING"] = True
    return app.test_client()


@pytest.fixture
def flask_app():
    """ 空白的app,用于测试 init_app 的配置校验
    """
    _app = Flask(__name__)
    _app.config["TESTING"] = True
    return _app
