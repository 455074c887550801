# -*- coding: utf-8 -*-
"""
(C) Rgc <2020956572@qq.com>
All rights reserved
create time '2026/10/18 16:40'

Usage:
使用示例
此示例都是 GET请求
>>> curl http://127.0.0.1:5000/api/member/user:1
>>> curl 'http://127.0.0.1:5000/api/get_many?keys=["user:1","user:2"]'
"""
import json

from flask import Flask, request, make_response

from examples.config import Config
from rendezvous_hash import RendezvousRouter

app = Flask(__name__)

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
    获取key对应的节点
    :return:
    """
    use_prefix = bool(int(request.values.get('use_prefix', 0)))
    return json_resp(router.get_member(key, use_prefix))


@app.route("/api/get_many")
def api_get_many():
    """
    获取多个key对应的节点
    :return:
    """
    keys = json.loads(request.values.get('keys'))
    use_prefix = bool(int(request.values.get('use_prefix', 0)))
    return json_resp(router.get_many(keys, use_prefix))


@app.route("/api/members", methods=['POST'])
def api_members():
    """
    替换全部节点,body为json格式的list
    :return:
    """
    members = request.get_json()
    table = router.reset_members(members)
    return json_resp(table.size())


if __name__ == '__main__':
    app.run()
