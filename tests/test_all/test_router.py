# -*- coding: utf-8 -*-
"""
(C) Rgc <2020956572@qq.com>
All rights reserved
create time '2026/10/18 16:20'

Usage:

"""
import pytest

from rendezvous_hash import RendezvousRouter, InvalidConfigException, Hash32Hasher, Fnv32a, default_hasher, \
    empty_table
from tests import TestBase


class TestRouter(TestBase):

    def test_init_app(self, flask_app):
        flask_app.config['RENDEZVOUS_MEMBERS'] = ['foo.com', 'bar.net']
        router = RendezvousRouter()
        assert router.table is empty_table()
        assert router.get_member('k') is None

        router.init_app(flask_app, {'RENDEZVOUS_HASH': 'fnv32a'})
        assert flask_app.extensions['rendezvous_hash'] is router
        assert isinstance(router.hasher, Hash32Hasher)
        assert router.get_member('mac:112233445566') == 'bar.net'
        assert router.get_member(b'mac:112233445566') == 'bar.net'

    def test_config_priority(self, flask_app):
        """ init_app的config > 构造函数的config > app.config
        """
        flask_app.config['RENDEZVOUS_MEMBERS'] = ['a']
        router = RendezvousRouter(flask_app, {'RENDEZVOUS_MEMBERS': ['b', 'c']})
        assert [entry.member for entry in router.table.entries] == ['b', 'c']
        assert router.hasher is default_hasher

        router.init_app(flask_app, {'RENDEZVOUS_MEMBERS': ['d']})
        assert router.get_member('k') == 'd'

    def test_dict_members(self, flask_app):
        flask_app.config['RENDEZVOUS_MEMBERS'] = {'node1': '10.0.0.1:6379', 'node2': b'10.0.0.2:6379'}
        router = RendezvousRouter(flask_app)
        assert router.table.entries[0].digest == b'10.0.0.1:6379'
        assert router.table.entries[1].digest == b'10.0.0.2:6379'
        assert router.get_member('k') in ('node1', 'node2')

    def test_int_key(self, flask_app):
        flask_app.config['RENDEZVOUS_MEMBERS'] = ['a', 'b', 'c']
        router = RendezvousRouter(flask_app)
        for i in range(50):
            assert router.get_member(i) == router.get_member(str(i))
        with pytest.raises(TypeError):
            router.get_member(True)
        with pytest.raises(TypeError):
            router.get_member(1.5)
        with pytest.raises(TypeError):
            router.get_many('abc')

    def test_prefix(self, flask_app):
        flask_app.config['RENDEZVOUS_MEMBERS'] = ['a', 'b', 'c']
        flask_app.config['RENDEZVOUS_KEY_PREFIX'] = 'P:'
        router = RendezvousRouter(flask_app)
        for i in range(50):
            assert router.get_member(i, True) == router.get_member(f'P:{i}')
            assert router.get_member(f'k{i}'.encode('utf8'), True) == router.get_member(f'P:k{i}')
        assert router.get_many(['x', 'y'], True) == [router.get_member('P:x'), router.get_member('P:y')]

    def test_reset_members(self, flask_app):
        flask_app.config['RENDEZVOUS_MEMBERS'] = ['A', 'B']
        flask_app.config['RENDEZVOUS_HASH'] = 'fnv32a'
        router = RendezvousRouter(flask_app)
        old_table = router.table
        keys = [f'key:{i}' for i in range(300)]
        before = router.get_many(keys)

        new_table = router.reset_members(['A', 'B', 'C'])
        assert router.table is new_table
        assert old_table.size() == 2
        assert isinstance(new_table.hasher, Hash32Hasher)

        hasher = Hash32Hasher(Fnv32a)
        for key, old, new in zip(keys, before, router.get_many(keys)):
            assert new == old or new == 'C'
            if new == 'C':
                assert hasher(key.encode('utf8'), b'C') > hasher(key.encode('utf8'), old.encode('utf8'))

    @pytest.mark.parametrize('config', [
        {},
        {'RENDEZVOUS_MEMBERS': []},
        {'RENDEZVOUS_MEMBERS': 'foo.com'},
        {'RENDEZVOUS_MEMBERS': ['foo.com', 1]},
        {'RENDEZVOUS_MEMBERS': {'node1': 1}},
        {'RENDEZVOUS_MEMBERS': ['foo.com'], 'RENDEZVOUS_HASH': 'unknown'},
        {'RENDEZVOUS_MEMBERS': ['foo.com'], 'RENDEZVOUS_KEY_PREFIX': 1},
    ])
    def test_invalid_config(self, flask_app, config):
        with pytest.raises(InvalidConfigException):
            RendezvousRouter(flask_app, config)

    @pytest.mark.parametrize('config', [
        {'RENDEZVOUS_HASH': 'fnv32a', 'RENDEZVOUS_KEY_PREFIX': 'Z:', 'RENDEZVOUS_MEMBERS': []},
        {'RENDEZVOUS_HASH': 'fnv32a', 'RENDEZVOUS_KEY_PREFIX': 'Z:', 'RENDEZVOUS_MEMBERS': ['x', 1]},
        {'RENDEZVOUS_HASH': 'unknown', 'RENDEZVOUS_MEMBERS': ['x']},
        {'RENDEZVOUS_KEY_PREFIX': 1, 'RENDEZVOUS_MEMBERS': ['x']},
    ])
    def test_failed_init_app_keeps_state(self, flask_app, config):
        """ init_app 配置错误时,已有的 hasher,key_prefix,table 都不变
        """
        flask_app.config['RENDEZVOUS_MEMBERS'] = ['A', 'B']
        router = RendezvousRouter(flask_app)
        table = router.table

        with pytest.raises(InvalidConfigException):
            router.init_app(flask_app, config)

        assert router.hasher is default_hasher
        assert router.key_prefix == ''
        assert router.table is table

        # 之后的 reset_members 仍然使用原来的hasher
        assert router.reset_members(['A', 'B']).hasher is default_hasher
        for i in range(100):
            assert router.get_member(f'key:{i}') == table.get_by_text(f'key:{i}')

    def test_config_not_dict(self, flask_app):
        with pytest.raises(InvalidConfigException):
            RendezvousRouter(config=['foo.com'])
        with pytest.raises(InvalidConfigException):
            RendezvousRouter().init_app(flask_app, 'foo.com')
