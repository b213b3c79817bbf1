from unittest import TestCase

from nftregistry.contracts.roles import RoleRegistry
from nftregistry.db.driver import ContractDriver
from nftregistry.events import MemoryEventSink
from nftregistry.exceptions import Unauthorized, InvalidIdentity
from nftregistry import config

OWNER = 'admin'


class TestRoleRegistry(TestCase):
    def setUp(self):
        self.driver = ContractDriver()
        self.sink = MemoryEventSink()
        self.roles = RoleRegistry(OWNER, driver=self.driver, sink=self.sink)

    def tearDown(self):
        self.driver.flush()

    def test_owner_seeded(self):
        self.assertEqual(self.roles.get_owner(), OWNER)
        self.assertListEqual(self.sink.events, [])

    def test_owner_must_be_a_string(self):
        with self.assertRaises(InvalidIdentity):
            RoleRegistry(42, driver=ContractDriver())

    def test_assign_role(self):
        self.roles.assign_role(OWNER, 'minter', 'alice')

        self.assertTrue(self.roles.has_role('minter', 'alice'))
        self.assertFalse(self.roles.has_role('burner', 'alice'))
        self.assertEqual(self.sink.events[-1], (config.ROLE_ASSIGNED, 'Role: minter, User: alice'))

    def test_assign_is_idempotent(self):
        self.roles.assign_role(OWNER, 'minter', 'alice')
        before = dict(self.driver.items())

        self.roles.assign_role(OWNER, 'minter', 'alice')

        self.assertDictEqual(dict(self.driver.items()), before)
        self.assertTrue(self.roles.has_role('minter', 'alice'))
        self.assertEqual(self.sink.events[-1].details, 'Role: minter, User: alice (already assigned)')

    def test_remove_role(self):
        self.roles.assign_role(OWNER, 'minter', 'alice')
        self.roles.remove_role(OWNER, 'minter', 'alice')

        self.assertFalse(self.roles.has_role('minter', 'alice'))
        self.assertListEqual(self.sink.names(), [config.ROLE_ASSIGNED, config.ROLE_REMOVED])
        self.assertEqual(self.sink.events[-1].details, 'Role: minter, User: alice')

    def test_remove_absent_is_idempotent(self):
        before = dict(self.driver.items())

        self.roles.remove_role(OWNER, 'minter', 'alice')

        self.assertDictEqual(dict(self.driver.items()), before)
        self.assertEqual(self.sink.events[-1].details, 'Role: minter, User: alice (not assigned)')

    def test_non_owner_cannot_assign(self):
        with self.assertRaises(Unauthorized):
            self.roles.assign_role('alice', 'minter', 'alice')

        self.assertFalse(self.roles.has_role('minter', 'alice'))
        self.assertListEqual(self.sink.events, [])

    def test_non_owner_cannot_remove(self):
        self.roles.assign_role(OWNER, 'minter', 'alice')
        self.sink.clear()

        with self.assertRaises(Unauthorized):
            self.roles.remove_role('alice', 'minter', 'alice')

        self.assertTrue(self.roles.has_role('minter', 'alice'))
        self.assertListEqual(self.sink.events, [])

    def test_member_cannot_assign(self):
        self.roles.assign_role(OWNER, 'admin', 'alice')

        with self.assertRaises(Unauthorized):
            self.roles.assign_role('alice', 'minter', 'bob')

    def test_role_based_access(self):
        self.roles.assign_role(OWNER, 'minter', 'alice')

        self.assertTrue(self.roles.role_based_access('alice', 'minter'))
        self.assertFalse(self.roles.role_based_access('alice', 'burner'))
        self.assertFalse(self.roles.role_based_access('bob', 'minter'))

    def test_owner_passes_every_role_check(self):
        self.assertTrue(self.roles.role_based_access(OWNER, 'minter'))
        self.assertTrue(self.roles.role_based_access(OWNER, 'never-assigned'))
        self.assertFalse(self.roles.has_role('minter', OWNER))

    def test_list_role_users(self):
        self.roles.assign_role(OWNER, 'minter', 'alice')
        self.roles.assign_role(OWNER, 'minter', 'bob')
        self.roles.assign_role(OWNER, 'burner', 'carol')
        self.roles.remove_role(OWNER, 'minter', 'bob')

        self.assertSetEqual(self.roles.list_role_users('minter'), {'alice'})
        self.assertSetEqual(self.roles.list_role_users('burner'), {'carol'})
        self.assertSetEqual(self.roles.list_role_users('nobody'), set())

    def test_roles_and_users_with_delimiters(self):
        self.roles.assign_role(OWNER, 'a:b', 'c')
        self.roles.assign_role(OWNER, 'a', 'b:c')

        self.assertTrue(self.roles.has_role('a:b', 'c'))
        self.assertFalse(self.roles.has_role('a', 'b'))
        self.assertSetEqual(self.roles.list_role_users('a'), {'b:c'})
        self.assertSetEqual(self.roles.list_role_users('a:b'), {'c'})

    def test_role_prefix_does_not_leak(self):
        self.roles.assign_role(OWNER, 'mint', 'alice')
        self.roles.assign_role(OWNER, 'minter', 'bob')

        self.assertSetEqual(self.roles.list_role_users('mint'), {'alice'})

    def test_transfer_ownership(self):
        self.roles.transfer_ownership(OWNER, 'root')

        self.assertTrue(self.roles.is_owner('root'))
        self.assertFalse(self.roles.role_based_access(OWNER, 'minter'))

        with self.assertRaises(Unauthorized):
            self.roles.assign_role(OWNER, 'minter', 'alice')

        self.roles.assign_role('root', 'minter', 'alice')
        self.assertTrue(self.roles.has_role('minter', 'alice'))

    def test_ownership_event(self):
        self.roles.transfer_ownership(OWNER, 'root')

        self.assertEqual(self.sink.events[-1],
                         (config.OWNERSHIP_TRANSFERRED, 'PreviousOwner: admin, NewOwner: root'))

    def test_keys_are_namespaced(self):
        self.roles.assign_role(OWNER, 'minter', 'alice')

        for key in self.roles.keys():
            self.assertTrue(key.startswith('roles.'))
