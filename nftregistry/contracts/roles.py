from nftregistry.contracts.contract import Contract, require_identity
from nftregistry.db.driver import ContractDriver
from nftregistry.db.orm import Hash
from nftregistry.events import EventSink
from nftregistry.execution.transaction import export
from nftregistry.logger import get_logger
from nftregistry import config

log = get_logger('RoleRegistry')


class RoleRegistry(Contract):
    """
    Named role membership governed by a single contract owner.

    The owner assigns and removes members. Assigning an existing member or removing an
    absent one succeeds without changing state. The owner passes every role check in
    ``role_based_access`` without being a member.
    """
    def __init__(self, owner, driver: ContractDriver=None, sink: EventSink=None, contract=config.ROLES_CONTRACT):
        super().__init__(contract, driver=driver, sink=sink)
        require_identity(owner)

        self.members = Hash(self.contract, 'members', driver=self._driver, default_value=False)

        self._seed((self._owner, owner))

        log.info('Role registry {} created, owner {}'.format(self.contract, owner))

    @export
    def assign_role(self, caller, role, user):
        self._only_owner(caller, "assign role '{}'".format(role))

        if self.members[role, user]:
            self._emit(config.ROLE_ASSIGNED, 'Role: {}, User: {} (already assigned)'.format(role, user))
            return

        self.members[role, user] = True
        self._emit(config.ROLE_ASSIGNED, 'Role: {}, User: {}'.format(role, user))

    @export
    def remove_role(self, caller, role, user):
        self._only_owner(caller, "remove role '{}'".format(role))

        if not self.members[role, user]:
            self._emit(config.ROLE_REMOVED, 'Role: {}, User: {} (not assigned)'.format(role, user))
            return

        del self.members[role, user]
        self._emit(config.ROLE_REMOVED, 'Role: {}, User: {}'.format(role, user))

    def has_role(self, role, user):
        return bool(self.members[role, user])

    def role_based_access(self, user, role):
        return self.is_owner(user) or self.has_role(role, user)

    def list_role_users(self, role):
        return {k[0] for k in self.members.keys(role)}
