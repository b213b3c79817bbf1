from nftregistry.db.driver import ContractDriver
from nftregistry.db.orm import Variable
from nftregistry.events import EventSink, LogEventSink
from nftregistry.exceptions import Unauthorized, InvalidIdentity, InvalidContractName
from nftregistry.execution.transaction import Transaction, export
from nftregistry import config


def require_identity(identity):
    if not isinstance(identity, str):
        raise InvalidIdentity(identity=identity)


def require_contract_name(name):
    if not isinstance(name, str) or not name:
        raise InvalidContractName(contract_name=name)

    # A separator in the name would nest one contract inside another's key space
    if any(c in name for c in (config.INDEX_SEPARATOR, config.DELIMITER, config.ESCAPE_CHAR)):
        raise InvalidContractName(contract_name=name)


class Contract:
    """
    Base for registries that keep their state under one contract name on a driver
    and are governed by a single escrowed owner.
    """
    def __init__(self, contract, driver: ContractDriver=None, sink: EventSink=None):
        require_contract_name(contract)

        self.contract = contract
        self._driver = driver if driver is not None else ContractDriver()
        self._sink = sink if sink is not None else LogEventSink()
        self._transaction = None

        self._owner = Variable(self.contract, config.OWNER_KEY, driver=self._driver, t=str)

    def _seed(self, *assignments):
        with Transaction(self._driver, name='{}.construct'.format(self.contract)):
            for variable, value in assignments:
                variable.set(value)

    def _emit(self, name, details):
        if self._transaction is not None:
            self._transaction.record(name, details)

    def _only_owner(self, caller, action):
        if caller != self._owner.get():
            raise Unauthorized(caller=caller, action=action)

    def get_owner(self):
        return self._owner.get()

    def is_owner(self, user):
        return user == self._owner.get()

    @export
    def transfer_ownership(self, caller, new_owner):
        self._only_owner(caller, 'transfer contract ownership')
        require_identity(new_owner)

        previous = self._owner.get()
        self._owner.set(new_owner)

        self._emit(config.OWNERSHIP_TRANSFERRED, 'PreviousOwner: {}, NewOwner: {}'.format(previous, new_owner))

    def keys(self):
        return self._driver.get_contract_keys(self.contract)
