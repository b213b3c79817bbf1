from nftregistry.contracts.contract import Contract
from nftregistry.contracts.roles import RoleRegistry
from nftregistry.contracts.tokens import TokenRegistry
from nftregistry.db.driver import ContractDriver
from nftregistry.events import EventSink, LogEventSink
from nftregistry.exceptions import ContractExists
from nftregistry.logger import get_logger
from nftregistry import config

log = get_logger('Client')


class RegistryClient:
    """
    Composition root for registries. Every registry it submits shares the client's
    driver and event sink, and lives for as long as the client does.
    """
    def __init__(self, driver: ContractDriver=None, sink: EventSink=None):
        self.raw_driver = driver if driver is not None else ContractDriver()
        self.sink = sink if sink is not None else LogEventSink()
        self.contracts = {}

    def _register(self, contract: Contract):
        self.contracts[contract.contract] = contract
        log.debug('Submitted {} as {}'.format(type(contract).__name__, contract.contract))
        return contract

    def _check_available(self, name):
        if name in self.contracts:
            raise ContractExists(contract_name=name)

    def submit_tokens(self, owner, name='', symbol='', contract=config.TOKENS_CONTRACT) -> TokenRegistry:
        self._check_available(contract)
        return self._register(TokenRegistry(owner, name=name, symbol=symbol, driver=self.raw_driver,
                                            sink=self.sink, contract=contract))

    def submit_roles(self, owner, contract=config.ROLES_CONTRACT) -> RoleRegistry:
        self._check_available(contract)
        return self._register(RoleRegistry(owner, driver=self.raw_driver, sink=self.sink, contract=contract))

    def get_contract(self, name):
        return self.contracts.get(name)

    def get_contracts(self):
        return sorted(self.contracts.keys())

    def get_var(self, contract, variable, arguments=[]):
        return self.raw_driver.get_var(contract, variable, arguments)

    def remove_contract(self, name):
        if self.contracts.pop(name, None) is not None:
            self.raw_driver.delete_contract(name)

    def flush(self):
        # drops all state along with the registries built on it
        self.raw_driver.flush()
        self.contracts = {}
