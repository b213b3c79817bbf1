from nftregistry.contracts.contract import Contract, require_identity
from nftregistry.db.driver import ContractDriver
from nftregistry.db.orm import Variable, Hash
from nftregistry.events import EventSink
from nftregistry.exceptions import Unauthorized, TokenNotFound, AlreadyExists, InvalidTokenId, OwnerMismatch
from nftregistry.execution.transaction import export
from nftregistry.logger import get_logger
from nftregistry import config

log = get_logger('TokenRegistry')


def is_valid_token_id(token_id) -> bool:
    # bool is an int subclass but never a token id
    if isinstance(token_id, bool) or not isinstance(token_id, int):
        return False
    return config.TOKEN_ID_MIN <= token_id <= config.TOKEN_ID_MAX


class TokenRegistry(Contract):
    """
    Non-fungible token ledger.

    Tracks which identity owns each token id, how many tokens each identity holds,
    and who may move them. A token can be moved by its owner, by the single delegate
    the owner approved for that token, or by an operator the owner approved for all
    of their tokens. Burning is reserved for the owner and operators.

    Only the contract owner may mint.
    """
    def __init__(self, owner, name='', symbol='', driver: ContractDriver=None, sink: EventSink=None,
                 contract=config.TOKENS_CONTRACT):
        super().__init__(contract, driver=driver, sink=sink)
        require_identity(owner)

        self._name = Variable(self.contract, 'name', driver=self._driver, t=str, default_value='')
        self._symbol = Variable(self.contract, 'symbol', driver=self._driver, t=str, default_value='')

        self.owners = Hash(self.contract, 'owners', driver=self._driver)
        self.balances = Hash(self.contract, 'balances', driver=self._driver, default_value=0)
        self.approvals = Hash(self.contract, 'approvals', driver=self._driver)
        self.operators = Hash(self.contract, 'operators', driver=self._driver, default_value=False)
        self.uris = Hash(self.contract, 'uris', driver=self._driver)
        self.holdings = Hash(self.contract, 'holdings', driver=self._driver)
        self.burned = Hash(self.contract, 'burned', driver=self._driver, default_value=False)

        self._seed((self._owner, owner), (self._name, name), (self._symbol, symbol))

        log.info('Token registry {} created, owner {}'.format(self.contract, owner))

    def _add_holding(self, owner, token_id):
        self.holdings[owner, token_id] = True
        self.balances[owner] += 1

    def _remove_holding(self, owner, token_id):
        del self.holdings[owner, token_id]

        balance = max(self.balances[owner] - 1, 0)
        self.balances[owner] = balance if balance > 0 else None

    def _existing_owner(self, token_id):
        owner = self.owners[token_id] if is_valid_token_id(token_id) else None
        if owner is None:
            raise TokenNotFound(token_id=token_id)
        return owner

    @export
    def mint(self, caller, recipient, token_id, metadata_uri=None):
        if not is_valid_token_id(token_id):
            raise InvalidTokenId(token_id=token_id)

        self._only_owner(caller, 'mint tokens')
        require_identity(recipient)

        if self.owners[token_id] is not None:
            raise AlreadyExists(token_id=token_id)

        self.owners[token_id] = recipient
        self._add_holding(recipient, token_id)

        if metadata_uri is not None:
            self.uris[token_id] = metadata_uri

        self._emit(config.MINT, 'TokenID: {}, Recipient: {}'.format(token_id, recipient))

    @export
    def transfer(self, caller, sender, to, token_id):
        owner = self._existing_owner(token_id)

        if not self.is_approved_or_owner(caller, token_id):
            raise Unauthorized(caller=caller, action='transfer token {}'.format(token_id))

        if sender != owner:
            raise OwnerMismatch(token_id=token_id, sender=sender, owner=owner)

        require_identity(to)

        self._remove_holding(owner, token_id)
        self.owners[token_id] = to
        self._add_holding(to, token_id)

        del self.approvals[token_id]

        self._emit(config.TRANSFER, 'From: {}, To: {}, TokenID: {}'.format(owner, to, token_id))

    @export
    def approve(self, caller, token_id, delegate):
        """Sets the single delegate of a token. A delegate of None clears it."""
        owner = self._existing_owner(token_id)

        if caller != owner:
            raise Unauthorized(caller=caller, action='approve token {}'.format(token_id))

        self.approvals[token_id] = delegate

        self._emit(config.APPROVAL, 'TokenID: {}, ApprovedAddress: {}'.format(token_id, delegate))

    @export
    def set_approval_for_all(self, owner, operator, approved):
        approved = bool(approved)
        self.operators[owner, operator] = True if approved else None

        self._emit(config.APPROVAL_FOR_ALL, 'Owner: {}, Operator: {}, Approved: {}'.format(owner, operator, approved))

    @export
    def revoke_operator(self, owner, operator):
        if not self.operators[owner, operator]:
            return False

        del self.operators[owner, operator]

        self._emit(config.REVOKE_OPERATOR, 'Owner: {}, Operator: {}'.format(owner, operator))
        return True

    @export
    def burn(self, caller, token_id):
        owner = self._existing_owner(token_id)

        # A single token delegate may move a token but never destroy it
        if caller != owner and not self.is_approved_for_all(owner, caller):
            raise Unauthorized(caller=caller, action='burn token {}'.format(token_id))

        del self.owners[token_id]
        self._remove_holding(owner, token_id)
        del self.approvals[token_id]
        del self.uris[token_id]
        self.burned[token_id] = True

        self._emit(config.BURN, 'TokenID: {}, Owner: {}'.format(token_id, owner))

    def name(self):
        return self._name.get()

    def symbol(self):
        return self._symbol.get()

    def owner_of(self, token_id):
        if not is_valid_token_id(token_id):
            return None
        return self.owners[token_id]

    def balance_of(self, owner):
        return self.balances[owner]

    def get_approved(self, token_id):
        if not is_valid_token_id(token_id):
            return None
        return self.approvals[token_id]

    def is_approved_for_all(self, owner, operator):
        return bool(self.operators[owner, operator])

    def is_approved_or_owner(self, user, token_id):
        owner = self.owner_of(token_id)
        if owner is None:
            return False

        return user == owner or user == self.approvals[token_id] or self.is_approved_for_all(owner, user)

    def token_uri(self, token_id):
        if not is_valid_token_id(token_id):
            return None
        return self.uris[token_id]

    def tokens_of_owner(self, owner):
        return sorted(int(k[0]) for k in self.holdings.keys(owner))

    def was_burned(self, token_id):
        if not is_valid_token_id(token_id):
            return False
        return self.burned[token_id]
