class RegistryError(Exception):
    """
    The base exception for the registry. The fmt directive
    will be overloaded by the inheriting classes

    :ivar msg: The message associated with the error
    """
    fmt = 'An unspecified error occurred'

    def __init__(self, **kwargs):
        msg = self.fmt.format(**kwargs)
        Exception.__init__(self, msg)
        self.kwargs = kwargs


class Unauthorized(RegistryError):
    """
    The caller lacks the privilege required for the operation

    :ivar caller: The identity that attempted the operation
    :ivar action: A short description of what was attempted
    """
    fmt = "'{caller}' is not authorized to {action}"


class NotFound(RegistryError):
    fmt = 'Not found'


class TokenNotFound(NotFound):
    """
    The referenced token was never minted or has been burned

    :ivar token_id: The token id that was looked up
    """
    fmt = 'Token {token_id} does not exist'


class AlreadyExists(RegistryError):
    """
    Mint attempted on a token id that is currently owned

    :ivar token_id: The token id submitted
    """
    fmt = 'Token {token_id} already exists'


class InvalidArgument(RegistryError, ValueError):
    fmt = 'Invalid argument'


class InvalidTokenId(InvalidArgument):
    """
    Token ids are integers in the unsigned 64 bit range, zero excluded

    :ivar token_id: The offending value
    """
    fmt = 'Invalid token id {token_id!r}'


class OwnerMismatch(RegistryError):
    """
    The sender supplied to a transfer is not the recorded owner

    :ivar token_id: The token being transferred
    :ivar sender: The owner claimed by the caller
    :ivar owner: The owner on record
    """
    fmt = "Token {token_id} is owned by '{owner}', not '{sender}'"


class StorageError(RegistryError):
    """
    A storage key could not be built

    :ivar reason: What was wrong with the key
    """
    fmt = 'Bad storage key: {reason}'


class InvalidIdentity(InvalidArgument):
    """
    Identities are opaque strings, anything else cannot be recorded as a holder

    :ivar identity: The offending value
    """
    fmt = 'Invalid identity {identity!r}'


class ContractExists(RegistryError):
    """
    When attempting to submit a registry, found that one with
    the same contract name is already held by the client

    :ivar contract_name: The name of the contract submitted
    """
    fmt = "Contract with name '{contract_name}' already exists"


class InvalidContractName(InvalidArgument):
    """
    Contract names prefix every storage key, so they cannot carry the key separators

    :ivar contract_name: The offending name
    """
    fmt = "Invalid contract name {contract_name!r}"
