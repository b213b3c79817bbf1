DELIMITER = ':'
INDEX_SEPARATOR = '.'
ESCAPE_CHAR = '%'

OWNER_KEY = '__owner__'

MAX_HASH_DIMENSIONS = 16

# Token ids are unsigned 64 bit integers, 0 is reserved
TOKEN_ID_MIN = 1
TOKEN_ID_MAX = 2 ** 64 - 1

TOKENS_CONTRACT = 'tokens'
ROLES_CONTRACT = 'roles'

# Notification names
MINT = 'Mint'
TRANSFER = 'Transfer'
APPROVAL = 'Approval'
APPROVAL_FOR_ALL = 'ApprovalForAll'
REVOKE_OPERATOR = 'RevokeOperator'
BURN = 'Burn'
OWNERSHIP_TRANSFERRED = 'OwnershipTransferred'
ROLE_ASSIGNED = 'RoleAssigned'
ROLE_REMOVED = 'RoleRemoved'
