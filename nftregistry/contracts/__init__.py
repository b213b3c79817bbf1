from nftregistry.contracts.tokens import TokenRegistry
from nftregistry.contracts.roles import RoleRegistry
