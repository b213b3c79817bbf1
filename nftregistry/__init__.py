from nftregistry.client import RegistryClient
from nftregistry.contracts import TokenRegistry, RoleRegistry
from nftregistry.events import Event, EventSink, LogEventSink, MemoryEventSink, CallbackEventSink
