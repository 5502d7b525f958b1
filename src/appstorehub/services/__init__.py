"""Services for appstorehub."""

from .throttle import ThrottleRegistry, TokenBucket
from .transport import Transport
from .token_gate import TokenGate
from .appstore import AppStoreService, store_id
from .cache import MemoizedAppStore

__all__ = [
    "ThrottleRegistry",
    "TokenBucket",
    "Transport",
    "TokenGate",
    "AppStoreService",
    "MemoizedAppStore",
    "store_id",
]
