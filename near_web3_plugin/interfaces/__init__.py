"""Protocol interfaces for the NEAR and Aurora plugins."""
from .request_manager import RequestManager
from .signed_transaction import SignedTransaction

__all__ = ["RequestManager", "SignedTransaction"]
