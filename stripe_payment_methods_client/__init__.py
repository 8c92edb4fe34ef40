"""A client library for the payment method card operations of the Stripe API"""

from .client import AuthenticatedClient

__all__ = ("AuthenticatedClient",)
