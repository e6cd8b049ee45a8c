"""Service facades over the remote trading platform."""

from tradeclient.services.orders import OrdersService

__all__ = ["OrdersService"]
