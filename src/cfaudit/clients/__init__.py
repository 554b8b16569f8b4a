"""Clients for the content systems the rules query."""

from cfaudit.clients.author import AuthorClient
from cfaudit.clients.base import ContentClient
from cfaudit.clients.inventory import InventoryClient

__all__ = ["AuthorClient", "ContentClient", "InventoryClient"]
