from .client import RegistryClient, SearchClient

__all__ = ["RegistryClient", "SearchClient"]
