"""Protocol definitions - collaborator extension points."""

from collectionspine.protocols.repository import CollectionRepository, RepositoryFactory
from collectionspine.protocols.transformer import ItemTransformer

__all__ = [
    "CollectionRepository",
    "RepositoryFactory",
    "ItemTransformer",
]
