from .media import EntityMedia, MediaKind, ResolvedMedia

__all__ = [
    "EntityMedia",
    "MediaKind",
    "ResolvedMedia",
]
