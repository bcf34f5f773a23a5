"""Buenos Aires street history: name resolution, search and selection."""

__all__: list[str] = []
