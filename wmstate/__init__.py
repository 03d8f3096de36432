"""Window manager state: geometry, windows, screens, workspaces, tags, focus, layouts and status summaries."""

__version__ = "0.1.0"