"""Video Gateway: video endpoint resolution and search proxying over third-party providers."""

__version__ = "1.0.0"
