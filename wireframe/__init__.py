"""Height-map parsing, a wireframe camera model and supporting utilities."""

__version__ = "0.1.0"