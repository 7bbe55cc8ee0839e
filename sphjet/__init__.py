"""Moving-mesh spherical hydrodynamics building blocks: grid, faces, reconstruction, sources, refinement and diagnostics."""

__version__ = "0.1.0"