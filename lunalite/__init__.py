"""Core building blocks of a small game engine: events, layers, input, logging, projects and assets."""

__version__ = "0.1.0"

__all__ = [
    "asset",
    "asset_manager",
    "codes",
    "database",
    "events",
    "ids",
    "importer",
    "input",
    "layers",
    "log",
    "mesh_loader",
    "project",
    "timestep",
]