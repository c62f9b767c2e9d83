"""Scene graph for a model viewer: entities, transforms, meshes, lights, keys and WASD controllers."""

__version__ = "1.0.0"
__all__ = ["__version__"]