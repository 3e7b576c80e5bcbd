"""Player, camera, movement and terrain simulation for a voxel planet."""

__version__ = "0.1.0"