"""Game logic for a 3D rolling-ball platformer: maths, input, components, cameras, platforms and the player."""

__version__ = "0.1.0"