"""A small 2D game engine: vector, matrix and angle maths, observer-driven systems and a pygame window and renderer."""

__version__ = "0.1.0"