"""Encoder and decoder for CTE tiled grayscale-alpha textures."""
