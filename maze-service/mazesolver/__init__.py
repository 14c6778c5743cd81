"""Maze solving package: oriented search and optimal-route reconstruction."""
