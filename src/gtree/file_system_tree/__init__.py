"""Filtered file system tree scanning and rendering.

This package provides the node type, the recursive scanner, the box-drawing
renderer and the FileSystemTree class that combines them.
"""
