"""
Utility modules shared by the CLI and the renderer.
"""
