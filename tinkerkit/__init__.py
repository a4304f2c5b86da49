"""Expression calculator, 2D/3D shape types, an expression editor model and small TCP tools."""

__version__ = "0.1.0"
__all__ = [
    "calculator",
    "echo_client",
    "echo_server",
    "editor",
    "geometry",
    "mathfuncs",
    "operators",
    "showip",
]