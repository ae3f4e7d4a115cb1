"""
Core: lógica pura del lanzador.

ENFORCEMENT:
- Este paquete NO debe importar rdlauncher.cli.
- La CLI importa desde core; nunca al revés.
"""

from rdlauncher.core.errors import (
    ConfigError,
    LaunchCommandError,
    LaunchFileNotFoundError,
    LauncherError,
    NoSelectionError,
)

__all__ = [
    "LauncherError",
    "LaunchFileNotFoundError",
    "NoSelectionError",
    "ConfigError",
    "LaunchCommandError",
]
