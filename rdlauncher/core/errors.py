"""
Errores del lanzador de depuración remota.

El core solo define excepciones; la CLI se encarga del formato de salida.
Los errores de E/S (OSError) NO se envuelven: se propagan tal cual.
"""


class LauncherError(Exception):
    """Error base de rdlauncher."""
    pass


class LaunchFileNotFoundError(LauncherError):
    """Ningún candidato launch.json existe en las rutas de búsqueda."""

    def __init__(self, message: str = "Could not find launch.json"):
        super().__init__(message)


class NoSelectionError(LauncherError):
    """No hay proyecto seleccionado del que derivar raíces y nombre."""

    def __init__(self, message: str = "There are no selected projects to debug"):
        super().__init__(message)


class ConfigError(LauncherError):
    """Error de configuración (YAML inválido o esquema incorrecto)."""
    pass


class LaunchCommandError(LauncherError):
    """El comando externo de lanzamiento no arrancó o terminó con error."""
    pass
