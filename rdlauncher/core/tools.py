"""
Módulo Tools - invocación del lanzador externo
"""

import subprocess
from pathlib import Path
from typing import List, Optional, Sequence

from rich.console import Console

from rdlauncher.core.errors import LaunchCommandError


def build_launch_command(command: Sequence[str], launch_file: Path) -> List[str]:
    """Comando final: la ruta del launch.json va como un único argumento al final."""
    return [*command, str(launch_file)]


def run_launch_command(
    command: Sequence[str],
    launch_file: Path,
    timeout: int = 30,
    console: Optional[Console] = None,
) -> str:
    """
    Ejecuta el comando externo de lanzamiento

    Args:
        command: Comando y argumentos (sin la ruta del launch.json)
        launch_file: launch.json generado
        timeout: Timeout en segundos
        console: Console de Rich para salida

    Returns:
        stdout del comando

    Raises:
        LaunchCommandError: si el comando no existe, excede el timeout o falla
    """
    if not command:
        raise LaunchCommandError("No hay comando de lanzamiento configurado")

    full_command = build_launch_command(command, launch_file)
    if console:
        console.print(f"[dim]Ejecutando: {' '.join(full_command)}[/dim]")

    try:
        result = subprocess.run(
            full_command,
            capture_output=True,
            text=True,
            timeout=timeout,
            check=False
        )
    except subprocess.TimeoutExpired as e:
        raise LaunchCommandError(f"Timeout ejecutando: {' '.join(full_command)}") from e
    except FileNotFoundError as e:
        raise LaunchCommandError(f"Comando no encontrado: {full_command[0]}") from e

    if result.returncode != 0:
        detail = (result.stderr or result.stdout).strip()
        raise LaunchCommandError(
            f"El comando terminó con código {result.returncode}" + (f": {detail}" if detail else "")
        )
    return result.stdout
