"""
Localización de la plantilla launch.json de un proyecto.

Busca en una lista fija de candidatos, del más específico al más general,
y devuelve el primero que existe. "No encontrado" es un resultado normal
(None), no una excepción: decide quien llama.
"""

from pathlib import Path
from typing import List, Optional

from rich.console import Console

from rdlauncher.core.launch.context import PathLike

LAUNCH_FILE_NAME = "launch.json"


def candidate_paths(workspace_root: PathLike, project_root: PathLike) -> List[Path]:
    """
    Candidatos en orden de prioridad:

    1. <proyecto>/Properties/launch.json
    2. <proyecto>/launch.json
    3. <workspace>/launch.json
    """
    project = Path(project_root)
    return [
        project / "Properties" / LAUNCH_FILE_NAME,
        project / LAUNCH_FILE_NAME,
        Path(workspace_root) / LAUNCH_FILE_NAME,
    ]


def find_launch_file(
    workspace_root: PathLike,
    project_root: PathLike,
    console: Optional[Console] = None,
) -> Optional[Path]:
    """
    Devuelve el primer candidato existente o None.

    Args:
        workspace_root: Raíz del workspace
        project_root: Raíz del proyecto
        console: Console de Rich para diagnóstico (opcional)

    Returns:
        Ruta del launch.json a usar, o None si no existe ninguno
    """
    for path in candidate_paths(workspace_root, project_root):
        if console:
            console.print(f"[dim]Checking {path}[/dim]")
        if path.is_file():
            if console:
                console.print(f"[green]✔ Using {path}[/green]")
            return path
    return None
