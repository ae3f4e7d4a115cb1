"""
Contexto de lanzamiento: valores derivados una vez por invocación.

Las rutas se guardan tal cual las entrega el host (forma nativa del SO) y
en forma portable (estilo POSIX, sin letra de unidad) para herramientas
que esperan barras normales, p. ej. bash en WSL.
"""

import os
import re
from dataclasses import dataclass
from pathlib import PurePath
from typing import Dict, Optional, Union

from rdlauncher.core.errors import NoSelectionError
from rdlauncher.core.launch.tokens import TokenClass

PathLike = Union[str, "os.PathLike[str]"]

_DRIVE = re.compile(r"^([A-Za-z]):/?")


def to_portable_path(path: PathLike) -> str:
    """
    Convierte una ruta nativa a forma portable.

    C:\\Users\\me\\proj → /C/Users/me/proj
    /home/me/proj      → /home/me/proj
    """
    text = os.fspath(path).replace("\\", "/")
    match = _DRIVE.match(text)
    if match:
        rest = text[match.end():]
        return f"/{match.group(1)}/{rest}" if rest else f"/{match.group(1)}"
    if text and not text.startswith("/"):
        return "/" + text
    return text


def _project_dir_name(project_root: str) -> str:
    # PurePath no entiende '\' en POSIX; se normaliza antes de tomar el nombre
    return PurePath(project_root.replace("\\", "/").rstrip("/")).name


@dataclass(frozen=True)
class LaunchContext:
    """Valores de sustitución para una invocación. Solo lectura."""
    workspace_root: str
    project_root: str
    workspace_root_portable: str
    project_root_portable: str
    project_name: str

    @classmethod
    def from_selection(
        cls,
        workspace_root: Optional[PathLike],
        project_root: Optional[PathLike],
        project_name: Optional[str] = None,
    ) -> "LaunchContext":
        """
        Construye el contexto a partir de la selección del host.

        Args:
            workspace_root: Raíz del workspace (si falta, se usa la del proyecto)
            project_root: Raíz del proyecto seleccionado (obligatoria)
            project_name: Nombre visible; None → nombre del directorio del proyecto

        Raises:
            NoSelectionError: si no hay raíz de proyecto
        """
        if project_root is None or not os.fspath(project_root).strip():
            raise NoSelectionError()

        project = os.fspath(project_root)
        workspace = os.fspath(workspace_root) if workspace_root else project
        if project_name is None:
            project_name = _project_dir_name(project)

        return cls(
            workspace_root=workspace,
            project_root=project,
            workspace_root_portable=to_portable_path(workspace),
            project_root_portable=to_portable_path(project),
            project_name=project_name,
        )

    def values(self) -> Dict[TokenClass, str]:
        """Valor de sustitución de cada clase de token."""
        return {
            TokenClass.WORKSPACE_ROOT: self.workspace_root,
            TokenClass.PROJECT_ROOT: self.project_root,
            TokenClass.PROJECT_NAME: self.project_name,
            TokenClass.WORKSPACE_ROOT_PORTABLE: self.workspace_root_portable,
            TokenClass.PROJECT_ROOT_PORTABLE: self.project_root_portable,
        }
