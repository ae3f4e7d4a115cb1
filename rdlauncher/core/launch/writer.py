"""
Escritura del launch.json resuelto y secuencia completa Locate → Resolve → Write.

Los errores de E/S (permisos, disco lleno, ruta demasiado larga) se propagan
sin envolver: una invocación que no puede escribir la salida falla entera.
"""

from pathlib import Path
from typing import Mapping, Optional

from rich.console import Console

from rdlauncher.core.errors import LaunchFileNotFoundError
from rdlauncher.core.launch.context import LaunchContext, PathLike
from rdlauncher.core.launch.locator import LAUNCH_FILE_NAME, find_launch_file
from rdlauncher.core.launch.resolver import resolve_template

OUTPUT_DIR_NAME = "bin"


def output_path(project_root: PathLike) -> Path:
    """Ruta de salida: <proyecto>/bin/launch.json."""
    return Path(project_root) / OUTPUT_DIR_NAME / LAUNCH_FILE_NAME


def read_template(path: PathLike) -> str:
    """
    Lee la plantilla como UTF-8.

    El BOM no pasa a la salida y los bytes que no son UTF-8 válido se
    sustituyen por U+FFFD en lugar de abortar la invocación.
    """
    return Path(path).read_text(encoding="utf-8-sig", errors="replace")


def write_launch_file(project_root: PathLike, content: str) -> Path:
    """Crea bin/ si hace falta y sobrescribe el launch.json de salida (UTF-8)."""
    target = output_path(project_root)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(content, encoding="utf-8")
    return target


def prepare_launch_file(
    context: LaunchContext,
    console: Optional[Console] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Path:
    """
    Localiza la plantilla, la resuelve y escribe el resultado.

    Args:
        context: Contexto de la invocación
        console: Console de Rich para diagnóstico (opcional)
        environ: Entorno para la expansión de variables (por defecto: os.environ)

    Returns:
        Ruta del launch.json generado

    Raises:
        LaunchFileNotFoundError: si ningún candidato existe
        OSError: si falla la lectura o la escritura
    """
    template_path = find_launch_file(context.workspace_root, context.project_root, console)
    if template_path is None:
        raise LaunchFileNotFoundError()

    template = read_template(template_path)
    resolved = resolve_template(template, context, environ)
    target = write_launch_file(context.project_root, resolved)

    if console:
        console.print(f"[dim]Wrote {target}[/dim]")
    return target
