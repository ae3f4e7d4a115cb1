"""
Configuración del lanzador: <workspace>/.rdlauncher.yaml

Ejemplo:

    launch_command: ["code", "--launch-json"]
    launch_timeout: 30

La variable de entorno RDL_LAUNCH_COMMAND (o el .env cargado por la CLI)
tiene prioridad sobre launch_command del YAML.
"""

import os
import shlex
from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError
from rich.console import Console

from rdlauncher.core.errors import ConfigError
from rdlauncher.core.launch.context import PathLike

SETTINGS_FILE_NAME = ".rdlauncher.yaml"
LAUNCH_COMMAND_ENV = "RDL_LAUNCH_COMMAND"


class LauncherSettings(BaseModel):
    launch_command: List[str] = Field(
        default_factory=list,
        description="Comando externo; la ruta del launch.json generado se añade como último argumento",
    )
    launch_timeout: int = Field(30, gt=0, description="Segundos de espera del comando externo")


def settings_path(workspace_root: PathLike) -> Path:
    """Archivo de configuración dentro del workspace."""
    return Path(workspace_root) / SETTINGS_FILE_NAME


def load_settings(workspace_root: PathLike, console: Optional[Console] = None) -> LauncherSettings:
    """
    Carga la configuración del workspace

    Args:
        workspace_root: Raíz del workspace
        console: Console de Rich para salida

    Returns:
        LauncherSettings (valores por defecto si no hay archivo)

    Raises:
        ConfigError: YAML inválido o esquema incorrecto
    """
    path = settings_path(workspace_root)
    data = {}

    if path.exists():
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Error al parsear {path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigError(f"{path} debe contener un mapa YAML")
        if console:
            console.print(f"[dim]Configuración cargada: {path}[/dim]")

    override = os.environ.get(LAUNCH_COMMAND_ENV, "").strip()
    if override:
        data = {**data, "launch_command": shlex.split(override)}

    try:
        return LauncherSettings(**data)
    except ValidationError as e:
        raise ConfigError(f"Configuración inválida en {path}: {e}") from e
