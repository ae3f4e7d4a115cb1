"""
Tabla de tokens simbólicos reconocidos en la plantilla launch.json.

Cada clase de token acepta varios alias, siempre con la forma %alias%
y sin distinguir mayúsculas. El orden de TOKEN_TABLE es el orden de
sustitución: raíces nativas, nombre, raíces portables.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional, Tuple


class TokenClass(str, Enum):
    WORKSPACE_ROOT = "workspace_root"
    PROJECT_ROOT = "project_root"
    PROJECT_NAME = "project_name"
    WORKSPACE_ROOT_PORTABLE = "workspace_root_portable"
    PROJECT_ROOT_PORTABLE = "project_root_portable"


@dataclass(frozen=True)
class TokenSpec:
    """Una clase de token y sus alias aceptados."""
    token_class: TokenClass
    aliases: Tuple[str, ...]


TOKEN_TABLE: Tuple[TokenSpec, ...] = (
    TokenSpec(TokenClass.WORKSPACE_ROOT, ("workspaceRoot", "SolutionRoot", "root", "rootDir")),
    TokenSpec(TokenClass.PROJECT_ROOT, ("projectRoot", "projectDirectory", "projDir")),
    TokenSpec(TokenClass.PROJECT_NAME, ("projectName", "projName")),
    TokenSpec(
        TokenClass.WORKSPACE_ROOT_PORTABLE,
        ("workspaceRootForBash", "SolutionRootForBash", "rootForBash", "rootDirForBash"),
    ),
    TokenSpec(
        TokenClass.PROJECT_ROOT_PORTABLE,
        ("projectRootForBash", "projectDirectoryForBash", "projDirForBash"),
    ),
)

_ALIAS_INDEX = {
    alias.lower(): spec.token_class
    for spec in TOKEN_TABLE
    for alias in spec.aliases
}


def _build_pattern() -> "re.Pattern[str]":
    groups = "|".join(
        f"(?P<{spec.token_class.name}>{'|'.join(re.escape(a) for a in spec.aliases)})"
        for spec in TOKEN_TABLE
    )
    return re.compile(f"%(?:{groups})%", re.IGNORECASE)


_PATTERN = _build_pattern()


def token_pattern() -> "re.Pattern[str]":
    """
    Patrón único que reconoce cualquier alias de la tabla.

    Cada clase de token es un grupo con nombre; ``match.lastgroup`` indica
    qué clase coincidió. El '%' final obliga a coincidir el alias completo,
    así que %rootForBash% nunca se reconoce como %root%.
    """
    return _PATTERN


def lookup_alias(alias: str) -> Optional[TokenClass]:
    """Devuelve la clase de token de un alias (sin '%'), o None si no existe."""
    return _ALIAS_INDEX.get(alias.strip("%").lower())


def iter_tokens() -> Iterator[Tuple[TokenClass, str]]:
    """Recorre (clase, '%alias%') en el orden de la tabla."""
    for spec in TOKEN_TABLE:
        for alias in spec.aliases:
            yield spec.token_class, f"%{alias}%"
