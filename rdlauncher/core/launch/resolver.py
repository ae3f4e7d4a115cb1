"""
Resolución de tokens en el texto de la plantilla.

Sustitución puramente textual: el documento nunca se interpreta como JSON.
Primero se sustituyen los tokens %alias% de la tabla (un solo recorrido,
así el texto ya sustituido no se vuelve a escanear en busca de otra clase
de token) y al final se expanden las variables de entorno sobre el
resultado completo, incluido lo que haya producido la sustitución.

La sintaxis de variables es la nativa de la plataforma: %VAR% en Windows,
$VAR y ${VAR} en el resto.
"""

import os
import re
from typing import Mapping, Optional

from rdlauncher.core.launch.context import LaunchContext
from rdlauncher.core.launch.tokens import TokenClass, token_pattern

# $VAR y ${VAR}, como posixpath.expandvars
_POSIX_REFERENCE = re.compile(r"\$(?:\{(?P<braced>[^}]*)\}|(?P<bare>\w+))")


def substitute_tokens(text: str, context: LaunchContext) -> str:
    """Reemplaza cada alias reconocido por el valor del contexto."""
    values = context.values()

    def _replace(match: "re.Match[str]") -> str:
        return values[TokenClass[match.lastgroup]]

    return token_pattern().sub(_replace, text)


def _lookup(environ: Mapping[str, str], name: str, ignore_case: bool) -> Optional[str]:
    if name in environ:
        return environ[name]
    if ignore_case:
        upper = name.upper()
        for key, value in environ.items():
            if key.upper() == upper:
                return value
    return None


def _expand_percent(text: str, environ: Mapping[str, str]) -> str:
    """
    Expansión estilo Windows.

    Si %NOMBRE% no existe, el '%' de cierre puede abrir la siguiente
    referencia: %NOPE%HOME% → %NOPE + expansión de %HOME%.
    """
    out = []
    pos = 0
    while True:
        start = text.find("%", pos)
        end = text.find("%", start + 1) if start >= 0 else -1
        if end < 0:
            out.append(text[pos:])
            return "".join(out)
        out.append(text[pos:start])
        name = text[start + 1:end]
        value = _lookup(environ, name, ignore_case=True) if name else None
        if value is None:
            out.append(text[start:end])
            pos = end
        else:
            out.append(value)
            pos = end + 1


def _expand_posix(text: str, environ: Mapping[str, str]) -> str:
    def _replace(match: "re.Match[str]") -> str:
        name = match.group("braced") if match.group("braced") is not None else match.group("bare")
        value = _lookup(environ, name, ignore_case=False) if name else None
        return match.group(0) if value is None else value

    return _POSIX_REFERENCE.sub(_replace, text)


def expand_environment(
    text: str,
    environ: Optional[Mapping[str, str]] = None,
    platform: Optional[str] = None,
) -> str:
    """
    Expande referencias a variables de entorno.

    Las referencias a variables inexistentes se dejan tal cual y los
    valores expandidos no se vuelven a expandir.

    Args:
        text: Texto a expandir
        environ: Entorno a usar (por defecto: os.environ)
        platform: "nt" para %VAR%, cualquier otro valor para $VAR (por defecto: os.name)
    """
    env = os.environ if environ is None else environ
    if (platform or os.name) == "nt":
        return _expand_percent(text, env)
    return _expand_posix(text, env)


def resolve_template(
    text: str,
    context: LaunchContext,
    environ: Optional[Mapping[str, str]] = None,
    platform: Optional[str] = None,
) -> str:
    """
    Plantilla → texto listo para el lanzador.

    Las variables de entorno se expanden después de los tokens y sobre
    todo el texto: un proyecto llamado %PATH% termina expandido en Windows.
    """
    return expand_environment(substitute_tokens(text, context), environ, platform)
