"""
Launch: contexto, tabla de tokens, localización y resolución de launch.json.

Locator y Resolver son funciones puras; writer aplica la secuencia completa.
"""

from rdlauncher.core.launch.context import LaunchContext, to_portable_path
from rdlauncher.core.launch.tokens import TOKEN_TABLE, TokenClass, TokenSpec
from rdlauncher.core.launch.locator import candidate_paths, find_launch_file
from rdlauncher.core.launch.resolver import expand_environment, resolve_template, substitute_tokens
from rdlauncher.core.launch.writer import (
    output_path,
    prepare_launch_file,
    read_template,
    write_launch_file,
)

__all__ = [
    "LaunchContext",
    "to_portable_path",
    "TOKEN_TABLE",
    "TokenClass",
    "TokenSpec",
    "candidate_paths",
    "find_launch_file",
    "substitute_tokens",
    "expand_environment",
    "resolve_template",
    "output_path",
    "read_template",
    "write_launch_file",
    "prepare_launch_file",
]
