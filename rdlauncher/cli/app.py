"""
CLI de rdlauncher (Remote Debug Launcher).

Hace de host: recibe la selección (workspace, proyecto, nombre), ejecuta
Locate → Resolve → Write e invoca el lanzador externo configurado.
La lógica vive en rdlauncher.core; aquí solo se compone y se muestran errores.
"""

from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from rdlauncher import __version__
from rdlauncher.core.errors import LaunchFileNotFoundError, LauncherError
from rdlauncher.core.launch import (
    LaunchContext,
    candidate_paths,
    find_launch_file,
    prepare_launch_file,
    read_template,
    resolve_template,
)
from rdlauncher.core.launch.tokens import iter_tokens, lookup_alias
from rdlauncher.core.settings import load_settings, settings_path
from rdlauncher.core.tools import run_launch_command

ERROR_TITLE = "Remote Debug"

app = typer.Typer(
    name="rdlauncher",
    help="Remote Debug Launcher - resuelve launch.json y lanza el depurador remoto",
    add_completion=False,
    no_args_is_help=True,
)

console = Console()

_PROJECT_OPTION = typer.Option(
    None, "--project", "-p", envvar="RDL_PROJECT_ROOT", help="Raíz del proyecto a depurar"
)
_WORKSPACE_OPTION = typer.Option(
    None, "--workspace", "-w", envvar="RDL_WORKSPACE_ROOT",
    help="Raíz del workspace (por defecto: directorio actual)"
)
_NAME_OPTION = typer.Option(
    None, "--name", "-n", help="Nombre del proyecto (por defecto: nombre del directorio)"
)


@app.callback()
def main_callback():
    """Carga el .env del directorio actual antes de leer variables RDL_*."""
    env_file = Path.cwd() / ".env"
    if env_file.exists():
        load_dotenv(env_file)


def show_error(message: str) -> None:
    """Muestra un error al usuario (equivalente al diálogo del IDE)."""
    console.print(Panel.fit(f"[red]✘ {message}[/red]", title=ERROR_TITLE, border_style="red"))


def _build_context(
    project: Optional[Path],
    workspace: Optional[Path],
    name: Optional[str],
) -> LaunchContext:
    # Rutas absolutas: el contexto nunca recibe rutas relativas al cwd
    workspace = (workspace or Path.cwd()).resolve()
    return LaunchContext.from_selection(workspace, project.resolve() if project else None, name)


def _context_or_exit(
    project: Optional[Path],
    workspace: Optional[Path],
    name: Optional[str] = None,
) -> LaunchContext:
    """Contexto de la selección; sin proyecto muestra el error y sale con código 1."""
    try:
        return _build_context(project, workspace, name)
    except LauncherError as e:
        show_error(str(e))
        raise typer.Exit(code=1)


@app.command()
def launch(
    project: Optional[Path] = _PROJECT_OPTION,
    workspace: Optional[Path] = _WORKSPACE_OPTION,
    name: Optional[str] = _NAME_OPTION,
    no_run: bool = typer.Option(False, "--no-run", help="Solo genera bin/launch.json, sin lanzar"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Sin mensajes de diagnóstico"),
):
    """
    Genera <proyecto>/bin/launch.json y ejecuta el lanzador configurado

    Ejemplo: rdlauncher launch -p ./src/App1 -w .
    """
    diagnostics = None if quiet else console
    context = _context_or_exit(project, workspace, name)
    try:
        settings = load_settings(context.workspace_root, diagnostics)
        launch_file = prepare_launch_file(context, diagnostics)
    except (LauncherError, OSError) as e:
        show_error(str(e))
        raise typer.Exit(code=1)

    typer.echo(str(launch_file))

    if no_run:
        return
    if not settings.launch_command:
        if diagnostics:
            console.print(
                f"[yellow]⚠ Sin launch_command en {settings_path(context.workspace_root)}; "
                "no se lanza nada[/yellow]"
            )
        return

    try:
        run_launch_command(
            settings.launch_command, launch_file, timeout=settings.launch_timeout, console=diagnostics
        )
    except LauncherError as e:
        show_error(str(e))
        raise typer.Exit(code=1)

    if diagnostics:
        console.print("[bold green]✅ Depurador lanzado[/bold green]")


@app.command()
def locate(
    project: Optional[Path] = _PROJECT_OPTION,
    workspace: Optional[Path] = _WORKSPACE_OPTION,
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Sin mensajes de diagnóstico"),
):
    """
    Muestra qué launch.json se usaría para el proyecto

    Ejemplo: rdlauncher locate -p ./src/App1
    """
    context = _context_or_exit(project, workspace)
    found = find_launch_file(context.workspace_root, context.project_root, None if quiet else console)
    if found is None:
        show_error(str(LaunchFileNotFoundError()))
        raise typer.Exit(code=1)
    typer.echo(str(found))


@app.command()
def resolve(
    project: Optional[Path] = _PROJECT_OPTION,
    workspace: Optional[Path] = _WORKSPACE_OPTION,
    name: Optional[str] = _NAME_OPTION,
    template: Optional[Path] = typer.Option(
        None, "--template", "-t", help="Plantilla a resolver (por defecto: la localizada)"
    ),
):
    """
    Imprime la plantilla resuelta sin escribir bin/launch.json

    Ejemplo: rdlauncher resolve -p ./src/App1 -t ./launch.json
    """
    context = _context_or_exit(project, workspace, name)
    try:
        if template is None:
            template = find_launch_file(context.workspace_root, context.project_root)
            if template is None:
                raise LaunchFileNotFoundError()
        text = read_template(template)
    except (LauncherError, OSError) as e:
        show_error(str(e))
        raise typer.Exit(code=1)

    typer.echo(resolve_template(text, context), nl=False)


@app.command()
def tokens(
    project: Optional[Path] = _PROJECT_OPTION,
    workspace: Optional[Path] = _WORKSPACE_OPTION,
    name: Optional[str] = _NAME_OPTION,
    alias: Optional[str] = typer.Option(
        None, "--alias", "-a", help="Muestra solo la clase de este alias (ej: projDir)"
    ),
):
    """
    Lista los tokens reconocidos y su valor para la selección actual

    Ejemplo: rdlauncher tokens -p ./src/App1 --alias projDirForBash
    """
    context = _context_or_exit(project, workspace, name)

    selected = None
    if alias is not None:
        selected = lookup_alias(alias)
        if selected is None:
            show_error(f"Token desconocido: %{alias.strip('%')}%")
            raise typer.Exit(code=1)

    values = context.values()
    table = Table(title="Tokens", show_header=True, header_style="bold cyan")
    table.add_column("Clase", style="cyan")
    table.add_column("Token", style="yellow")
    table.add_column("Valor", style="green")
    for token_class, token in iter_tokens():
        if selected is None or token_class is selected:
            table.add_row(token_class.value, token, values[token_class])
    console.print(table)


@app.command("candidates")
def candidates_cmd(
    project: Optional[Path] = _PROJECT_OPTION,
    workspace: Optional[Path] = _WORKSPACE_OPTION,
):
    """Lista las rutas de búsqueda de launch.json en orden de prioridad"""
    context = _context_or_exit(project, workspace)
    table = Table(title="Candidatos", show_header=True, header_style="bold cyan")
    table.add_column("#", style="cyan", width=3)
    table.add_column("Ruta", style="green")
    table.add_column("Existe", style="yellow")
    for index, path in enumerate(candidate_paths(context.workspace_root, context.project_root), 1):
        table.add_row(str(index), str(path), "[green]✔[/green]" if path.is_file() else "[dim]✘[/dim]")
    console.print(table)


@app.command()
def version():
    """Muestra la versión de rdlauncher"""
    console.print(Panel.fit(
        "[bold cyan]rdlauncher[/bold cyan]\n"
        "[dim]Remote Debug Launcher[/dim]\n\n"
        f"[bold]Versión:[/bold] {__version__}",
        border_style="cyan"
    ))


@app.command()
def info():
    """Muestra información sobre rdlauncher"""
    console.print(Panel.fit("[bold cyan]rdlauncher - Información[/bold cyan]", border_style="cyan"))
    table = Table(title="Comandos", show_header=True, header_style="bold cyan")
    table.add_column("Comando", style="cyan", width=12)
    table.add_column("Descripción", style="green")
    table.add_row("launch", "Genera bin/launch.json y ejecuta el lanzador")
    table.add_row("locate", "Muestra el launch.json que se usaría")
    table.add_row("candidates", "Lista las rutas de búsqueda")
    table.add_row("resolve", "Imprime la plantilla resuelta")
    table.add_row("tokens", "Lista los tokens y sus valores")
    console.print(table)
    console.print("\n[dim]Usa 'rdlauncher <comando> --help' para ver opciones[/dim]")


def main():
    app()
