"""
rdlauncher - Remote Debug Launcher.

Localiza la plantilla launch.json de un proyecto, sustituye los tokens
%alias% por rutas y nombre del proyecto y entrega el resultado al lanzador.
"""

__version__ = "1.0.0"
