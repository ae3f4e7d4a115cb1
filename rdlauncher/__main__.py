"""
Punto de entrada: python -m rdlauncher

Delega a la misma app que el script rdlauncher.
"""

from rdlauncher.cli.app import app

if __name__ == "__main__":
    app()
