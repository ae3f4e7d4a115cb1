"""CLI: solo compone comandos; la lógica vive en rdlauncher.core."""
