"""File, path, parsing, terminal and PID-file helpers for UNIX programs."""

__version__ = "0.1.0"
__all__ = ["conio", "copyfile", "dirlist", "files", "fparseln", "lfile", "pidfile", "text"]