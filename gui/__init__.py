from .app import run_gui

__all__ = ["run_gui"]
