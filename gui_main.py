# gui_main.py
import os, sys

# ensure local imports work whether run as a script or as a module
sys.path.append(os.path.dirname(__file__))

from gui import run_gui  # now absolute within the project
from gui.view import DEFAULT_SOURCE_PATH

if __name__ == "__main__":
    run_gui(sys.argv[1] if len(sys.argv) > 1 else DEFAULT_SOURCE_PATH)
