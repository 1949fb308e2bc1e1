import sys
from pathlib import Path

# Flat layout: modules live at the repository root
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))
