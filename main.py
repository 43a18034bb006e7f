"""
Entry point for the quiz trainer.

Run with:
    python main.py           # Interactive shell
    python main.py play      # Single game
    python main.py --help
"""
import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent))

from src.cli.main import app

if __name__ == "__main__":
    app()
