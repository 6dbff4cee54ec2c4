"""
testforge - Main Entry Point

Usage:
    # Run unit tests
    python main.py run

    # Run unit and live end-to-end tests
    python main.py run --e2e

    # Check the API target
    python main.py probe /

    # Install the Playwright browser
    python main.py install-browsers

    # Show settings
    python main.py settings
"""

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent))

from testforge.cli import app


if __name__ == "__main__":
    app()
