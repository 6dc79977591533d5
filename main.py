"""
Entry point for the Person Directory Backend

Usage: python main.py [serve <port>]
"""

import os
import sys

# Add src directory to Python path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), 'src'))

from person_directory.server import main

if __name__ == "__main__":
    main()
