"""
RectScan CLI - Command-line interface for overlap search.

Usage:
    rectscan scene.json
    rectscan scene.json --render scene.png
    rectscan scene.json --config rectscan.yaml --log-level INFO
"""

__version__ = "1.0.0"
