"""
Main module entry point.

This allows running the heartbeat server as: python -m heartbeat.main
"""

from .server import main

if __name__ == "__main__":
    main()
