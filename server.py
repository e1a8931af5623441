#!/usr/bin/env python
"""
Entry point for the User API service.

Usage:
    python server.py [--host HOST] [--port PORT] [--env-name NAME] [--log-level LEVEL]
"""
from user_api.cli import main

if __name__ == '__main__':
    main()
