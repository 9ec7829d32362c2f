#!/usr/bin/env python3
"""
Main entry point for the consolation chat client
"""

from consolation.main import main

if __name__ == "__main__":
    main()
