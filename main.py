#!/usr/bin/env python3
"""
Domain Records Manager - Main Entry Point

This is the main entry point for the Domain Records Manager.
It can be run directly or imported as a module.
"""

from domain_records_manager.cli.main import main

if __name__ == "__main__":
    main()
