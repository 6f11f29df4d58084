"""
ccparse.commands - Command handlers for the CLI.
"""
