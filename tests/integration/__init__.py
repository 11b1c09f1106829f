"""
Integration Tests - Search Pipelines, Tools and Servers End to End.
"""
