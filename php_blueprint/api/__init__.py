"""
PHP Blueprint HTTP API
"""
