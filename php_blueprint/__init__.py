"""
PHP Blueprint

Turns a structured PHP project description into a Gemini prompt and keeps
the spec and generation history on local disk.
"""

__version__ = "0.1.0"
