"""
IA Coding - Code Generator

A command-line front-end for natural-language-to-code generation that supports:
- Description validation
- Interactive CLI loop (plain and Rich UI)
- One-off validation via script
"""

__version__ = "0.1.0"
