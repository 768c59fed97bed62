"""relic - configuration model for the relic code-signing service.

This package contains:
- The configuration model, loader and normalizer (``relic.config``)
- A command-line tool for checking configuration files (``relic.interfaces.cli``)
"""
