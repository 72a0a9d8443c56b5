"""
Top-level package for the Pokémon stats browser.

This package exposes the core architecture (records, aggregation, views, UI adapters).
Most code should import from submodules such as:
    poke_browser.core
    poke_browser.views
    poke_browser.ui
"""

__all__: list[str] = []
