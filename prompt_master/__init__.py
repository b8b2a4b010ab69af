"""
Prompt Master - prompt composition package.

This package contains:
- prompt_builder: the composition engine (catalog, resolver, composer, arbiter, emitters).
- session: history, favorites, and saved profiles kept outside the engine.
- config_service: engine defaults loaded from YAML/JSON configuration.
"""
