"""Bundled hardening rules and the catalog that binds them."""

from .catalog import DEFAULT_CATALOG, RuleCatalog, build_catalog

__all__ = ["DEFAULT_CATALOG", "RuleCatalog", "build_catalog"]
