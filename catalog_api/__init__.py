"""Catalog API - CRUD backend for catalog attributes, product types,
products and product variants."""
