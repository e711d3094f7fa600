"""Elasticsearch-backed search capability."""
