"""Observability - Prometheus metrics for the request pipeline."""
