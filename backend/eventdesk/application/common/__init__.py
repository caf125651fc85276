"""Shared building blocks of the request pipeline."""
