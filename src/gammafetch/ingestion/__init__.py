"""Gamma /events ingestion: query building, HTTP fetch, decoding and validation."""

from gammafetch.ingestion.gamma import DEFAULT_TIMEOUT, GAMMA_API_BASE, GammaClient

__all__ = ["GammaClient", "GAMMA_API_BASE", "DEFAULT_TIMEOUT"]
