"""Emoji catalog batch pipelines."""
from .variants import read_catalog_records, run_variants_pipeline

__all__ = ['read_catalog_records', 'run_variants_pipeline']
