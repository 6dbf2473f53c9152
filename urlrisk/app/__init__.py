"""Scoring and orchestration layer on top of the feature extractor."""
