"""Scoring module for the partner portfolio platform.

Implements the partner portfolio scoring chain:
  Dimension scorers → Fit score → Recommendation / Risk flags
  → Portfolio scorer → Portfolio summary
"""
