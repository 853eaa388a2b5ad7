#!/usr/bin/env python3
"""
AI Services - LLM summarization for assignments.

Supports:
- Typhoon (text summaries and vision reading of images/PDFs)
"""

from .typhoon import TyphoonClient, FAILURE_MARKER

__all__ = [
    "TyphoonClient",
    "FAILURE_MARKER",
]
