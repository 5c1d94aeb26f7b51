"""
Core functionality for the video digest application.

This package contains the pipeline stages: audio extraction, transcription,
metadata retrieval, prompt building and summarization, plus the orchestrator
that ties them together.
"""
