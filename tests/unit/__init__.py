"""Unit tests for individual components in isolation.

Coverage:
    - extraction/: Normalization, file cleanup, extractors, orchestration
    - models/: Pydantic validation and camelCase serialization
    - quiz/: Prompt construction and LLM response handling

The OCR engine and OpenAI client are replaced with mocks.
"""
