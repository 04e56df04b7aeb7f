"""Test package for the Quiz Generator API.

Structure:
    - unit/: Extraction, prompt, schema, and generator tests in isolation
    - integration/: HTTP endpoint tests through the ASGI app

Test documents are generated on the fly. OCR and the LLM client are mocked
except in tests marked to require an API key.
Leverages pytest with pytest-check for soft assertions.
"""
