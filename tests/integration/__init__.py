"""Integration tests for the HTTP API.

Coverage:
    - Upload endpoints with real PDF, image, and text files
    - Quiz, topic, and tutoring endpoints with a mocked generator
    - Error envelopes, CORS, and health check
    - Quiz generation against the live LLM (when OPENAI_API_KEY is set)
"""
