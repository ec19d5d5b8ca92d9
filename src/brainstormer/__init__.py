"""
Multimodal AI Use Case Brainstormer.

Generates use case ideas for generative-AI modalities with Gemini and
learns from the user's "Love It!" / "Boring" feedback.
"""

__version__ = "1.0.0"
