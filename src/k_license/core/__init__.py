"""Core pipeline: classify → inspect → resolve template → inject, driven by the walker."""
