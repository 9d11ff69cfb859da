"""Optional services around the core game (LLM-backed word picking)."""
