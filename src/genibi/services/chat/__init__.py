"""Chat services package - assistant replies, prompts and fallbacks."""
