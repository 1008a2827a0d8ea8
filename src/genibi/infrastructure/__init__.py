"""
GENIBI Infrastructure Layer

External integrations: the chat model provider and metrics.
Providers implement abstract interfaces for testability.
"""
