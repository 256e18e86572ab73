"""Unit tests for individual components in isolation.

Coverage:
    - agent/: Relay flushing and termination, agent message handling,
      registry lifecycle and reaping, attachments, prompts, config
    - chat/: Event bus dispatch and token issuance
    - parsing/: PDF validation and text extraction

Uses mocks for Stream Chat and the model session.
"""
