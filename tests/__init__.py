"""Test package for the AI writing assistant.

Structure:
    - unit/: Relay, agent, registry, attachment and config tests
    - integration/: HTTP control surface and webhook flow end to end
    - fakes.py: Fake Stream Chat client and model streams

Vendor services are replaced with fakes; no network access is needed.
Leverages pytest with pytest-check for soft assertions.
"""
