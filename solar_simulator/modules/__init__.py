"""
Solar Simulator Modules

- farms: Static fleet configuration and read-only farm views
- generator: Physical model, tick service, and periodic scheduler
"""
