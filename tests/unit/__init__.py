"""
Unit tests for the BFHL Classification API.

Test individual components in isolation:
- Classification core (rules, sum, concat string, large numbers)
- Data models (request limits, response envelope)
- Validation error formatting
- Settings and dependencies
- Metrics
"""
