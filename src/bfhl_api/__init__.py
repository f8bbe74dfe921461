"""
BFHL Classification API.

Classifies the items of a string array into:
- Odd and even numbers (with their decimal sum)
- Alphabetic tokens (uppercased, plus a reversed alternating-caps concat string)
- Special characters (everything else)

Architecture: FastAPI service + pure classification core
"""

__version__ = "1.0.0"
